"""Message dispatch between a board session and a host UI.

Messages are plain dicts with a ``type`` key, in both directions:

    {"type": "loadBoard"}                          -> boardData | needsBoard | boardError
    {"type": "moveTask", "taskName", "fromColumn", "toColumn"}
    {"type": "updateTask", "taskName", "data"}
    {"type": "createTask", "data"}                 -> boardData | boardError
"""

import logging
from typing import Any

from mdkanban.errors import BoardError
from mdkanban.models import TaskFields
from mdkanban.model.loader import load_board
from mdkanban.model.session import BoardSession
from mdkanban.model.task import create_task, move_task, update_task

logger = logging.getLogger(__name__)

Message = dict[str, Any]


def board_data(session: BoardSession) -> Message:
    """Load the board, reporting failures as a boardError message."""
    try:
        board = load_board(session)
    except BoardError as e:
        logger.error("load failed: %s", e)
        return board_error(str(e))
    return {"type": "boardData", "data": board.to_dict()}


def needs_board() -> Message:
    return {"type": "needsBoard"}


def board_error(message: str) -> Message:
    return {"type": "boardError", "message": message}


def _move(session: BoardSession, message: Message) -> None:
    if message["fromColumn"] == message["toColumn"]:
        raise ValueError(f"Task '{message['taskName']}' is already in {message['toColumn']}")
    move_task(session, message["taskName"], message["fromColumn"], message["toColumn"])


def _fields(message: Message) -> TaskFields:
    data = message["data"]
    if not isinstance(data, dict):
        raise KeyError("data")
    return TaskFields.from_dict(data)


def _update(session: BoardSession, message: Message) -> None:
    update_task(session, message["taskName"], _fields(message))


def _create(session: BoardSession, message: Message) -> None:
    create_task(session, _fields(message))


HANDLERS = {
    "moveTask": _move,
    "updateTask": _update,
    "createTask": _create,
}


def handle_message(session: BoardSession | None, message: Message) -> Message | None:
    """Handle one message from the host and return the reply, if any.

    Without a session every request is answered with needsBoard.
    """
    kind = message.get("type")
    if session is None:
        return needs_board()
    if kind in ("ready", "loadBoard"):
        return board_data(session)

    handler = HANDLERS.get(kind)
    if handler is None:
        logger.warning("ignoring unknown message type %r", kind)
        return None

    try:
        handler(session, message)
    except KeyError as e:
        return board_error(f"Message {kind} is missing {e.args[0]!r}")
    except (BoardError, ValueError) as e:
        logger.error("%s failed: %s", kind, e)
        return board_error(str(e))
    return board_data(session)
