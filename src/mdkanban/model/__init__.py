"""Board store: load and mutate a board through a session."""

from mdkanban.model.loader import load_board, load_task
from mdkanban.model.session import (
    BoardSession,
    open_session,
    resolve_board_directory,
    scaffold_board_directory,
)
from mdkanban.model.task import create_task, move_task, update_task

__all__ = [
    "BoardSession",
    "create_task",
    "load_board",
    "load_task",
    "move_task",
    "open_session",
    "resolve_board_directory",
    "scaffold_board_directory",
    "update_task",
]
