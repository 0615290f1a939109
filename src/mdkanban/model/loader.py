"""Load a board from its index and task files."""

import logging

from mdkanban.models import DEFAULT_COLUMNS, DEFAULT_TITLE, BoardData, TaskRecord
from mdkanban.model.session import BoardSession
from mdkanban.parser import parse_index, parse_task

logger = logging.getLogger(__name__)


def _ordered_columns(column_map: dict[str, list[str]]) -> list[str]:
    """Canonical columns first, then any extra columns in document order."""
    extras = [name for name in column_map if name not in DEFAULT_COLUMNS]
    return [*DEFAULT_COLUMNS, *extras]


def load_task(session: BoardSession, name: str, column: str = "") -> TaskRecord:
    """Read and decode one task file."""
    text = session.files.read_text(session.board.task_path(name))
    parsed = parse_task(text)
    return TaskRecord(
        name=name,
        title=parsed.title,
        description=parsed.description,
        frontmatter=parsed.frontmatter,
        column=column,
    )


def load_board(session: BoardSession) -> BoardData:
    """Load the complete board.

    Task names in the index whose file is missing are logged, left out of
    ``tasks`` and listed in ``missing``. A missing index is an error.
    """
    index = parse_index(session.files.read_text(session.board.index_path))

    board = BoardData(
        title=index.title or DEFAULT_TITLE,
        columns=_ordered_columns(index.columns),
        column_map=index.columns,
    )

    for column, names in index.columns.items():
        for name in names:
            if not session.files.exists(session.board.task_path(name)):
                logger.warning("missing task file for '%s' in column %s", name, column)
                board.missing.append(name)
                continue
            board.tasks.append(load_task(session, name, column))

    return board
