"""Task mutation operations.

Each operation reads what it needs, builds the new file contents, then
writes the task file before the index so a failed write never leaves the
index pointing at a task that was not written.
"""

import logging
from pathlib import Path

from mdkanban.errors import TaskNotFound
from mdkanban.frontmatter import FrontmatterValue, render_frontmatter
from mdkanban.ids import ensure_unique, slugify
from mdkanban.models import TaskFields
from mdkanban.model.session import BoardSession
from mdkanban.parser import (
    add_task_link,
    build_task_body,
    build_task_file,
    move_task_link,
    parse_task,
    serialize_task,
)

logger = logging.getLogger(__name__)

BACKLOG = "Backlog"
IN_PROGRESS = "In Progress"
DONE = "Done"


def _read_task(session: BoardSession, name: str) -> str:
    path = session.board.task_path(name)
    if not session.files.exists(path):
        raise TaskNotFound(name, path)
    return session.files.read_text(path)


def _write(session: BoardSession, path: Path, text: str) -> None:
    session.mark_write()
    session.files.write_text(path, text)
    logger.info("wrote %s", path)


def move_task(session: BoardSession, name: str, from_column: str, to_column: str) -> None:
    """Move a task's link between columns and stamp its frontmatter.

    Always sets ``updated``. Entering In Progress sets ``started`` if unset;
    entering Done sets ``progress`` to 100 and ``completed`` if unset.
    """
    index_text = session.files.read_text(session.board.index_path)
    task_text = _read_task(session, name)

    now = session.clock()
    current = parse_task(task_text).frontmatter
    updates: dict[str, FrontmatterValue] = {"updated": now}
    if to_column == IN_PROGRESS and not current.get("started"):
        updates["started"] = now
    if to_column == DONE:
        updates["progress"] = 100
        if not current.get("completed"):
            updates["completed"] = now

    new_task = serialize_task(task_text, updates)
    new_index = move_task_link(index_text, name, from_column, to_column)

    _write(session, session.board.task_path(name), new_task)
    _write(session, session.board.index_path, new_index)


def update_task(session: BoardSession, name: str, fields: TaskFields) -> None:
    """Rewrite a task's editable fields, regenerating its title and body.

    ``due`` is only written when given; other frontmatter keys are kept.
    """
    task_text = _read_task(session, name)
    updates: dict[str, FrontmatterValue | None] = {
        "updated": session.clock(),
        "assigned": fields.assigned,
        "progress": fields.progress,
        "tags": list(fields.tags),
        "due": fields.due or None,
    }
    new_task = serialize_task(task_text, updates, title=fields.title, body=fields.content)
    _write(session, session.board.task_path(name), new_task)


def create_task(session: BoardSession, fields: TaskFields) -> str:
    """Write a new task file and add it to the Backlog. Returns its name."""
    index_text = session.files.read_text(session.board.index_path)
    name = ensure_unique(
        slugify(fields.title),
        lambda candidate: session.files.exists(session.board.task_path(candidate)),
    )

    now = session.clock()
    frontmatter_lines = render_frontmatter(
        {
            "created": now,
            "updated": now,
            "assigned": fields.assigned,
            "progress": fields.progress,
            "tags": list(fields.tags),
            "due": fields.due or None,
        }
    )
    content = build_task_file(frontmatter_lines, build_task_body(fields.title, fields.content))

    _write(session, session.board.task_path(name), content)
    _write(session, session.board.index_path, add_task_link(index_text, name, BACKLOG))
    return name
