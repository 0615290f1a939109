"""Handlers for 'mdkanban task' commands."""

import sys

from mdkanban.cli._common import (
    error,
    find_column,
    find_task,
    load_board_or_die,
    open_session_or_die,
    output_json,
    output_result,
    warn_missing,
)
from mdkanban.errors import BoardError
from mdkanban.models import TaskFields, TaskRecord
from mdkanban.model.task import create_task, move_task, update_task


def _current_fields(task: TaskRecord) -> TaskFields:
    """TaskFields holding a task's present values."""
    meta = task.frontmatter
    tags = meta.get("tags")
    due = meta.get("due")
    progress = meta.get("progress")
    return TaskFields(
        title=task.title,
        assigned=str(meta.get("assigned") or ""),
        progress=progress if isinstance(progress, (int, float)) else 0,
        due=str(due) if due else None,
        tags=list(tags) if isinstance(tags, list) else [],
        content=task.description,
    )


def task_list(args) -> int:
    """List tasks grouped by column."""
    session = open_session_or_die(args.dir, args.json)
    board = load_board_or_die(session, args.json)
    column_filter = find_column(board, args.column, args.json) if args.column else None

    if args.json:
        items = [t.to_dict() for t in board.tasks if column_filter in (None, t.column)]
        output_json(items)
        return 0

    for column in board.columns:
        if column_filter and column != column_filter:
            continue
        print(column)
        for task in board.tasks:
            if task.column == column:
                print(f"  {task.name}  {task.title}")
    warn_missing(board, args.json)

    return 0


def task_get(args) -> int:
    """Dump task markdown content."""
    session = open_session_or_die(args.dir, args.json)
    board = load_board_or_die(session, args.json)
    task = find_task(board, args.name, args.json)

    if args.json:
        output_json(task.to_dict())
    else:
        sys.stdout.write(session.files.read_text(session.board.task_path(task.name)))

    return 0


def task_add(args) -> int:
    """Create a new task in the Backlog."""
    session = open_session_or_die(args.dir, args.json)

    fields = TaskFields(
        title=args.title,
        assigned=args.assigned,
        progress=args.progress,
        due=args.due,
        tags=args.tag or [],
        content=args.body,
    )
    try:
        name = create_task(session, fields)
    except BoardError as e:
        error(str(e), args.json)

    output_result(
        {"name": name, "title": args.title, "column": "Backlog"},
        f"Created task {name} in Backlog",
        args.json,
    )

    return 0


def task_move(args) -> int:
    """Move a task to another column."""
    session = open_session_or_die(args.dir, args.json)
    board = load_board_or_die(session, args.json)
    task = find_task(board, args.name, args.json)
    target = find_column(board, args.column, args.json)

    if task.column == target:
        error(f"Task '{task.name}' is already in {target}.", args.json)

    try:
        move_task(session, task.name, task.column, target)
    except BoardError as e:
        error(str(e), args.json)

    output_result(
        {"name": task.name, "from": task.column, "to": target},
        f"Moved task {task.name} from {task.column} to {target}",
        args.json,
    )

    return 0


def task_update(args) -> int:
    """Change a task's fields. Options not given keep their current value."""
    session = open_session_or_die(args.dir, args.json)
    board = load_board_or_die(session, args.json)
    task = find_task(board, args.name, args.json)

    fields = _current_fields(task)
    if args.title is not None:
        fields.title = args.title
    if args.assigned is not None:
        fields.assigned = args.assigned
    if args.progress is not None:
        fields.progress = args.progress
    if args.due is not None:
        fields.due = args.due
    if args.tag is not None:
        fields.tags = args.tag
    if args.body is not None:
        fields.content = args.body

    try:
        update_task(session, task.name, fields)
    except BoardError as e:
        error(str(e), args.json)

    output_result({"name": task.name, "title": fields.title}, f"Updated task {task.name}", args.json)

    return 0
