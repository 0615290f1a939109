"""Handlers for 'mdkanban board' commands."""

import sys

from mdkanban.cli._common import (
    load_board_or_die,
    open_session_or_die,
    output_json,
    warn_missing,
)


def board_summary(args) -> int:
    """Show board summary: title, columns, task counts."""
    session = open_session_or_die(args.dir, args.json)
    board = load_board_or_die(session, args.json)

    columns = [{"name": name, "tasks": len(board.column_map.get(name, []))} for name in board.columns]

    if args.json:
        output_json({"title": board.title, "path": str(session.path), "columns": columns, "missing": board.missing})
    else:
        print(board.title)
        for c in columns:
            tasks = "task" if c["tasks"] == 1 else "tasks"
            print(f"  {c['name']:<16} {c['tasks']} {tasks}")
        warn_missing(board, args.json)

    return 0


def board_get(args) -> int:
    """Dump board index.md content."""
    session = open_session_or_die(args.dir, args.json)
    board = load_board_or_die(session, args.json)

    if args.json:
        output_json(board.to_dict())
    else:
        sys.stdout.write(session.files.read_text(session.board.index_path))

    return 0
