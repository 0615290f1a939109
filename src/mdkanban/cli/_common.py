"""Shared helpers for CLI command handlers."""

import json
import sys

from mdkanban.errors import BoardError, DirectoryNotABoard
from mdkanban.models import BoardData, TaskRecord
from mdkanban.model.loader import load_board
from mdkanban.model.session import BoardSession, open_session


def open_session_or_die(path: str, json_mode: bool) -> BoardSession:
    """Open the board at path. Exit 1 with a hint if there is none."""
    try:
        return open_session(path)
    except DirectoryNotABoard as e:
        error(f"{e}. Run 'mdkanban init' to create one.", json_mode)


def load_board_or_die(session: BoardSession, json_mode: bool) -> BoardData:
    """Load the board. Exit 1 with the error message on failure."""
    try:
        return load_board(session)
    except BoardError as e:
        error(str(e), json_mode)


def find_task(board: BoardData, name: str, json_mode: bool) -> TaskRecord:
    """Lookup task by name. Exit 1 if it is not on the board."""
    task = board.task(name)
    if task is not None:
        return task
    error(f"Task '{name}' not found.", json_mode)


def find_column(board: BoardData, name: str, json_mode: bool) -> str:
    """Match a column name case-insensitively. Exit 1 listing columns if none match."""
    for column in board.columns:
        if column.lower() == name.lower():
            return column
    available = "\n".join(f"  {column}" for column in board.columns)
    error(f"Column '{name}' not found. Available:\n{available}", json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def warn_missing(board: BoardData, json_mode: bool) -> None:
    """Mention index entries whose task file is absent."""
    if board.missing and not json_mode:
        print(f"warning: missing task files: {', '.join(board.missing)}", file=sys.stderr)
