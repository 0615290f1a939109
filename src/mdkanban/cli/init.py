"""Handler for 'mdkanban init'."""

from pathlib import Path

from mdkanban.cli._common import error, output_json
from mdkanban.errors import BoardError
from mdkanban.model.session import resolve_board_directory, scaffold_board_directory
from mdkanban.models import DEFAULT_COLUMNS


def init_board(args) -> int:
    """Create an empty board in the directory, unless one is already there."""
    path = Path(args.dir).resolve()

    existing = resolve_board_directory(path)
    if existing is not None:
        if args.json:
            output_json({"path": str(existing.path), "created": False})
        else:
            print(f"Board already initialized at {existing.path}")
        return 0

    try:
        board = scaffold_board_directory(path, title=args.title)
    except BoardError as e:
        error(str(e), args.json)

    if args.json:
        output_json({"path": str(board.path), "columns": list(DEFAULT_COLUMNS), "created": True})
    else:
        print(f"Initialized board at {board.path}")
        print(f"Columns: {', '.join(DEFAULT_COLUMNS)}")

    return 0
