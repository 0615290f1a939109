"""Per-board context object and board directory resolution."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from mdkanban.config import DEFAULTS, read_config
from mdkanban.errors import DirectoryNotABoard
from mdkanban.fs import FileAccess, LocalFileAccess
from mdkanban.models import DEFAULT_COLUMNS, BoardDirectory
from mdkanban.parser import build_index

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with milliseconds, e.g. 2024-05-01T09:30:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class BoardSession:
    """Everything a board operation needs, owned by the caller.

    One session per opened board. Nothing decoded from the board is kept
    here; operations re-read files every time.

    ``suppress_until`` is a monotonic deadline during which change
    notifications are assumed to come from our own writes. It is a
    heuristic: an external edit landing inside the window is dropped too.
    """

    board: BoardDirectory
    files: FileAccess = field(default_factory=LocalFileAccess)
    clock: Callable[[], str] = utc_timestamp
    suppress_seconds: float = DEFAULTS["suppress-ms"] / 1000
    suppress_until: float = 0.0

    @property
    def path(self) -> Path:
        return self.board.path

    def mark_write(self, now: float | None = None) -> None:
        """Open the suppression window ahead of a write."""
        now = time.monotonic() if now is None else now
        self.suppress_until = now + self.suppress_seconds

    def is_suppressed(self, now: float | None = None) -> bool:
        now = time.monotonic() if now is None else now
        return now < self.suppress_until


def _is_board(path: Path, files: FileAccess) -> bool:
    board = BoardDirectory(path)
    return files.exists(board.index_path) and files.exists(board.tasks_dir)


def resolve_board_directory(
    path: str | Path,
    files: FileAccess | None = None,
    nested_dir: str | None = None,
) -> BoardDirectory | None:
    """Find the board for a chosen directory.

    Accepts the directory itself when it holds index.md and tasks/, else a
    nested board directory (``.kanbn`` by default) with the same shape.
    Returns None when neither exists.
    """
    files = files or LocalFileAccess()
    path = Path(path)
    if nested_dir is None:
        nested_dir = read_config(path)["nested_dir"]

    if _is_board(path, files):
        return BoardDirectory(path)
    nested = path / nested_dir
    if _is_board(nested, files):
        return BoardDirectory(nested)
    return None


def scaffold_board_directory(
    path: str | Path,
    title: str | None = None,
    files: FileAccess | None = None,
) -> BoardDirectory:
    """Create an empty board under path and return it.

    An existing board at path is returned untouched. Otherwise the nested
    board directory is created with an index of empty canonical columns and
    an empty tasks/ directory. An existing index.md is never overwritten.
    """
    files = files or LocalFileAccess()
    existing = resolve_board_directory(path, files)
    if existing is not None:
        return existing

    config = read_config(path)
    board = BoardDirectory(Path(path) / config["nested_dir"])
    files.make_dirs(board.tasks_dir)
    if not files.exists(board.index_path):
        files.write_text(board.index_path, build_index(title or config["title"], DEFAULT_COLUMNS))
    logger.info("created board at %s", board.path)
    return board


def open_session(path: str | Path, files: FileAccess | None = None) -> BoardSession:
    """Resolve path to a board and build a session for it.

    Raises DirectoryNotABoard when no board is found.
    """
    files = files or LocalFileAccess()
    board = resolve_board_directory(path, files)
    if board is None:
        raise DirectoryNotABoard(path)
    config = read_config(board.path)
    return BoardSession(board=board, files=files, suppress_seconds=config["suppress_ms"] / 1000)
