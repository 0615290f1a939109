"""Exceptions raised by board operations."""

from pathlib import Path


class BoardError(Exception):
    """Base class for board errors shown to the user."""


class BoardIOError(BoardError):
    """A board file could not be read or written."""

    def __init__(self, path: str | Path, action: str, reason: str) -> None:
        super().__init__(f"Failed to {action} {path}: {reason}")
        self.path = Path(path)
        self.action = action


class TaskNotFound(BoardIOError):
    """An operation targeted a task whose file does not exist."""

    def __init__(self, name: str, path: str | Path) -> None:
        super().__init__(path, "read", f"task '{name}' not found")
        self.name = name


class DirectoryNotABoard(BoardError):
    """The chosen directory holds no index.md and tasks/ pair."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"No board found in {path}")
        self.path = Path(path)
