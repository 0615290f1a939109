"""File access used by the board store."""

from pathlib import Path
from typing import Protocol

from mdkanban.errors import BoardIOError


class FileAccess(Protocol):
    """Text file operations the store needs from its host.

    Implementations raise BoardIOError when a path cannot be read or written.
    """

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, text: str) -> None: ...

    def exists(self, path: Path) -> bool: ...

    def make_dirs(self, path: Path) -> None: ...


class LocalFileAccess:
    """FileAccess backed by the local filesystem, UTF-8 throughout."""

    def read_text(self, path: Path) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise BoardIOError(path, "read", e.strerror or str(e)) from e

    def write_text(self, path: Path, text: str) -> None:
        # newline="" so line endings are written exactly as given
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise BoardIOError(path, "write", e.strerror or str(e)) from e

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def make_dirs(self, path: Path) -> None:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BoardIOError(path, "create", e.strerror or str(e)) from e
