"""Data models for markdown kanban boards."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mdkanban.frontmatter import FrontmatterValue

DEFAULT_COLUMNS = ("Backlog", "Ready", "In Progress", "Review", "Done")
DEFAULT_TITLE = "Kanban Board"

INDEX_FILE = "index.md"
TASKS_DIR = "tasks"


@dataclass
class ParsedTask:
    """A decoded task document."""

    frontmatter: dict[str, FrontmatterValue] = field(default_factory=dict)
    title: str = ""
    description: str = ""


@dataclass
class ParsedIndex:
    """A decoded index document: title plus task names per column."""

    title: str = ""
    columns: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class TaskRecord:
    """A task as it appears on the board."""

    name: str
    title: str = ""
    description: str = ""
    frontmatter: dict[str, FrontmatterValue] = field(default_factory=dict)
    column: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "column": self.column,
            "title": self.title,
            "description": self.description,
            "frontmatter": self.frontmatter,
        }


@dataclass
class BoardData:
    """The full board state assembled from the index and task files.

    ``missing`` lists task names referenced by the index whose file is absent.
    """

    title: str = DEFAULT_TITLE
    columns: list[str] = field(default_factory=lambda: list(DEFAULT_COLUMNS))
    column_map: dict[str, list[str]] = field(default_factory=dict)
    tasks: list[TaskRecord] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    def task(self, name: str) -> TaskRecord | None:
        for record in self.tasks:
            if record.name == name:
                return record
        return None

    def to_dict(self) -> dict[str, Any]:
        """Payload shape used by the host message contract."""
        return {
            "title": self.title,
            "columns": list(self.columns),
            "columnMap": {name: list(tasks) for name, tasks in self.column_map.items()},
            "tasks": [record.to_dict() for record in self.tasks],
            "missing": list(self.missing),
        }


@dataclass
class TaskFields:
    """Editable fields of a task, as supplied by update and create."""

    title: str
    assigned: str = ""
    progress: int | float = 0
    due: str | None = None
    tags: list[str] = field(default_factory=list)
    content: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TaskFields":
        return cls(
            title=data.get("title", ""),
            assigned=data.get("assigned", ""),
            progress=data.get("progress", 0),
            due=data.get("due") or None,
            tags=list(data.get("tags") or []),
            content=data.get("content", ""),
        )


@dataclass(frozen=True)
class BoardDirectory:
    """A resolved board root containing index.md and tasks/."""

    path: Path

    @property
    def index_path(self) -> Path:
        return self.path / INDEX_FILE

    @property
    def tasks_dir(self) -> Path:
        return self.path / TASKS_DIR

    def task_path(self, name: str) -> Path:
        return self.tasks_dir / f"{name}.md"
