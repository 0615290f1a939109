"""Shared fixtures for board store tests."""

import pytest

from mdkanban.models import BoardDirectory
from mdkanban.model.session import BoardSession

NOW = "2024-05-01T09:30:00.000Z"

INDEX = """# Project Board

## Backlog

- [write-docs](tasks/write-docs.md)
- [fix-login](tasks/fix-login.md)

## In Progress

- [refactor-api](tasks/refactor-api.md)

## Done
"""

TASKS = {
    "write-docs": """---
created: "2024-04-01T00:00:00.000Z"
assigned: alice
progress: 0
tags: []
---

# Write docs
""",
    "fix-login": """---
created: "2024-04-02T00:00:00.000Z"
updated:   '2024-04-02'
assigned: "bob"
progress: 0
tags:
  - bug
  - urgent
priority: 007
---

# Fix login

Users get logged out.
""",
    "refactor-api": """---
created: "2024-04-03T00:00:00.000Z"
started: "2024-04-10T00:00:00.000Z"
progress: 40
---

# Refactor API

Split handlers.
""",
}


def _make_board(path, index=INDEX, tasks=None):
    """Write an index and task files under path and return the BoardDirectory."""
    board = BoardDirectory(path)
    board.tasks_dir.mkdir(parents=True, exist_ok=True)
    board.index_path.write_text(index)
    for name, text in (TASKS if tasks is None else tasks).items():
        board.task_path(name).write_text(text)
    return board


@pytest.fixture
def board_dir(tmp_path):
    """A board directory with three tasks across two columns."""
    return _make_board(tmp_path / "board")


@pytest.fixture
def session(board_dir):
    """A session on board_dir with a fixed clock."""
    return BoardSession(board=board_dir, clock=lambda: NOW)
