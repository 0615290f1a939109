"""Shared fixtures for CLI tests."""

import pytest

from mdkanban.model.session import BoardSession, scaffold_board_directory
from mdkanban.model.task import create_task, move_task
from mdkanban.models import TaskFields


@pytest.fixture
def board_root(tmp_path):
    """A directory holding a scaffolded .kanbn board with two tasks."""
    board = scaffold_board_directory(tmp_path, title="Test Board")
    session = BoardSession(board=board)
    create_task(session, TaskFields(title="First task", content="Description one.", tags=["a"]))
    create_task(session, TaskFields(title="Second task", content="Description two."))
    move_task(session, "second-task", "Backlog", "In Progress")
    return tmp_path
