"""Tests for 'mdkanban task' commands."""

import json
from argparse import Namespace

import pytest

from mdkanban.cli.task import task_add, task_get, task_list, task_move, task_update
from mdkanban.model.loader import load_board
from mdkanban.model.session import open_session


def _board(board_root):
    return load_board(open_session(board_root))


def test_task_list(board_root, capsys):
    args = Namespace(dir=str(board_root), json=False, column=None)
    assert task_list(args) == 0

    out = capsys.readouterr().out
    assert "Backlog\n  first-task  First task\n" in out
    assert "In Progress\n  second-task  Second task\n" in out


def test_task_list_filter_column(board_root, capsys):
    args = Namespace(dir=str(board_root), json=False, column="in progress")
    assert task_list(args) == 0

    out = capsys.readouterr().out
    assert "second-task" in out
    assert "first-task" not in out


def test_task_list_json(board_root, capsys):
    args = Namespace(dir=str(board_root), json=True, column=None)
    assert task_list(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert [t["name"] for t in data] == ["first-task", "second-task"]
    assert data[0]["frontmatter"]["tags"] == ["a"]


def test_task_list_unknown_column(board_root, capsys):
    args = Namespace(dir=str(board_root), json=False, column="Icebox")
    with pytest.raises(SystemExit, match="1"):
        task_list(args)
    assert "Available" in capsys.readouterr().err


def test_task_get(board_root, capsys):
    args = Namespace(dir=str(board_root), json=False, name="first-task")
    assert task_get(args) == 0

    out = capsys.readouterr().out
    assert out.startswith("---\n")
    assert "# First task\n\nDescription one.\n" in out


def test_task_get_json(board_root, capsys):
    args = Namespace(dir=str(board_root), json=True, name="second-task")
    assert task_get(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "Second task"
    assert data["column"] == "In Progress"
    assert "started" in data["frontmatter"]


def test_task_get_not_found(board_root):
    args = Namespace(dir=str(board_root), json=False, name="nope")
    with pytest.raises(SystemExit, match="1"):
        task_get(args)


def test_task_add(board_root, capsys):
    args = Namespace(
        dir=str(board_root),
        json=False,
        title="First task",
        assigned="zoe",
        progress=0,
        due=None,
        tag=["x", "y"],
        body="",
    )
    assert task_add(args) == 0

    assert "Created task first-task-2 in Backlog" in capsys.readouterr().out
    board = _board(board_root)
    assert board.column_map["Backlog"] == ["first-task", "first-task-2"]
    assert board.task("first-task-2").frontmatter["tags"] == ["x", "y"]


def test_task_move(board_root, capsys):
    args = Namespace(dir=str(board_root), json=True, name="first-task", column="done")
    assert task_move(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == {"name": "first-task", "from": "Backlog", "to": "Done"}
    task = _board(board_root).task("first-task")
    assert task.column == "Done"
    assert task.frontmatter["progress"] == 100
    assert "completed" in task.frontmatter


def test_task_move_same_column(board_root, capsys):
    args = Namespace(dir=str(board_root), json=False, name="first-task", column="Backlog")
    with pytest.raises(SystemExit, match="1"):
        task_move(args)
    assert "already in Backlog" in capsys.readouterr().err


def test_task_update_keeps_unspecified_fields(board_root, capsys):
    args = Namespace(
        dir=str(board_root),
        json=False,
        name="first-task",
        title=None,
        assigned="sam",
        progress=None,
        due="2024-09-01",
        tag=None,
        body=None,
    )
    assert task_update(args) == 0

    assert "Updated task first-task" in capsys.readouterr().out
    task = _board(board_root).task("first-task")
    assert task.title == "First task"
    assert task.description == "Description one."
    assert task.frontmatter["assigned"] == "sam"
    assert task.frontmatter["tags"] == ["a"]
    assert task.frontmatter["due"] == "2024-09-01"
    assert task.frontmatter["progress"] == 0


def test_task_update_title_and_body(board_root):
    args = Namespace(
        dir=str(board_root),
        json=False,
        name="second-task",
        title="Renamed",
        assigned=None,
        progress=75,
        due=None,
        tag=[],
        body="Rewritten.",
    )
    assert task_update(args) == 0

    task = _board(board_root).task("second-task")
    assert task.title == "Renamed"
    assert task.description == "Rewritten."
    assert task.frontmatter["progress"] == 75
    assert task.frontmatter["tags"] == []
    assert task.column == "In Progress"
