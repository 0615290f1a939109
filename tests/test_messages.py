"""Tests for host message dispatch."""

from mdkanban.messages import handle_message
from mdkanban.model.session import BoardSession

from .model.conftest import NOW, _make_board


def _session(tmp_path):
    return BoardSession(board=_make_board(tmp_path / "board"), clock=lambda: NOW)


def test_no_session_needs_board():
    assert handle_message(None, {"type": "loadBoard"}) == {"type": "needsBoard"}
    assert handle_message(None, {"type": "moveTask"}) == {"type": "needsBoard"}


def test_load_board(tmp_path):
    reply = handle_message(_session(tmp_path), {"type": "ready"})
    assert reply["type"] == "boardData"
    data = reply["data"]
    assert data["title"] == "Project Board"
    assert data["columnMap"]["Backlog"] == ["write-docs", "fix-login"]
    assert data["tasks"][0]["name"] == "write-docs"
    assert data["tasks"][0]["column"] == "Backlog"


def test_load_board_error(tmp_path):
    session = _session(tmp_path)
    session.board.index_path.unlink()
    reply = handle_message(session, {"type": "loadBoard"})
    assert reply["type"] == "boardError"
    assert "index.md" in reply["message"]


def test_move_task(tmp_path):
    session = _session(tmp_path)
    reply = handle_message(
        session,
        {"type": "moveTask", "taskName": "write-docs", "fromColumn": "Backlog", "toColumn": "Done"},
    )
    assert reply["type"] == "boardData"
    assert reply["data"]["columnMap"]["Done"] == ["write-docs"]
    assert session.is_suppressed()


def test_move_to_same_column_is_rejected(tmp_path):
    session = _session(tmp_path)
    index_before = session.board.index_path.read_text()
    reply = handle_message(
        session,
        {"type": "moveTask", "taskName": "write-docs", "fromColumn": "Backlog", "toColumn": "Backlog"},
    )
    assert reply["type"] == "boardError"
    assert session.board.index_path.read_text() == index_before


def test_update_task(tmp_path):
    reply = handle_message(
        _session(tmp_path),
        {
            "type": "updateTask",
            "taskName": "fix-login",
            "data": {"title": "Renamed", "assigned": "eve", "progress": 5, "tags": [], "content": ""},
        },
    )
    task = next(t for t in reply["data"]["tasks"] if t["name"] == "fix-login")
    assert task["title"] == "Renamed"
    assert task["frontmatter"]["assigned"] == "eve"
    assert task["frontmatter"]["tags"] == []


def test_update_missing_task(tmp_path):
    reply = handle_message(_session(tmp_path), {"type": "updateTask", "taskName": "nope", "data": {"title": "x"}})
    assert reply["type"] == "boardError"
    assert "nope" in reply["message"]


def test_create_task(tmp_path):
    reply = handle_message(
        _session(tmp_path),
        {"type": "createTask", "data": {"title": "Fix Bug", "assigned": "", "progress": 0, "tags": ["x"], "due": None}},
    )
    assert reply["data"]["columnMap"]["Backlog"][-1] == "fix-bug"


def test_missing_fields(tmp_path):
    reply = handle_message(_session(tmp_path), {"type": "moveTask", "taskName": "write-docs"})
    assert reply == {"type": "boardError", "message": "Message moveTask is missing 'fromColumn'"}


def test_unknown_message(tmp_path):
    assert handle_message(_session(tmp_path), {"type": "selectTheme"}) is None


def test_task_data_must_be_an_object(tmp_path):
    session = _session(tmp_path)
    index_before = session.board.index_path.read_text()
    reply = handle_message(session, {"type": "createTask", "data": None})
    assert reply == {"type": "boardError", "message": "Message createTask is missing 'data'"}
    reply = handle_message(session, {"type": "updateTask", "taskName": "write-docs", "data": ["x"]})
    assert reply == {"type": "boardError", "message": "Message updateTask is missing 'data'"}
    assert session.board.index_path.read_text() == index_before


def test_update_without_title_keeps_body(tmp_path):
    session = _session(tmp_path)
    reply = handle_message(
        session,
        {"type": "updateTask", "taskName": "fix-login", "data": {"assigned": "eve", "content": "ignored"}},
    )
    task = next(t for t in reply["data"]["tasks"] if t["name"] == "fix-login")
    assert task["title"] == "Fix login"
    assert task["description"] == "Users get logged out."
    assert task["frontmatter"]["assigned"] == "eve"
