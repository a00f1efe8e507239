# tests/test_ui_state.py

from __future__ import annotations

from tasklist_ui import state as ui
from tasklist_ui.state import UIState

from .fakes import FakeTasksClient

SEED = [
    {"id": 1, "title": "Initial Task 1", "description": "Incomplete task 1",
     "dueDate": "2024-12-25T00:00:00", "isCompleted": False},
    {"id": 2, "title": "Initial Task 2", "description": "Complete task 2",
     "dueDate": "2024-12-25T00:00:00", "isCompleted": True},
]


def test_load_fetches_once() -> None:
    client = FakeTasksClient(SEED)
    s = UIState()
    ui.load_tasks(s, client)
    ui.load_tasks(s, client)
    assert [t["id"] for t in s.tasks] == [1, 2]
    assert client.calls == [("list",)]


def test_load_failure_sets_message() -> None:
    s = UIState()
    ui.load_tasks(s, FakeTasksClient(failing={"list"}))
    assert s.error == ui.FETCH_ERROR
    assert s.tasks == []


def test_create_appends_server_task_and_defaults_due_date() -> None:
    client = FakeTasksClient(SEED)
    s = UIState(tasks=list(SEED), error="old failure")
    new = ui.empty_task()
    new["title"] = "Buy milk"

    assert ui.create_task(s, client, new)
    assert s.tasks[-1]["id"] == 3
    assert s.tasks[-1]["dueDate"]
    assert s.error is None
    # the form dict itself is left alone
    assert new["dueDate"] == ""


def test_create_failure_keeps_list() -> None:
    s = UIState(tasks=list(SEED))
    assert not ui.create_task(s, FakeTasksClient(failing={"create"}), {"title": "x"})
    assert s.tasks == SEED
    assert s.error == ui.CREATE_ERROR


def test_edit_and_update_is_applied_locally() -> None:
    client = FakeTasksClient(SEED)
    s = UIState(tasks=list(SEED))
    ui.begin_edit(s, s.tasks[0])
    assert ui.is_editing(s, s.tasks[0])
    assert not ui.is_editing(s, s.tasks[1])

    s.edit_task["isCompleted"] = True
    assert s.tasks[0]["isCompleted"] is False

    assert ui.update_task(s, client, s.edit_task)
    assert s.tasks[0]["isCompleted"] is True
    assert s.edit_task is None
    # no refetch after a successful write
    assert [c[0] for c in client.calls] == ["update"]


def test_only_one_task_in_edit_mode() -> None:
    s = UIState(tasks=list(SEED))
    ui.begin_edit(s, s.tasks[0])
    ui.begin_edit(s, s.tasks[1])
    assert s.edit_task["id"] == 2
    ui.cancel_edit(s)
    assert s.edit_task is None


def test_update_failure_stays_in_edit_mode() -> None:
    s = UIState(tasks=list(SEED))
    ui.begin_edit(s, s.tasks[0])
    s.edit_task["title"] = "changed"
    assert not ui.update_task(s, FakeTasksClient(failing={"update"}), s.edit_task)
    assert s.error == ui.UPDATE_ERROR
    assert s.tasks[0]["title"] == "Initial Task 1"
    assert s.edit_task is not None


def test_delete_removes_row_and_clears_error() -> None:
    s = UIState(tasks=list(SEED), error=ui.FETCH_ERROR)
    assert ui.delete_task(s, FakeTasksClient(SEED), 1)
    assert [t["id"] for t in s.tasks] == [2]
    assert s.error is None


def test_delete_failure() -> None:
    s = UIState(tasks=list(SEED))
    assert not ui.delete_task(s, FakeTasksClient(failing={"delete"}), 1)
    assert s.error == ui.DELETE_ERROR
    assert len(s.tasks) == 2


def test_parse_due_date() -> None:
    assert ui.parse_due_date(SEED[0]).year == 2024
    assert ui.parse_due_date({"dueDate": None}) is None


def test_update_can_clear_due_date() -> None:
    client = FakeTasksClient(SEED)
    s = UIState(tasks=list(SEED))
    ui.begin_edit(s, s.tasks[0])
    s.edit_task["dueDate"] = None

    assert ui.update_task(s, client, s.edit_task)
    assert client.calls[-1][1]["dueDate"] is None
    assert s.tasks[0]["dueDate"] is None


def test_blank_due_date_gets_default() -> None:
    assert ui.with_default_due_date({"dueDate": ""})["dueDate"]
    assert ui.with_default_due_date({})["dueDate"]
    assert ui.with_default_due_date({"dueDate": None})["dueDate"] is None
