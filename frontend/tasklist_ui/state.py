"""
UI state for the task page and the operations that change it.

All mutable page state lives in one UIState object that the caller owns and
passes in explicitly. Local edits are applied only after the API call
succeeds; the list is not re-fetched afterwards.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

import requests
from dateutil import parser as dtparser

log = logging.getLogger(__name__)

FETCH_ERROR = "There was an error fetching the tasks."
CREATE_ERROR = "There was an error creating the task."
UPDATE_ERROR = "There was an error updating the task."
DELETE_ERROR = "There was an error deleting the task."


@dataclass
class UIState:
    tasks: list[dict] = field(default_factory=list)
    edit_task: Optional[dict] = None
    error: Optional[str] = None
    loaded: bool = False


def empty_task() -> dict:
    return {"title": "", "description": "", "dueDate": "", "isCompleted": False}


def with_default_due_date(task: dict) -> dict:
    # blank form field -> now; None is an explicit "no due date" and is kept
    task = dict(task)
    if task.get("dueDate", "") == "":
        task["dueDate"] = datetime.now().isoformat(timespec="seconds")
    return task


def parse_due_date(task: dict) -> Optional[datetime]:
    value = task.get("dueDate")
    if not value:
        return None
    return dtparser.isoparse(value)


def _fail(state: UIState, message: str, exc: Exception) -> None:
    log.error("%s (%s)", message, exc)
    state.error = message


def load_tasks(state: UIState, client) -> None:
    """Fetch the list once; later calls are no-ops."""
    if state.loaded:
        return
    state.loaded = True
    try:
        state.tasks = client.list_tasks()
    except requests.RequestException as e:
        _fail(state, FETCH_ERROR, e)


def create_task(state: UIState, client, new_task: dict) -> bool:
    try:
        created = client.create_task(with_default_due_date(new_task))
    except requests.RequestException as e:
        _fail(state, CREATE_ERROR, e)
        return False
    state.tasks = [*state.tasks, created]
    state.error = None
    return True


def update_task(state: UIState, client, task: dict) -> bool:
    task = with_default_due_date(task)
    try:
        client.update_task(task)
    except requests.RequestException as e:
        _fail(state, UPDATE_ERROR, e)
        return False
    state.tasks = [task if t["id"] == task["id"] else t for t in state.tasks]
    state.edit_task = None
    state.error = None
    return True


def delete_task(state: UIState, client, task_id: int) -> bool:
    try:
        client.delete_task(task_id)
    except requests.RequestException as e:
        _fail(state, DELETE_ERROR, e)
        return False
    state.tasks = [t for t in state.tasks if t["id"] != task_id]
    state.error = None
    return True


def begin_edit(state: UIState, task: dict) -> None:
    # a copy, so cancelling leaves the listed task untouched
    state.edit_task = copy.deepcopy(task)


def cancel_edit(state: UIState) -> None:
    state.edit_task = None


def is_editing(state: UIState, task: dict) -> bool:
    return state.edit_task is not None and state.edit_task.get("id") == task.get("id")
