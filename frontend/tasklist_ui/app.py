from datetime import datetime

import streamlit as st

from tasklist_ui.client import API, TasksClient
from tasklist_ui.state import (
    UIState, begin_edit, cancel_edit, create_task, delete_task, empty_task,
    is_editing, load_tasks, parse_due_date, update_task,
)


def due_date_inputs(key: str, current: datetime | None, none_checked: bool = False) -> str | None:
    """Date and time pickers plus a "No due date" box; None when the box is ticked."""
    no_due = st.checkbox("No due date", value=none_checked, key=f"{key}-none")
    current = current or datetime.now().replace(second=0, microsecond=0)
    col1, col2 = st.columns(2)
    d = col1.date_input("Due date", value=current.date(), key=f"{key}-date")
    t = col2.time_input("Due time", value=current.time(), key=f"{key}-time")
    if no_due:
        return None
    return datetime.combine(d, t).isoformat(timespec="seconds")


def render_error(state: UIState) -> None:
    if state.error:
        st.error(state.error)


def render_create_form(state: UIState, client: TasksClient) -> None:
    st.subheader("Create New Task")
    with st.form("create", clear_on_submit=True):
        new_task = empty_task()
        new_task["title"] = st.text_input("Title", max_chars=100)
        new_task["description"] = st.text_input("Description", max_chars=500)
        new_task["dueDate"] = due_date_inputs("create", None)
        new_task["isCompleted"] = st.checkbox("Completed")
        if st.form_submit_button("Create Task"):
            if not new_task["title"].strip():
                st.warning("Title is required.")
                return
            create_task(state, client, new_task)
            st.rerun()


def render_edit_form(state: UIState, client: TasksClient) -> None:
    task = state.edit_task
    with st.form(f"edit-{task['id']}"):
        task["title"] = st.text_input("Title", value=task["title"], max_chars=100)
        task["description"] = st.text_input("Description", value=task.get("description") or "", max_chars=500)
        task["dueDate"] = due_date_inputs(
            f"edit-{task['id']}", parse_due_date(task), none_checked=task.get("dueDate") is None
        )
        task["isCompleted"] = st.checkbox("Completed", value=task["isCompleted"])
        save, cancel = st.columns(2)
        if save.form_submit_button("Save"):
            update_task(state, client, task)
            st.rerun()
        if cancel.form_submit_button("Cancel"):
            cancel_edit(state)
            st.rerun()


def render_task(state: UIState, client: TasksClient, task: dict) -> None:
    if is_editing(state, task):
        render_edit_form(state, client)
        return
    due = parse_due_date(task)
    st.markdown(f"**{task['title']}** - {task.get('description') or ''}")
    st.caption(
        f"Due: {due.strftime('%Y-%m-%d %H:%M') if due else 'n/a'} | "
        f"Status: {'Completed' if task['isCompleted'] else 'Pending'}"
    )
    edit, delete = st.columns(2)
    edit.button("Edit", key=f"edit-btn-{task['id']}", on_click=begin_edit, args=(state, task))
    delete.button("Delete", key=f"delete-btn-{task['id']}", on_click=delete_task,
                  args=(state, client, task["id"]))


def render_task_list(state: UIState, client: TasksClient) -> None:
    st.subheader("Task List")
    for task in state.tasks:
        with st.container(border=True):
            render_task(state, client, task)


def main() -> None:
    st.set_page_config(page_title="Todo List", layout="centered")
    st.title("Todo List")

    if "ui_state" not in st.session_state:
        st.session_state["ui_state"] = UIState()
    state: UIState = st.session_state["ui_state"]
    client = TasksClient(API)

    load_tasks(state, client)
    render_error(state)
    render_create_form(state, client)
    render_task_list(state, client)


if __name__ == "__main__":
    main()
