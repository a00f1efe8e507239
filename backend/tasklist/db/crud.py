import logging
from typing import List, Optional
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session, select
from .models import Task
from ..core.errors import TaskIdMismatchError, TaskNotFoundError

log = logging.getLogger(__name__)

# Fields replaced wholesale by update_task; updates are not partial patches.
REPLACEABLE_FIELDS = ("title", "description", "due_date", "is_completed")


def list_tasks(session: Session, is_completed: Optional[bool] = None,
               sort_descending: bool = False) -> List[Task]:
    stmt = select(Task)
    if is_completed is not None:
        stmt = stmt.where(Task.is_completed == is_completed)
    order = Task.due_date.desc() if sort_descending else Task.due_date.asc()
    stmt = stmt.order_by(order, Task.id)
    return list(session.exec(stmt).all())


def get_task(session: Session, task_id: int) -> Task:
    task = session.get(Task, task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


def task_exists(session: Session, task_id: int) -> bool:
    return session.exec(select(Task.id).where(Task.id == task_id)).first() is not None


def create_task(session: Session, task: Task) -> Task:
    task.id = None  # the store assigns identity
    session.add(task)
    session.commit()
    session.refresh(task)
    log.info("Created task %s", task.id)
    return task


def update_task(session: Session, task_id: int, task: Task) -> Task:
    if task.id != task_id:
        log.warning("Rejected update of task %s: body carries id %s", task_id, task.id)
        raise TaskIdMismatchError(task_id, task.id)

    existing = get_task(session, task_id)
    for name in REPLACEABLE_FIELDS:
        setattr(existing, name, getattr(task, name))
    try:
        session.commit()
    except StaleDataError:
        # row vanished between read and write
        session.rollback()
        if not task_exists(session, task_id):
            raise TaskNotFoundError(task_id)
        raise
    session.refresh(existing)
    log.info("Updated task %s", task_id)
    return existing


def delete_task(session: Session, task_id: int) -> None:
    task = get_task(session, task_id)
    session.delete(task)
    session.commit()
    log.info("Deleted task %s", task_id)
