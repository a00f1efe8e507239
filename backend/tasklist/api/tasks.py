from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlmodel import Session
from ..db.session import get_session
from ..db.models import Task
from ..db import crud
from ..core.errors import TaskIdMismatchError, TaskNotFoundError
from ..schemas.tasks import TaskIn, TaskOut, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _not_found(e: TaskNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("", response_model=List[TaskOut])
def list_all(
    is_completed: Optional[bool] = Query(None, alias="isCompleted"),
    sort_descending: bool = Query(False, alias="sortDescending"),
    session: Session = Depends(get_session),
):
    return crud.list_tasks(session, is_completed=is_completed, sort_descending=sort_descending)


@router.get("/{task_id}", response_model=TaskOut, name="get_task")
def get_one(task_id: int, session: Session = Depends(get_session)):
    try:
        return crud.get_task(session, task_id)
    except TaskNotFoundError as e:
        raise _not_found(e)


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create(body: TaskIn, request: Request, response: Response,
           session: Session = Depends(get_session)):
    t = crud.create_task(session, Task(**body.model_dump(exclude={"id"})))
    response.headers["Location"] = str(request.url_for("get_task", task_id=t.id))
    return t


@router.put("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def update(task_id: int, body: TaskUpdate, session: Session = Depends(get_session)):
    try:
        crud.update_task(session, task_id, Task(**body.model_dump()))
    except TaskIdMismatchError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except TaskNotFoundError as e:
        raise _not_found(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(task_id: int, session: Session = Depends(get_session)):
    try:
        crud.delete_task(session, task_id)
    except TaskNotFoundError as e:
        raise _not_found(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
