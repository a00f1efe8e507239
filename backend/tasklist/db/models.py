from datetime import datetime
from typing import Optional
from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

class Task(SQLModel, table=True):
    __tablename__ = "Tasks"
    # never hand out an id twice, even after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={"name": "Id"})
    title: str = Field(max_length=TITLE_MAX_LENGTH, sa_column_kwargs={"name": "Title"})
    description: Optional[str] = Field(
        default=None, max_length=DESCRIPTION_MAX_LENGTH, sa_column_kwargs={"name": "Description"}
    )
    # stored as naive UTC; the schemas normalise aware input before it gets here
    due_date: Optional[NaiveDatetime] = Field(
        default=None, sa_type=DateTime, sa_column_kwargs={"name": "DueDate"}
    )
    is_completed: bool = Field(default=False, nullable=False, sa_column_kwargs={"name": "IsCompleted"})


SEED_DUE_DATE = datetime(2024, 12, 25)

def seed_tasks() -> list[Task]:
    return [
        Task(id=1, title="Initial Task 1", description="Incomplete task 1",
             due_date=SEED_DUE_DATE, is_completed=False),
        Task(id=2, title="Initial Task 2", description="Complete task 2",
             due_date=SEED_DUE_DATE, is_completed=True),
    ]
