from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from ..db.models import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TaskBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    due_date: Optional[datetime] = None
    is_completed: bool = False


class TaskIn(TaskBase):
    # ignored on create, compared with the path id on update
    id: Optional[int] = None
    # omitted -> now; explicit null -> no due date
    due_date: Optional[datetime] = Field(default_factory=utc_now)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v

    @field_validator("due_date")
    @classmethod
    def naive_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        # DueDate is stored as text; keep every value in one zone so it sorts
        if v is not None and v.tzinfo is not None:
            v = v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class TaskUpdate(TaskIn):
    """Full replacement body for PUT; every field is overwritten."""


class TaskOut(TaskBase):
    id: int
