from datetime import datetime
from typing import Optional
from pydantic import ConfigDict, Field, field_validator

from core.schemas import ApiModel, as_utc, is_blank
from .models import TaskStatus, TaskPriority, UNASSIGNED


def _choice(enum_cls, label: str, value):
    if isinstance(value, enum_cls):
        return value
    allowed = [m.value for m in enum_cls]
    if value not in allowed:
        raise ValueError(f"Invalid {label}. Must be one of: {', '.join(allowed)}")
    return value


def _blank_to_none(value):
    return None if is_blank(value) else value


# Augmented shape returned by every read
class TaskSchema(ApiModel):
    id: int
    title: str
    description: str = ""
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[str] = None
    employee_id: Optional[int] = None
    employee_name: str = UNASSIGNED
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at")
    @classmethod
    def created_at_utc(cls, v):
        return as_utc(v)


class _TaskPayload(ApiModel):
    title: Optional[str] = Field(None, validate_default=True)
    description: str = ""
    due_date: Optional[str] = None
    employee_id: Optional[int] = None

    @field_validator("title")
    @classmethod
    def title_required(cls, v):
        if is_blank(v):
            raise ValueError("Title is required")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def description_default(cls, v):
        return "" if v is None else v

    @field_validator("due_date", "employee_id", mode="before")
    @classmethod
    def empty_is_null(cls, v):
        return _blank_to_none(v)


class TaskCreate(_TaskPayload):
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM

    @field_validator("status", mode="before")
    @classmethod
    def known_status(cls, v):
        return TaskStatus.TODO if v is None else _choice(TaskStatus, "status", v)

    @field_validator("priority", mode="before")
    @classmethod
    def known_priority(cls, v):
        return TaskPriority.MEDIUM if v is None else _choice(TaskPriority, "priority", v)


# Full replace: omitted optional fields are cleared, enums must be resupplied
class TaskUpdate(_TaskPayload):
    status: Optional[TaskStatus] = Field(None, validate_default=True)
    priority: Optional[TaskPriority] = Field(None, validate_default=True)

    @field_validator("status", mode="before")
    @classmethod
    def known_status(cls, v):
        if is_blank(v):
            raise ValueError("status is required")
        return _choice(TaskStatus, "status", v)

    @field_validator("priority", mode="before")
    @classmethod
    def known_priority(cls, v):
        if is_blank(v):
            raise ValueError("priority is required")
        return _choice(TaskPriority, "priority", v)
