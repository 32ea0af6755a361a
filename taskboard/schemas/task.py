from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from ..models import TaskStatus
from ..models.types import as_utc
from .base import CamelModel, RequestModel
from .user import UserSummary


def _check_user_reference(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return value
    try:
        UUID(value)
    except ValueError:
        raise ValueError("assignedTo must be a UUID")
    return value


class TaskCreate(RequestModel):
    """Body of POST /tasks."""
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    due_date: datetime
    status: Optional[TaskStatus] = None
    assigned_to: Optional[str] = None

    @field_validator("assigned_to")
    @classmethod
    def check_assigned_to(cls, value):
        return _check_user_reference(value)

    @field_validator("due_date")
    @classmethod
    def due_date_in_utc(cls, value):
        return as_utc(value) if value is not None else value


class TaskUpdate(RequestModel):
    """Body of PATCH /tasks/{id}.

    Every field is optional; only the ones present in the request are
    applied. An empty or null ``assignedTo`` clears the assignee.
    """
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    due_date: Optional[datetime] = None
    status: Optional[TaskStatus] = None
    assigned_to: Optional[str] = None

    @field_validator("assigned_to")
    @classmethod
    def check_assigned_to(cls, value):
        return _check_user_reference(value)

    @field_validator("due_date")
    @classmethod
    def due_date_in_utc(cls, value):
        return as_utc(value) if value is not None else value


class TaskRead(CamelModel):
    id: str
    title: str
    description: str
    due_date: datetime
    status: TaskStatus
    user_id: str
    created_by_id: str
    assigned_to_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    created_by: Optional[UserSummary] = None
    assigned_to: Optional[UserSummary] = None
