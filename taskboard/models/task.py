from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime
from typing import Optional
from uuid import uuid4
import enum

from .types import UTCDateTime, utcnow

from .user import User


class TaskStatus(str, enum.Enum):
    TODO = "TODO"
    DOING = "DOING"
    DONE = "DONE"


class Task(SQLModel, table=True):
    """Task model.

    ``user_id`` is the owner and the only visibility scope; ``created_by_id``
    and ``assigned_to_id`` are informational links to users.
    """
    __tablename__ = "tasks"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    title: str
    description: str
    due_date: datetime = Field(sa_type=UTCDateTime)
    status: TaskStatus = Field(default=TaskStatus.TODO, index=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    created_by_id: str = Field(foreign_key="users.id")
    assigned_to_id: Optional[str] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, sa_column_kwargs={"onupdate": utcnow})

    # Several foreign keys point at users, so each relationship names its own
    created_by: Optional[User] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "[Task.created_by_id]", "lazy": "joined"}
    )
    assigned_to: Optional[User] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "[Task.assigned_to_id]", "lazy": "joined"}
    )
