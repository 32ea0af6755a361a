from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional
from uuid import uuid4
import enum

from .types import UTCDateTime, utcnow


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class User(SQLModel, table=True):
    """User model for authentication and task assignment.

    ``hashed_password`` never leaves the service layer; reads go through the
    ``UserRead``/``UserSummary`` schemas.
    """
    __tablename__ = "users"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    email: str = Field(unique=True, index=True)
    hashed_password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole = Field(default=UserRole.USER)
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, sa_column_kwargs={"onupdate": utcnow})
