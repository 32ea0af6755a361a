from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from ..models import UserRole
from .base import CamelModel, RequestModel


class UserSummary(CamelModel):
    """Public projection joined onto tasks (createdBy / assignedTo)."""
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserRead(UserSummary):
    """User as returned by the API, never including the password hash."""
    role: UserRole
    created_at: datetime
    updated_at: datetime


class RegisterRequest(RequestModel):
    email: EmailStr
    password: str = Field(min_length=6)


class LoginRequest(RequestModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthResponse(CamelModel):
    access_token: str
    user: UserRead
