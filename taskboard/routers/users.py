from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import NotFoundError
from ..schemas.base import Envelope, envelope
from ..schemas.user import UserRead
from ..services.users import UserService
from .auth import get_current_user

router = APIRouter(dependencies=[Depends(get_current_user)])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.get("", response_model=Envelope[List[UserRead]])
def get_users(user_service: UserService = Depends(get_user_service)):
    """List every user (for task assignment)."""
    return envelope(user_service.find_all())


@router.get("/{user_id}", response_model=Envelope[UserRead])
def get_user(user_id: str, user_service: UserService = Depends(get_user_service)):
    user = user_service.find_one(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return envelope(user)
