from typing import List, Optional

from sqlalchemy.orm import Session

from ..models import User
from ..schemas.user import UserRead


class UserService:
    """Read-only user listing, used to pick assignees."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[UserRead]:
        users = self.db.query(User).order_by(User.email.asc()).all()
        return [UserRead.model_validate(user) for user in users]

    def find_one(self, user_id: str) -> Optional[UserRead]:
        user = self.db.query(User).filter(User.id == user_id).first()
        return UserRead.model_validate(user) if user else None
