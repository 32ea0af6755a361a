import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import ConflictError, UnauthorizedError
from ..models import User
from ..schemas.user import AuthResponse, UserRead
from ..security import create_access_token, get_password_hash, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Registration, login and token-subject validation."""

    def __init__(self, db: Session):
        self.db = db

    def _find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def _auth_response(self, user: User) -> AuthResponse:
        token = create_access_token(user.id, user.email)
        return AuthResponse(access_token=token, user=UserRead.model_validate(user))

    def register(self, email: str, password: str) -> AuthResponse:
        """Create a USER account and sign a token for it.

        Raises ConflictError, without writing, if the email is taken.
        """
        if self._find_by_email(email):
            raise ConflictError("User with this email already exists")

        user = User(email=email, hashed_password=get_password_hash(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration of the same email
            self.db.rollback()
            raise ConflictError("User with this email already exists")
        self.db.refresh(user)

        logger.info("Registered user %s", user.id)
        return self._auth_response(user)

    def login(self, email: str, password: str) -> AuthResponse:
        """Check credentials and sign a token.

        Unknown email and wrong password fail with the same message.
        """
        user = self._find_by_email(email)
        if user is None or not verify_password(password, user.hashed_password):
            logger.warning("Failed login attempt")
            raise UnauthorizedError(INVALID_CREDENTIALS)
        return self._auth_response(user)

    def validate_user(self, user_id: str) -> Optional[UserRead]:
        """Public projection of a token subject, or None if the account is gone."""
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            return None
        return UserRead.model_validate(user)
