from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import ForbiddenError
from ..models import UserRole
from ..schemas.base import Envelope, envelope
from ..schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserRead
from ..security import decode_access_token
from ..services.auth import AuthService

router = APIRouter()


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


def _get_token_from_request(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if auth_header.lower().startswith("bearer "):
        return auth_header.split(" ", 1)[1].strip() or None
    return None


def get_current_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> UserRead:
    """Resolve the bearer token to the acting user."""
    token = _get_token_from_request(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token_data = decode_access_token(token)
    if token_data is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # The token can outlive the account it was issued for
    user = auth_service.validate_user(token_data.sub)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def require_role(*roles: UserRole):
    """Dependency factory: the current user must hold one of ``roles``."""

    def _check_role(current_user: UserRead = Depends(get_current_user)) -> UserRead:
        if current_user.role not in roles:
            raise ForbiddenError("Forbidden resource")
        return current_user

    return _check_role


@router.post("/register", response_model=Envelope[AuthResponse], status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Create a new user account and return a bearer token."""
    result = auth_service.register(body.email, body.password)
    return envelope(result, status.HTTP_201_CREATED)


@router.post("/login", response_model=Envelope[AuthResponse])
def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Sign in and get a bearer token."""
    return envelope(auth_service.login(body.email, body.password))


@router.get("/me", response_model=Envelope[UserRead])
def read_users_me(current_user: UserRead = Depends(get_current_user)):
    """Get current user information."""
    return envelope(current_user)
