from datetime import datetime, timedelta, timezone
from typing import Dict

from taskboard.models import User
from taskboard.security import create_access_token


def auth_headers(user: User) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id, user.email)}"}


def future(days: int = 7) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()
