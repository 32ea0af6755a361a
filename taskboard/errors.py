"""Typed errors raised by the services.

Each error carries the HTTP status code the API layer answers with; the
handlers in ``taskboard.main`` render them as
``{"statusCode", "timestamp", "message"}``.
"""

from datetime import datetime, timezone
from typing import Any, Dict


class TaskboardError(Exception):
    """Base error for all service-level failures."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return error_body(self.status_code, self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.status_code}: {self.message})"


class BadRequestError(TaskboardError):
    """Malformed reference or failed field validation."""

    status_code = 400


class UnauthorizedError(TaskboardError):
    """Bad credentials, or a missing/invalid/expired token."""

    status_code = 401


class ForbiddenError(TaskboardError):
    """Authenticated, but not the owner (or lacking the role)."""

    status_code = 403


class NotFoundError(TaskboardError):
    status_code = 404


class ConflictError(TaskboardError):
    """Duplicate unique key, e.g. an email that is already registered."""

    status_code = 409


def error_body(status_code: int, message: Any) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "message": message,
    }
