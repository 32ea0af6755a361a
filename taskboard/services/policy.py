"""Task lifecycle rules that do not touch the database.

Ownership decides whether an actor may see or touch a task at all; the role
decides which fields of an owned task the actor may change.
"""

from typing import Any, Dict, FrozenSet

from ..models import TaskStatus, UserRole

STATUS_CYCLE = {
    TaskStatus.TODO: TaskStatus.DOING,
    TaskStatus.DOING: TaskStatus.DONE,
    TaskStatus.DONE: TaskStatus.TODO,
}

EDITABLE_FIELDS: Dict[UserRole, FrozenSet[str]] = {
    UserRole.ADMIN: frozenset({"title", "description", "due_date", "assigned_to", "status"}),
    UserRole.USER: frozenset({"status"}),
}


def next_status(status: TaskStatus) -> TaskStatus:
    """TODO -> DOING -> DONE -> TODO."""
    return STATUS_CYCLE[TaskStatus(status)]


def editable_fields(role: UserRole) -> FrozenSet[str]:
    return EDITABLE_FIELDS.get(role, frozenset())


def filter_update(role: UserRole, changes: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the changes ``role`` is allowed to make; drop the rest silently."""
    allowed = editable_fields(role)
    return {field: value for field, value in changes.items() if field in allowed}
