from .user import User, UserRole
from .task import Task, TaskStatus

# Export all models for easy importing
__all__ = ["Task", "TaskStatus", "User", "UserRole"]
