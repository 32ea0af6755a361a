from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import TaskStatus, UserRole
from ..schemas.base import Envelope, envelope
from ..schemas.task import TaskCreate, TaskRead, TaskUpdate
from ..schemas.user import UserRead
from ..services.tasks import TaskService
from .auth import get_current_user, require_role

router = APIRouter()


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)


@router.post("", response_model=Envelope[TaskRead], status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    current_user: UserRead = Depends(require_role(UserRole.ADMIN)),
    task_service: TaskService = Depends(get_task_service),
):
    """Create a task owned by the calling admin."""
    created = task_service.create(current_user.id, task)
    return envelope(created, status.HTTP_201_CREATED)


@router.get("", response_model=Envelope[List[TaskRead]])
def get_tasks(
    status: Optional[TaskStatus] = None,
    current_user: UserRead = Depends(get_current_user),
    task_service: TaskService = Depends(get_task_service),
):
    """List the caller's tasks, newest first, optionally filtered by status."""
    return envelope(task_service.find_all(current_user.id, status))


@router.get("/{task_id}", response_model=Envelope[TaskRead])
def get_task(
    task_id: str,
    current_user: UserRead = Depends(get_current_user),
    task_service: TaskService = Depends(get_task_service),
):
    return envelope(task_service.find_one(current_user.id, task_id))


@router.patch("/{task_id}", response_model=Envelope[TaskRead])
def update_task(
    task_id: str,
    task_update: TaskUpdate,
    current_user: UserRead = Depends(get_current_user),
    task_service: TaskService = Depends(get_task_service),
):
    """Update a task.

    Any owner can change the status; only admins can change the other fields.
    """
    updated = task_service.update(current_user.id, current_user.role, task_id, task_update)
    return envelope(updated)


@router.patch("/{task_id}/toggle", response_model=Envelope[TaskRead])
def toggle_task_status(
    task_id: str,
    current_user: UserRead = Depends(get_current_user),
    task_service: TaskService = Depends(get_task_service),
):
    """Advance the status one step: TODO -> DOING -> DONE -> TODO."""
    return envelope(task_service.toggle_status(current_user.id, task_id))


@router.delete("/{task_id}", response_model=Envelope[TaskRead])
def delete_task(
    task_id: str,
    current_user: UserRead = Depends(require_role(UserRole.ADMIN)),
    task_service: TaskService = Depends(get_task_service),
):
    return envelope(task_service.remove(current_user.id, task_id))
