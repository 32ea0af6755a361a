import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..errors import BadRequestError, ForbiddenError, NotFoundError
from ..models import Task, TaskStatus, User, UserRole
from ..schemas.task import TaskCreate, TaskRead, TaskUpdate
from .policy import filter_update, next_status

logger = logging.getLogger(__name__)


class TaskService:
    """Ownership-scoped task operations.

    Role gating for create/remove happens in the router; this class enforces
    ownership, the per-role field allow-list and assignee existence.
    """

    def __init__(self, db: Session):
        self.db = db

    def _ensure_assignee(self, user_id: str) -> None:
        if self.db.query(User).filter(User.id == user_id).first() is None:
            raise BadRequestError("Assigned user not found")

    def _get_owned(self, actor_id: str, task_id: str) -> Task:
        task = self.db.query(Task).filter(Task.id == task_id).first()
        if task is None:
            raise NotFoundError("Task not found")
        if task.user_id != actor_id:
            raise ForbiddenError("You do not have access to this task")
        return task

    def create(self, actor_id: str, data: TaskCreate) -> TaskRead:
        if data.assigned_to:
            self._ensure_assignee(data.assigned_to)

        task = Task(
            title=data.title,
            description=data.description,
            due_date=data.due_date,
            status=data.status or TaskStatus.TODO,
            user_id=actor_id,
            created_by_id=actor_id,
            assigned_to_id=data.assigned_to or None,
        )
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)

        logger.info("User %s created task %s", actor_id, task.id)
        return TaskRead.model_validate(task)

    def find_all(self, actor_id: str, status: Optional[TaskStatus] = None) -> List[TaskRead]:
        query = self.db.query(Task).filter(Task.user_id == actor_id)
        if status:
            query = query.filter(Task.status == status)
        tasks = query.order_by(Task.created_at.desc()).all()
        return [TaskRead.model_validate(task) for task in tasks]

    def find_one(self, actor_id: str, task_id: str) -> TaskRead:
        return TaskRead.model_validate(self._get_owned(actor_id, task_id))

    def update(self, actor_id: str, actor_role: UserRole, task_id: str, data: TaskUpdate) -> TaskRead:
        """Apply the fields present in ``data`` that ``actor_role`` may change.

        Disallowed fields are ignored rather than rejected.
        """
        task = self._get_owned(actor_id, task_id)
        changes = filter_update(actor_role, data.model_dump(exclude_unset=True))

        if "assigned_to" in changes:
            assignee = changes.pop("assigned_to")
            if assignee:
                self._ensure_assignee(assignee)
            task.assigned_to_id = assignee or None

        for field, value in changes.items():
            # title, description, due_date and status are not nullable
            if value is not None:
                setattr(task, field, value)

        self.db.commit()
        self.db.refresh(task)

        logger.info("User %s updated task %s", actor_id, task.id)
        return TaskRead.model_validate(task)

    def toggle_status(self, actor_id: str, task_id: str) -> TaskRead:
        task = self._get_owned(actor_id, task_id)
        task.status = next_status(task.status)
        self.db.commit()
        self.db.refresh(task)

        logger.info("User %s moved task %s to %s", actor_id, task.id, task.status.value)
        return TaskRead.model_validate(task)

    def remove(self, actor_id: str, task_id: str) -> TaskRead:
        """Delete an owned task and return it as it was before deletion."""
        task = self._get_owned(actor_id, task_id)
        deleted = TaskRead.model_validate(task)
        self.db.delete(task)
        self.db.commit()

        logger.info("User %s deleted task %s", actor_id, task_id)
        return deleted
