"""Task lifecycle service: create, update, delete and list tasks for one owner."""
from typing import List, Optional, Sequence, Union
import logging

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from task_mcp.models.task import DEFAULT_PRIORITY, Task, TaskStatus
from task_mcp.schemas.task import TaskCreate, TaskFilter, TaskUpdate
from task_mcp.services.errors import NotFoundError, StoreError, require_user_id
from task_mcp.services.task_query import build_task_query
from task_mcp.utils.timeutils import utcnow

logger = logging.getLogger(__name__)


def derive_completed_at(patch: dict) -> dict:
    """
    Apply the status-driven ``completed_at`` rule to an update patch.

    - status == completed without an explicit completed_at: stamp now.
    - status present and != completed: clear completed_at, whatever was sent.
    - status absent: completed_at is never written, even if supplied.
    """
    patch = dict(patch)
    if "status" not in patch:
        patch.pop("completed_at", None)
        return patch

    if patch["status"] == TaskStatus.COMPLETED.value:
        if patch.get("completed_at") is None:
            patch["completed_at"] = utcnow()
    else:
        patch["completed_at"] = None
    return patch


class TaskService:
    """Service class for task CRUD scoped by owner."""

    def __init__(self, session: Session):
        self.session = session

    def create_task(self, data: TaskCreate, user_id: str) -> Task:
        """Persist a new pending task for ``user_id``."""
        require_user_id(user_id)

        task = Task(
            user_id=user_id,
            title=data.title,
            description=data.description,
            priority=data.priority if data.priority is not None else DEFAULT_PRIORITY,
            status=TaskStatus.PENDING.value,
            favorite=data.favorite,
            need_tips=data.need_tips,
            tags=list(data.tags),
            end_at=data.end_at,
            completed_at=None,
            created_at=utcnow(),
        )

        try:
            self.session.add(task)
            self.session.commit()
            self.session.refresh(task)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError("Failed to create task", details={"error": str(exc)}) from exc

        logger.info(f"Created task {task.id} for user {user_id}")
        return task

    def get_task(self, task_id: str, user_id: str) -> Optional[Task]:
        """Get a task by id, only if it belongs to ``user_id``."""
        statement = select(Task).where(Task.id == task_id).where(Task.user_id == user_id)
        try:
            return self.session.exec(statement).first()
        except SQLAlchemyError as exc:
            raise StoreError("Failed to load task", details={"error": str(exc)}) from exc

    def update_task(self, task_id: str, user_id: str, patch: TaskUpdate) -> Task:
        """Apply ``patch`` to the task; NotFoundError if (id, owner) matches nothing."""
        require_user_id(user_id)

        task = self.get_task(task_id, user_id)
        if task is None:
            raise NotFoundError(f"Task {task_id} not found", details={"id": task_id})

        changes = derive_completed_at(patch.to_patch())
        for field, value in changes.items():
            setattr(task, field, value)

        try:
            self.session.add(task)
            self.session.commit()
            self.session.refresh(task)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError("Failed to update task", details={"error": str(exc)}) from exc

        logger.info(f"Updated task {task_id} fields {sorted(changes)}")
        return task

    def delete_tasks(self, task_ids: Union[str, Sequence[str]], user_id: str) -> int:
        """
        Delete one or many tasks owned by ``user_id``.

        Returns the number of rows removed; zero matches is not an error,
        so repeating a delete is harmless.
        """
        require_user_id(user_id)
        ids: List[str] = [task_ids] if isinstance(task_ids, str) else list(task_ids)

        statement = (
            delete(Task)
            .where(col(Task.id).in_(ids))
            .where(col(Task.user_id) == user_id)
        )
        try:
            result = self.session.execute(statement)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError("Failed to delete tasks", details={"error": str(exc)}) from exc

        count = result.rowcount or 0
        logger.info(f"Deleted {count} of {len(ids)} requested task(s) for user {user_id}")
        return count

    def list_tasks(self, user_id: str, filters: Optional[TaskFilter] = None) -> List[Task]:
        """All matching tasks for ``user_id``, newest first; empty list if none match."""
        require_user_id(user_id)
        statement = build_task_query(user_id, filters)
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as exc:
            raise StoreError("Failed to list tasks", details={"error": str(exc)}) from exc
