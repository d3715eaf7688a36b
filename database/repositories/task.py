import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update, delete

from database.models import TaskItem
from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {'text', 'completed'}


class TaskRepository(BaseRepository):
    """
    Task items. Every lookup filters on id AND owner together, so a task
    owned by someone else is indistinguishable from a missing one.
    """

    def list_for_owner(self, owner_id: str) -> List[TaskItem]:
        stmt = (
            select(TaskItem)
            .where(TaskItem.user_id == owner_id)
            .order_by(TaskItem.created_at.asc(), TaskItem.id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_owned(self, owner_id: str, task_id: int) -> Optional[TaskItem]:
        stmt = (
            select(TaskItem)
            .where(TaskItem.id == task_id, TaskItem.user_id == owner_id)
            .execution_options(populate_existing=True)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, owner_id: str, text: str) -> TaskItem:
        UserRepository(self.db).ensure_exists(owner_id)
        task = TaskItem(user_id=owner_id, text=text, completed=False)
        self.db.add(task)
        self.db.flush()  # Generate ID
        return task

    def update(self, owner_id: str, task_id: int, fields: Dict[str, Any]) -> Optional[TaskItem]:
        """Apply a partial update; returns None when no owned task matches."""
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown task fields: {sorted(unknown)}")
        if not fields:
            return self.get_owned(owner_id, task_id)

        result = self.db.execute(
            update(TaskItem)
            .where(TaskItem.id == task_id, TaskItem.user_id == owner_id)
            .values(**fields)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            return None
        return self.get_owned(owner_id, task_id)

    def delete(self, owner_id: str, task_id: int) -> bool:
        """Delete an owned task; returns False when no owned task matches."""
        result = self.db.execute(
            delete(TaskItem)
            .where(TaskItem.id == task_id, TaskItem.user_id == owner_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0
