#!/usr/bin/env python3
"""
Task service - owner-scoped CRUD for to-do items.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from core.exceptions import ResourceNotFoundException
from database.uow import store_uow
from ..dependencies import RequestContext
from ..models.requests import TaskCreate, TaskUpdate
from ..models.responses import TaskResponse

logger = logging.getLogger(__name__)

TASK_NOT_FOUND_MESSAGE = "Task not found"


class TaskService:
    """Service for managing the caller's tasks."""

    def __init__(self, db: Session):
        self.db = db

    def list_tasks(self, ctx: RequestContext) -> List[Dict[str, Any]]:
        """Return the caller's tasks in creation order."""
        with store_uow(self.db) as store:
            tasks = store.tasks.list_for_owner(ctx.subject_id)
            return [TaskResponse.model_validate(t).to_wire() for t in tasks]

    def create_task(self, ctx: RequestContext, body: TaskCreate) -> Dict[str, Any]:
        with store_uow(self.db) as store:
            task = store.tasks.create(ctx.subject_id, body.text)
            response = TaskResponse.model_validate(task).to_wire()

        logger.info(f"[{ctx.subject_id}] Created task {response['id']}")
        return response

    def update_task(self, ctx: RequestContext, task_id: int, body: TaskUpdate) -> Dict[str, Any]:
        """
        Apply a partial update to one of the caller's tasks.

        Raises:
            ResourceNotFoundException: If no task with this id belongs to the caller.
        """
        with store_uow(self.db) as store:
            task = store.tasks.update(ctx.subject_id, task_id, body.changes())
            if task is None:
                raise ResourceNotFoundException(TASK_NOT_FOUND_MESSAGE)
            response = TaskResponse.model_validate(task).to_wire()

        logger.info(f"[{ctx.subject_id}] Updated task {task_id}")
        return response

    def delete_task(self, ctx: RequestContext, task_id: int) -> None:
        """
        Delete one of the caller's tasks.

        Raises:
            ResourceNotFoundException: If no task with this id belongs to the caller.
        """
        with store_uow(self.db) as store:
            if not store.tasks.delete(ctx.subject_id, task_id):
                raise ResourceNotFoundException(TASK_NOT_FOUND_MESSAGE)

        logger.info(f"[{ctx.subject_id}] Deleted task {task_id}")
