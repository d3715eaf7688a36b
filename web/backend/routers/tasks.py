#!/usr/bin/env python3
"""
Task endpoints - the caller's to-do list.
"""

import logging
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from ..dependencies import RequestContext, get_db, get_request_context
from ..models.requests import TaskCreate, TaskUpdate
from ..services.task_service import TaskService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])


@router.get("")
def list_tasks(
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    """Get the caller's tasks, oldest first."""
    return TaskService(db).list_tasks(ctx)


@router.post("", status_code=201)
def create_task(
    body: TaskCreate,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    """Create a task. New tasks start out not completed."""
    return TaskService(db).create_task(ctx, body)


@router.put("/{task_id}")
def update_task(
    task_id: int,
    body: TaskUpdate,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    """
    Update a task's text and/or completion flag.

    A task owned by someone else answers 404, the same as a missing one.
    """
    return TaskService(db).update_task(ctx, task_id, body)


@router.delete("/{task_id}", status_code=204)
def delete_task(
    task_id: int,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    """Delete a task."""
    TaskService(db).delete_task(ctx, task_id)
    return Response(status_code=204)
