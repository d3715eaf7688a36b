#!/usr/bin/env python3
"""
Planning note endpoints.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import RequestContext, get_db, get_request_context
from ..models.requests import PlanningNoteUpsert
from ..services.planning_service import PlanningService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["notes"])


@router.get("/notes")
def get_notes(
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    """Get all of the caller's notes as ``{moduleId: content}``."""
    return PlanningService(db).get_notes(ctx)


@router.post("/notes")
def save_note(
    body: PlanningNoteUpsert,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    """Create or replace the note for one module."""
    return PlanningService(db).save_note(ctx, body)
