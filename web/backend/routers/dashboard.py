#!/usr/bin/env python3
"""
Daily dashboard endpoints.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.exceptions import ValidationException
from ..dependencies import RequestContext, get_db, get_request_context
from ..models.requests import DailyDashboardUpsert
from ..services.planning_service import PlanningService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("")
def get_dashboard(
    ctx: RequestContext = Depends(get_request_context),
    date: Optional[str] = Query(default=None, description="Date string the dashboard was saved under"),
    db: Session = Depends(get_db)
):
    """Get the caller's dashboard for one date, or ``{}`` if none was saved."""
    if not date or not date.strip():
        raise ValidationException('Query parameter "date" is required', missing_fields=["date"])
    return PlanningService(db).get_dashboard(ctx, date)


@router.post("")
def save_dashboard(
    body: DailyDashboardUpsert,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    """Create or replace the dashboard for ``dateString``."""
    return PlanningService(db).save_dashboard(ctx, body)
