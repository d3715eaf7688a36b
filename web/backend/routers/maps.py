#!/usr/bin/env python3
"""
Career map and business map endpoints.

Each caller has at most one of each; saving replaces the whole map.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import RequestContext, get_db, get_request_context
from ..models.requests import BusinessMapUpsert, CareerMapUpsert
from ..services.planning_service import PlanningService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["maps"])


@router.get("/career-map")
def get_career_map(
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    """Get the caller's career map, or ``{}`` if none was saved."""
    return PlanningService(db).get_career_map(ctx)


@router.post("/career-map")
def save_career_map(
    body: CareerMapUpsert,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    return PlanningService(db).save_career_map(ctx, body)


@router.get("/business-map")
def get_business_map(
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    """Get the caller's business map, or ``{}`` if none was saved."""
    return PlanningService(db).get_business_map(ctx)


@router.post("/business-map")
def save_business_map(
    body: BusinessMapUpsert,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db)
):
    return PlanningService(db).save_business_map(ctx, body)
