#!/usr/bin/env python3
"""
Planning service - notes, career map, business map and daily dashboards.

Every kind here is create-or-replace keyed by the caller (and a natural key
where the kind has one). Reads of something never saved return ``{}``.
"""

import logging
from typing import Any, Dict

from sqlalchemy.orm import Session

from database.uow import store_uow
from ..dependencies import RequestContext
from ..models.requests import (
    BusinessMapUpsert,
    CareerMapUpsert,
    DailyDashboardUpsert,
    PlanningNoteUpsert,
)
from ..models.responses import (
    BusinessMapResponse,
    CareerMapResponse,
    DailyDashboardResponse,
    PlanningNoteResponse,
)

logger = logging.getLogger(__name__)


class PlanningService:
    """Service for the caller's planning resources."""

    def __init__(self, db: Session):
        self.db = db

    # Notes

    def get_notes(self, ctx: RequestContext) -> Dict[str, str]:
        with store_uow(self.db) as store:
            return store.notes.get_content_map(ctx.subject_id)

    def save_note(self, ctx: RequestContext, body: PlanningNoteUpsert) -> Dict[str, Any]:
        with store_uow(self.db) as store:
            note = store.notes.upsert(ctx.subject_id, {"content": body.content}, key=body.module_id)
            response = PlanningNoteResponse.model_validate(note).to_wire()

        logger.info(f"[{ctx.subject_id}] Saved note for module {body.module_id}")
        return response

    # Career map

    def get_career_map(self, ctx: RequestContext) -> Dict[str, Any]:
        with store_uow(self.db) as store:
            row = store.career_maps.get(ctx.subject_id)
            return CareerMapResponse.model_validate(row).to_wire() if row else {}

    def save_career_map(self, ctx: RequestContext, body: CareerMapUpsert) -> Dict[str, Any]:
        with store_uow(self.db) as store:
            row = store.career_maps.upsert(ctx.subject_id, body.to_storage())
            response = CareerMapResponse.model_validate(row).to_wire()

        logger.info(f"[{ctx.subject_id}] Saved career map")
        return response

    # Business map

    def get_business_map(self, ctx: RequestContext) -> Dict[str, Any]:
        with store_uow(self.db) as store:
            row = store.business_maps.get(ctx.subject_id)
            return BusinessMapResponse.from_row(row).to_wire() if row else {}

    def save_business_map(self, ctx: RequestContext, body: BusinessMapUpsert) -> Dict[str, Any]:
        with store_uow(self.db) as store:
            row = store.business_maps.upsert(ctx.subject_id, body.to_storage())
            response = BusinessMapResponse.from_row(row).to_wire()

        logger.info(f"[{ctx.subject_id}] Saved business map")
        return response

    # Daily dashboard

    def get_dashboard(self, ctx: RequestContext, date_string: str) -> Dict[str, Any]:
        with store_uow(self.db) as store:
            row = store.dashboards.get(ctx.subject_id, key=date_string)
            return DailyDashboardResponse.model_validate(row).to_wire() if row else {}

    def save_dashboard(self, ctx: RequestContext, body: DailyDashboardUpsert) -> Dict[str, Any]:
        with store_uow(self.db) as store:
            row = store.dashboards.upsert(ctx.subject_id, body.to_storage(), key=body.date_string)
            response = DailyDashboardResponse.model_validate(row).to_wire()

        logger.info(f"[{ctx.subject_id}] Saved dashboard for {body.date_string}")
        return response
