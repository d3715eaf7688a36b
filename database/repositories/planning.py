import logging
from typing import Dict

from sqlalchemy import select

from database.models import PlanningNote, CareerMap, BusinessMap, DailyDashboard
from database.repositories.base import OwnedResourceRepository

logger = logging.getLogger(__name__)


class PlanningNoteRepository(OwnedResourceRepository):
    model = PlanningNote
    key_column = 'module_id'

    def get_content_map(self, owner_id: str) -> Dict[str, str]:
        """Project all of the owner's notes into {module_id: content}."""
        stmt = select(PlanningNote.module_id, PlanningNote.content).where(
            PlanningNote.user_id == owner_id
        )
        return {module_id: content for module_id, content in self.db.execute(stmt).all()}


class CareerMapRepository(OwnedResourceRepository):
    model = CareerMap


class BusinessMapRepository(OwnedResourceRepository):
    model = BusinessMap


class DailyDashboardRepository(OwnedResourceRepository):
    model = DailyDashboard
    key_column = 'date_string'
