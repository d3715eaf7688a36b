from database.repositories.base import BaseRepository, OwnedResourceRepository
from database.repositories.user import UserRepository
from database.repositories.task import TaskRepository
from database.repositories.planning import (
    PlanningNoteRepository,
    CareerMapRepository,
    BusinessMapRepository,
    DailyDashboardRepository,
)

__all__ = [
    'BaseRepository',
    'OwnedResourceRepository',
    'UserRepository',
    'TaskRepository',
    'PlanningNoteRepository',
    'CareerMapRepository',
    'BusinessMapRepository',
    'DailyDashboardRepository',
]
