from sqlalchemy.orm import Session

from database.repositories import (
    UserRepository,
    TaskRepository,
    PlanningNoteRepository,
    CareerMapRepository,
    BusinessMapRepository,
    DailyDashboardRepository,
)


class ResourceStore:
    """All per-kind repositories bound to one session."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.tasks = TaskRepository(db)
        self.notes = PlanningNoteRepository(db)
        self.career_maps = CareerMapRepository(db)
        self.business_maps = BusinessMapRepository(db)
        self.dashboards = DailyDashboardRepository(db)
