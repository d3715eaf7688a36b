from .base import Base, JSONType
from .user import User
from .task import TaskItem
from .planning import PlanningNote, CareerMap, BusinessMap, DailyDashboard

__all__ = [
    'Base',
    'JSONType',
    'User',
    'TaskItem',
    'PlanningNote',
    'CareerMap',
    'BusinessMap',
    'DailyDashboard',
]
