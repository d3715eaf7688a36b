"""Business logic services."""

from .user_service import UserService
from .task_service import TaskService
from .planning_service import PlanningService
