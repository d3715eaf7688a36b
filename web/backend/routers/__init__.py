"""API route handlers."""

from .auth import router as auth_router
from .tasks import router as tasks_router
from .notes import router as notes_router
from .maps import router as maps_router
from .dashboard import router as dashboard_router
from .ai import router as ai_router
