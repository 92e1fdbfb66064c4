"""API route handlers."""

from .recommendations import router as recommendations_router
from .buddies import router as buddies_router
from .calendars import router as calendars_router
from .questions import router as questions_router
