"""
API layer for PrepCoach

Contains FastAPI routers for:
- Interview sessions, history, and analytics
- Role and option metadata
"""

from prepcoach.api.router import api_router
from prepcoach.api.errors import register_exception_handlers

__all__ = ["api_router", "register_exception_handlers"]
