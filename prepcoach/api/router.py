"""
Main API router for PrepCoach

Aggregates all API routes and provides the main application router.
"""

from fastapi import APIRouter

from prepcoach.api.endpoints import interview, metadata

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    interview.router,
    prefix="/interviews",
    tags=["Interviews"]
)

api_router.include_router(
    metadata.router,
    prefix="/metadata",
    tags=["Metadata"]
)
