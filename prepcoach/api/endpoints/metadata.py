"""
Metadata API endpoints

Provides reference data for:
- Roles
- Difficulty levels
- Interview types
"""

from fastapi import APIRouter
from pydantic import BaseModel

from prepcoach.models.roles import (
    Difficulty,
    InterviewType,
    Role,
    get_difficulty_tone,
    get_role_focus_areas,
)

router = APIRouter()


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class RoleInfo(BaseModel):
    """Information about a role."""
    id: str
    name: str
    focus_areas: str


class OptionInfo(BaseModel):
    """A selectable option with a short description."""
    id: str
    name: str
    description: str


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.get("/roles")
async def get_roles() -> list[RoleInfo]:
    """Get all available interview roles."""
    return [
        RoleInfo(
            id=role.value,
            name=role.display_name,
            focus_areas=get_role_focus_areas(role),
        )
        for role in Role
    ]


@router.get("/difficulties")
async def get_difficulties() -> list[OptionInfo]:
    """Get all difficulty levels."""
    return [
        OptionInfo(id=level.value, name=level.value, description=get_difficulty_tone(level))
        for level in Difficulty
    ]


@router.get("/interview-types")
async def get_interview_types() -> list[OptionInfo]:
    """Get all interview type options."""
    descriptions = {
        InterviewType.TECHNICAL: "Role-specific technical questions only",
        InterviewType.BEHAVIORAL: "Experience, teamwork, and work-style questions only",
        InterviewType.MIXED: "A blend of technical and behavioral questions",
    }

    return [
        OptionInfo(id=kind.value, name=kind.value, description=descriptions[kind])
        for kind in InterviewType
    ]
