"""
Analytics models for PrepCoach
"""

from datetime import datetime

from pydantic import BaseModel, Field

from prepcoach.models.roles import Role


class ScoreDistribution(BaseModel):
    """Completed sessions bucketed by score band."""

    excellent: int = 0          # >= 80
    good: int = 0               # 60-79
    average: int = 0            # 40-59
    needs_improvement: int = 0  # < 40


class ProgressPoint(BaseModel):
    """One completed session on the progress timeline."""

    date: datetime
    score: int
    role: Role


class InterviewAnalytics(BaseModel):
    """Aggregate performance across a user's completed sessions."""

    total_interviews: int = 0
    average_score: float = 0.0
    score_distribution: ScoreDistribution = Field(default_factory=ScoreDistribution)
    role_distribution: dict[str, int] = Field(default_factory=dict)
    difficulty_distribution: dict[str, int] = Field(default_factory=dict)
    progress_over_time: list[ProgressPoint] = Field(default_factory=list)
