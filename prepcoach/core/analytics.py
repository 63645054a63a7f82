"""
Performance analytics over a user's completed interviews.
"""

from collections import Counter
from typing import Iterable

from prepcoach.models.analytics import InterviewAnalytics, ProgressPoint, ScoreDistribution
from prepcoach.models.evaluation import ScoreBand
from prepcoach.models.interview import InterviewSession

PROGRESS_WINDOW = 10


def compute_analytics(
    sessions: Iterable[InterviewSession],
    progress_window: int = PROGRESS_WINDOW,
) -> InterviewAnalytics:
    """
    Aggregate completed sessions; in-progress and abandoned ones are ignored.

    Args:
        sessions: Sessions belonging to one owner
        progress_window: Number of most recent sessions on the timeline

    Returns:
        Totals, average score (1 decimal place), band/role/difficulty
        distributions and the recent progress timeline, oldest first
    """
    completed = sorted(
        (s for s in sessions if s.is_completed and s.score is not None),
        key=lambda s: s.completed_at or s.created_at,
    )

    if not completed:
        return InterviewAnalytics()

    scores = [s.score for s in completed]
    bands = Counter(ScoreBand.from_score(score) for score in scores)

    distribution = ScoreDistribution(
        excellent=bands[ScoreBand.EXCELLENT],
        good=bands[ScoreBand.GOOD],
        average=bands[ScoreBand.AVERAGE],
        needs_improvement=bands[ScoreBand.NEEDS_IMPROVEMENT],
    )

    progress = [
        ProgressPoint(date=s.completed_at or s.created_at, score=s.score, role=s.role)
        for s in completed[-progress_window:]
    ] if progress_window > 0 else []

    return InterviewAnalytics(
        total_interviews=len(completed),
        average_score=round(sum(scores) / len(scores), 1),
        score_distribution=distribution,
        role_distribution=dict(Counter(s.role.value for s in completed)),
        difficulty_distribution=dict(Counter(s.difficulty.value for s in completed)),
        progress_over_time=progress,
    )
