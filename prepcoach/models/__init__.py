"""
Data models and schemas for PrepCoach

Contains Pydantic models for:
- Interview sessions
- Questions, answers, and transcript entries
- Evaluation results
- Analytics
- Roles and configuration enums
"""

from prepcoach.models.interview import (
    InterviewSession,
    InterviewSetup,
    SessionStatus,
    SessionSummary,
    InterviewStart,
    AnswerOutcome,
    QuestionRecord,
    AnswerRecord,
    TranscriptEntry,
    Speaker,
)
from prepcoach.models.evaluation import (
    InterviewEvaluation,
    EvaluationSource,
    HeuristicThresholds,
    ScoreBand,
)
from prepcoach.models.analytics import (
    InterviewAnalytics,
    ScoreDistribution,
    ProgressPoint,
)
from prepcoach.models.roles import Role, Difficulty, InterviewType

__all__ = [
    # Interview
    "InterviewSession",
    "InterviewSetup",
    "SessionStatus",
    "SessionSummary",
    "InterviewStart",
    "AnswerOutcome",
    "QuestionRecord",
    "AnswerRecord",
    "TranscriptEntry",
    "Speaker",
    # Evaluation
    "InterviewEvaluation",
    "EvaluationSource",
    "HeuristicThresholds",
    "ScoreBand",
    # Analytics
    "InterviewAnalytics",
    "ScoreDistribution",
    "ProgressPoint",
    # Roles
    "Role",
    "Difficulty",
    "InterviewType",
]
