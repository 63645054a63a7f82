"""
Evaluation models for PrepCoach

Defines the final interview evaluation and the tunable thresholds used
by the offline heuristic scorer.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_ROLE_FEEDBACK = "No specific feedback provided."
DEFAULT_DETAILED_EVALUATION = "Evaluation completed."


class EvaluationSource(str, Enum):
    """Which tier produced an evaluation."""

    REMOTE = "remote"
    FALLBACK = "fallback"


class ScoreBand(str, Enum):
    """Qualitative score bands used by analytics."""

    EXCELLENT = "excellent"                  # 80-100
    GOOD = "good"                            # 60-79
    AVERAGE = "average"                      # 40-59
    NEEDS_IMPROVEMENT = "needs_improvement"  # 0-39

    @classmethod
    def from_score(cls, score: float) -> "ScoreBand":
        if score >= 80:
            return cls.EXCELLENT
        elif score >= 60:
            return cls.GOOD
        elif score >= 40:
            return cls.AVERAGE
        else:
            return cls.NEEDS_IMPROVEMENT


class InterviewEvaluation(BaseModel):
    """Structured evaluation of a completed interview."""

    overall_score: int = Field(..., ge=0, le=100)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    missed_topics: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    role_specific_feedback: str = DEFAULT_ROLE_FEEDBACK
    detailed_evaluation: str = DEFAULT_DETAILED_EVALUATION
    source: EvaluationSource = EvaluationSource.REMOTE

    @classmethod
    def from_raw(
        cls,
        data: dict[str, Any],
        source: EvaluationSource = EvaluationSource.REMOTE,
    ) -> "InterviewEvaluation":
        """
        Build an evaluation from loosely-typed model output.

        Every field is repaired independently: missing or mistyped lists
        become empty lists, missing text gets a stock sentence, and the
        score is coerced to an int and clamped into [0, 100].

        Raises:
            TypeError: If data is not a JSON object
        """
        if not isinstance(data, dict):
            raise TypeError(f"Evaluation must be a JSON object, got {type(data).__name__}")

        return cls(
            overall_score=_repair_score(_pick(data, "overallScore", "overall_score")),
            strengths=_repair_list(_pick(data, "strengths")),
            weaknesses=_repair_list(_pick(data, "weaknesses")),
            missed_topics=_repair_list(_pick(data, "missedTopics", "missed_topics")),
            suggestions=_repair_list(_pick(data, "suggestions")),
            role_specific_feedback=_repair_text(
                _pick(data, "roleSpecificFeedback", "role_specific_feedback"),
                DEFAULT_ROLE_FEEDBACK,
            ),
            detailed_evaluation=_repair_text(
                _pick(data, "detailedEvaluation", "detailed_evaluation"),
                DEFAULT_DETAILED_EVALUATION,
            ),
            source=source,
        )


class HeuristicThresholds(BaseModel):
    """Hand-tuned constants for the offline evaluator."""

    baseline_score: int = 50
    min_answer_length: int = 20
    strong_answer_length: int = 100
    weak_penalty: int = 10
    strong_bonus: int = 5
    below_average_ceiling: int = 40
    poor_ceiling: int = 30
    severe_weak_count: int = 5
    many_strong_count: int = 2
    low_confidence_phrases: tuple[str, ...] = (
        "don't know",
        "dont know",
        "do not know",
        "not sure",
        "wrong",
    )


# =========================================================================
# REPAIR HELPERS
# =========================================================================

def _pick(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _repair_score(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return 0
    if not isinstance(value, (int, float)) or value != value:  # NaN
        return 0
    return int(round(max(0.0, min(100.0, float(value)))))


def _repair_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


def _repair_text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default
