"""
Evaluation Engine for PrepCoach

Turns a finished interview into a structured evaluation.
Works with the Provider Registry for the remote tier, and owns the
heuristic scorer used by the offline tier.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from prepcoach.core.providers import EvaluationRequest
from prepcoach.models.evaluation import (
    EvaluationSource,
    HeuristicThresholds,
    InterviewEvaluation,
)
from prepcoach.models.interview import InterviewSession
from prepcoach.models.roles import Difficulty, InterviewType, Role
from prepcoach.prompts.evaluator import EvaluatorPrompts
from prepcoach.prompts.interviewer import label

if TYPE_CHECKING:
    from prepcoach.core.provider_registry import ProviderRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnswerTally:
    """Outcome of scoring a list of answers."""

    score: int
    weak_count: int
    strong_count: int
    answer_count: int


class HeuristicEvaluator:
    """
    Deterministic scorer over candidate answers only.

    Starts from a baseline, penalizes short or low-confidence answers,
    rewards long ones, clamps, then applies the below-average and poor
    ceilings. The same answers always produce the same evaluation.
    """

    def __init__(self, thresholds: HeuristicThresholds | None = None):
        self.thresholds = thresholds or HeuristicThresholds()

    def is_weak(self, answer: str) -> bool:
        text = answer.strip().lower()
        if len(text) < self.thresholds.min_answer_length:
            return True
        return any(phrase in text for phrase in self.thresholds.low_confidence_phrases)

    def is_strong(self, answer: str) -> bool:
        return len(answer.strip()) > self.thresholds.strong_answer_length

    def tally(self, answers: Iterable[str]) -> AnswerTally:
        """Score answers without building the qualitative feedback."""
        t = self.thresholds
        score = t.baseline_score
        weak = 0
        strong = 0
        count = 0

        for answer in answers:
            count += 1
            if self.is_weak(answer):
                weak += 1
                score -= t.weak_penalty
            elif self.is_strong(answer):
                strong += 1
                score += t.strong_bonus

        score = max(0, min(100, score))

        if weak > strong:
            score = min(score, t.below_average_ceiling)

        if weak >= t.severe_weak_count:
            score = min(score, t.poor_ceiling)

        return AnswerTally(score=score, weak_count=weak, strong_count=strong, answer_count=count)

    def evaluate(
        self,
        role: Role | str,
        difficulty: Difficulty | str,
        interview_type: InterviewType | str,
        answers: Iterable[str],
    ) -> InterviewEvaluation:
        """Build a complete evaluation from the candidate's answers."""
        tally = self.tally(answers)
        role_name = label(role)
        behavioral = interview_type == InterviewType.BEHAVIORAL
        severe = tally.weak_count >= self.thresholds.severe_weak_count

        if tally.strong_count > 0:
            strengths = [
                "Attempted to answer questions",
                "Showed engagement",
                f"Some {role_name} knowledge demonstrated"
                if tally.strong_count > self.thresholds.many_strong_count
                else "Basic understanding",
            ]
        else:
            strengths = ["Willingness to participate"]

        if tally.weak_count > 0:
            weaknesses = [
                "Several answers were incomplete or incorrect",
                "Need to strengthen fundamental concepts",
                "Should practice more before interviews",
            ]
            if severe:
                weaknesses.append("Multiple incorrect answers indicate significant knowledge gaps")
        elif behavioral:
            weaknesses = [
                "Could provide more detailed answers",
                "Use more concrete examples from past experience",
            ]
        else:
            weaknesses = [
                "Could provide more detailed answers",
                "Need deeper technical understanding",
            ]

        missed_topics = [
            f"{role_name} specific advanced topics",
            "Practical implementation details",
            "Best practices and patterns",
        ]

        suggestions = [
            "Study core concepts more thoroughly",
            "Practice explaining technical concepts",
            "Work on problem-solving skills",
            f"Focus on {role_name} specific technologies",
        ]
        if severe:
            suggestions.append("Consider taking a fundamentals course before advanced interviews")

        role_feedback = f"Based on your answers, you need to strengthen your {role_name} knowledge. "
        if severe:
            role_feedback += "Multiple incorrect answers suggest you should focus on fundamentals first. "
        role_feedback += "Focus on core concepts and practice explaining them clearly."

        if tally.score < 30:
            outlook = "need for significant preparation and study"
        elif tally.score < 50:
            outlook = "need for more preparation"
        elif tally.score < 70:
            outlook = "basic understanding that needs improvement"
        else:
            outlook = "solid foundation"

        detailed = f"The candidate answered {tally.answer_count} questions at the {label(difficulty)} level. "
        if tally.weak_count > 0:
            detailed += f"{tally.weak_count} answer(s) were incomplete or showed gaps in understanding. "
        detailed += f"The overall performance indicates a {outlook}. Continue practicing {role_name} concepts to improve."

        return InterviewEvaluation(
            overall_score=tally.score,
            strengths=strengths,
            weaknesses=weaknesses,
            missed_topics=missed_topics,
            suggestions=suggestions,
            role_specific_feedback=role_feedback,
            detailed_evaluation=detailed,
            source=EvaluationSource.FALLBACK,
        )


class EvaluationEngine:
    """
    Central evaluation component for finished interviews.

    Responsibilities:
    - Build the bounded evaluation prompt from the transcript
    - Ask the provider registry for an evaluation
    """

    def __init__(
        self,
        registry: "ProviderRegistry",
        prompts: EvaluatorPrompts | None = None,
    ):
        """
        Initialize evaluation engine.

        Args:
            registry: Provider registry that owns tier selection and fallback
            prompts: Evaluation prompt templates
        """
        self.registry = registry
        self.prompts = prompts or EvaluatorPrompts()

    def build_request(self, session: InterviewSession) -> EvaluationRequest:
        """Build the evaluation request for a session."""
        setup = session.setup
        return EvaluationRequest(
            system_prompt=self.prompts.system_prompt(setup.role, setup.difficulty, setup.interview_type),
            evaluation_prompt=self.prompts.evaluation_prompt(
                setup.role,
                setup.difficulty,
                setup.interview_type,
                session.transcript,
            ),
            role=setup.role,
            difficulty=setup.difficulty,
            interview_type=setup.interview_type,
            answers=tuple(session.candidate_answers()),
        )

    async def evaluate(self, session: InterviewSession, timeout: float) -> InterviewEvaluation:
        """
        Evaluate a session whose final answer has been recorded.

        Raises:
            EvaluationError: If no tier produced an evaluation in time
        """
        request = self.build_request(session)
        evaluation = await self.registry.evaluate(request, timeout=timeout)
        logger.info(
            f"Session {session.id} evaluated: score={evaluation.overall_score} "
            f"source={evaluation.source.value}"
        )
        return evaluation
