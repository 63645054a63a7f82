"""
Offline completion provider for PrepCoach

Serves questions from the canned question bank and evaluates with the
heuristic scorer. Never touches the network.
"""

import logging

from prepcoach.core.evaluation_engine import HeuristicEvaluator
from prepcoach.core.providers import CompletionProvider, EvaluationRequest, QuestionRequest
from prepcoach.core.question_bank import QUESTION_BANK, QuestionKey, get_question
from prepcoach.models.evaluation import HeuristicThresholds, InterviewEvaluation

logger = logging.getLogger(__name__)


class FallbackProvider(CompletionProvider):
    """Deterministic question bank plus rule-based evaluator."""

    name = "fallback"

    def __init__(
        self,
        thresholds: HeuristicThresholds | None = None,
        bank: dict[QuestionKey, tuple[str, ...]] = QUESTION_BANK,
    ):
        self.evaluator = HeuristicEvaluator(thresholds)
        self.bank = bank

    async def generate_question(self, request: QuestionRequest) -> str:
        return get_question(
            request.role,
            request.difficulty,
            request.interview_type,
            request.question_number,
            bank=self.bank,
        )

    async def evaluate_transcript(self, request: EvaluationRequest) -> InterviewEvaluation:
        evaluation = self.evaluator.evaluate(
            request.role,
            request.difficulty,
            request.interview_type,
            request.answers,
        )
        logger.info(f"Heuristic evaluation complete: score={evaluation.overall_score}")
        return evaluation
