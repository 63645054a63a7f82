"""
Completion provider contract.

A provider turns prompts into interview questions and evaluations. The
remote tier reads the prompt text; the offline tier reads the structured
fields carried alongside, so both can serve the same request.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from prepcoach.models.evaluation import InterviewEvaluation
from prepcoach.models.roles import Difficulty, InterviewType, Role


@dataclass(frozen=True)
class QuestionRequest:
    """Everything a provider needs to produce one question."""

    system_prompt: str
    user_prompt: str
    role: Role
    difficulty: Difficulty
    interview_type: InterviewType
    question_number: int


@dataclass(frozen=True)
class EvaluationRequest:
    """Everything a provider needs to evaluate a finished interview."""

    system_prompt: str
    evaluation_prompt: str
    role: Role
    difficulty: Difficulty
    interview_type: InterviewType
    answers: tuple[str, ...] = field(default_factory=tuple)


class CompletionProvider(ABC):
    """Interchangeable question/evaluation backend."""

    name: str = "provider"

    @abstractmethod
    async def generate_question(self, request: QuestionRequest) -> str:
        """
        Produce a single short interview question.

        Raises:
            ProviderError: If no usable question could be produced
        """

    @abstractmethod
    async def evaluate_transcript(self, request: EvaluationRequest) -> InterviewEvaluation:
        """
        Produce a fully populated evaluation.

        Raises:
            ProviderError: If no valid evaluation could be produced
        """

    async def close(self) -> None:
        """Release any held resources."""
