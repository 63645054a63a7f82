import asyncio
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from prepcoach.config.settings import ProviderMode, Settings
from prepcoach.core.errors import ProviderError
from prepcoach.core.fallback_provider import FallbackProvider
from prepcoach.core.interview_orchestrator import InterviewOrchestrator
from prepcoach.core.provider_registry import ProviderRegistry
from prepcoach.core.providers import CompletionProvider, EvaluationRequest, QuestionRequest
from prepcoach.core.session_store import InMemorySessionStore
from prepcoach.models.evaluation import EvaluationSource, InterviewEvaluation


class ScriptedProvider(CompletionProvider):
    """Stand-in tier whose latency and failures are set per test."""

    def __init__(self, name: str = "remote", score: int = 82):
        self.name = name
        self.score = score
        self.delay = 0.0
        self.fail_questions = False
        self.fail_evaluation = False
        self.question_requests: list[QuestionRequest] = []
        self.evaluation_requests: list[EvaluationRequest] = []
        self.closed = False

    async def generate_question(self, request: QuestionRequest) -> str:
        self.question_requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_questions:
            raise ProviderError("scripted question failure", status_code=500)
        return f"{self.name} question {request.question_number}"

    async def evaluate_transcript(self, request: EvaluationRequest) -> InterviewEvaluation:
        self.evaluation_requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_evaluation:
            raise ProviderError("scripted evaluation failure", status_code=500)
        return InterviewEvaluation(
            overall_score=self.score,
            strengths=["Clear explanations"],
            weaknesses=["Limited depth on scaling"],
            missed_topics=["Caching"],
            suggestions=["Practice system design"],
            source=EvaluationSource.REMOTE,
        )

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        groq_api_key="",
        provider_mode=ProviderMode.AUTO,
        langfuse_enabled=False,
    )


@pytest.fixture
def remote() -> ScriptedProvider:
    return ScriptedProvider()


@pytest.fixture
def registry(remote) -> ProviderRegistry:
    return ProviderRegistry(remote, FallbackProvider())


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def orchestrator(registry, store, settings) -> InterviewOrchestrator:
    return InterviewOrchestrator(registry=registry, store=store, settings=settings)


@pytest.fixture
def scripted_provider_cls():
    return ScriptedProvider
