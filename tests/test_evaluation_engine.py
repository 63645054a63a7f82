import asyncio

from prepcoach.core.evaluation_engine import EvaluationEngine
from prepcoach.core.provider_registry import ProviderRegistry
from prepcoach.models.interview import InterviewSession, InterviewSetup
from prepcoach.models.roles import Difficulty, InterviewType, Role
from prepcoach.prompts.evaluator import EvaluatorPrompts


def _answered_session() -> InterviewSession:
    session = InterviewSession(
        owner_id="user-1",
        setup=InterviewSetup(role=Role.FRONTEND, difficulty=Difficulty.ADVANCED, interview_type=InterviewType.MIXED, total_questions=5),
    )
    for number in range(1, 6):
        session.add_question(f"Question {number}: " + "q" * 300)
        session.add_answer(f"Answer {number}: " + "a" * 300)
    return session


def test_request_carries_answers_and_bounded_prompt(remote) -> None:
    engine = EvaluationEngine(ProviderRegistry(remote), EvaluatorPrompts(prompt_max_chars=1500))

    request = engine.build_request(_answered_session())

    assert len(request.answers) == 5
    assert request.answers[0].startswith("Answer 1: ")
    assert len(request.answers[0]) > 300
    assert len(request.evaluation_prompt) <= 1500
    assert request.role == Role.FRONTEND
    assert request.interview_type == InterviewType.MIXED
    assert "Frontend interviewer" in request.system_prompt


def test_evaluate_returns_registry_result(remote) -> None:
    engine = EvaluationEngine(ProviderRegistry(remote))

    evaluation = asyncio.run(engine.evaluate(_answered_session(), timeout=1.0))

    assert evaluation.overall_score == remote.score
    assert len(remote.evaluation_requests) == 1
