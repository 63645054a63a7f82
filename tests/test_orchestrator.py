import asyncio
from datetime import timedelta

import pytest

from prepcoach.core.errors import (
    EvaluationError,
    NotOwnerError,
    PendingStepError,
    QuestionGenerationError,
    SessionAlreadyCompletedError,
    SessionNotFoundError,
    ValidationError,
)
from prepcoach.core.fallback_provider import FallbackProvider
from prepcoach.core.interview_orchestrator import InterviewOrchestrator
from prepcoach.core.provider_registry import ProviderRegistry
from prepcoach.core.question_bank import QUESTION_BANK
from prepcoach.models.evaluation import EvaluationSource
from prepcoach.models.interview import SessionStatus, Speaker
from prepcoach.models.roles import Difficulty, InterviewType, Role

OWNER = "user-1"

DETAILED_ANSWER = (
    "I would start by profiling the slow path, then add an index on the lookup column, "
    "cache the hot reads in Redis with a short TTL, and paginate the listing endpoint."
)


def _start(orchestrator, total=5, role="Backend", difficulty="Beginner", interview_type="Technical"):
    return asyncio.run(
        orchestrator.start(
            owner_id=OWNER,
            role=role,
            difficulty=difficulty,
            interview_type=interview_type,
            total_questions=total,
        )
    )


def _answer(orchestrator, session_id, text=DETAILED_ANSWER, owner=OWNER):
    return asyncio.run(orchestrator.submit_answer(session_id, owner, text, elapsed_seconds=12.5))


def _session(orchestrator, session_id):
    return asyncio.run(orchestrator.get_session(session_id, OWNER))


def test_start_creates_session_with_first_question(orchestrator, remote) -> None:
    started = _start(orchestrator, total=6)

    assert started.question_number == 1
    assert started.total_questions == 6
    assert started.status == SessionStatus.IN_PROGRESS
    assert started.first_question == "remote question 1"

    session = _session(orchestrator, started.session_id)
    assert session.current_question_number == 1
    assert len(session.questions) == 1
    assert session.questions[0].context == "Initial question"
    assert [entry.speaker for entry in session.transcript] == [Speaker.INTERVIEWER]
    assert remote.question_requests[0].question_number == 1
    assert "first technical question" in remote.question_requests[0].user_prompt


def test_start_uses_default_total_questions(orchestrator, settings) -> None:
    started = asyncio.run(orchestrator.start(owner_id=OWNER, role="MERN", difficulty="Advanced"))

    assert started.total_questions == settings.default_total_questions
    session = _session(orchestrator, started.session_id)
    assert session.interview_type == InterviewType.TECHNICAL


def test_start_accepts_hr_as_behavioral(orchestrator) -> None:
    started = _start(orchestrator, interview_type="HR")

    assert _session(orchestrator, started.session_id).interview_type == InterviewType.BEHAVIORAL


@pytest.mark.parametrize(
    "role, difficulty, interview_type, total",
    [
        ("Data Scientist", "Beginner", "Technical", 5),
        ("Backend", "Expert", "Technical", 5),
        ("Backend", "Beginner", "Panel", 5),
        ("Backend", "Beginner", "Technical", 4),
        ("Backend", "Beginner", "Technical", 11),
    ],
)
def test_start_rejects_invalid_configuration(orchestrator, store, role, difficulty, interview_type, total) -> None:
    with pytest.raises(ValidationError):
        _start(orchestrator, total=total, role=role, difficulty=difficulty, interview_type=interview_type)

    assert len(store) == 0


def test_start_requires_owner(orchestrator) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(orchestrator.start(owner_id="  ", role="Backend", difficulty="Beginner"))


def test_start_falls_back_to_question_bank_when_remote_times_out(remote, store, settings) -> None:
    remote.delay = 1.0
    settings.first_question_timeout_seconds = 0.05
    orchestrator = InterviewOrchestrator(ProviderRegistry(remote, FallbackProvider()), store, settings)

    started = _start(orchestrator)

    bank = QUESTION_BANK[(Role.BACKEND, Difficulty.BEGINNER, InterviewType.TECHNICAL)]
    assert started.first_question == bank[0]
    assert _session(orchestrator, started.session_id).status == SessionStatus.IN_PROGRESS


def test_start_persists_nothing_when_no_tier_answers(remote, store, settings) -> None:
    remote.fail_questions = True
    orchestrator = InterviewOrchestrator(ProviderRegistry(remote), store, settings)

    with pytest.raises(QuestionGenerationError):
        _start(orchestrator)

    assert len(store) == 0


def test_five_answers_complete_the_interview(orchestrator) -> None:
    started = _start(orchestrator, total=5)
    numbers = [started.question_number]

    for index in range(4):
        outcome = _answer(orchestrator, started.session_id)
        assert outcome.completed is False
        assert outcome.next_question == f"remote question {index + 2}"
        numbers.append(outcome.question_number)

    final = _answer(orchestrator, started.session_id)

    assert numbers == [1, 2, 3, 4, 5]
    assert final.completed is True
    assert final.next_question is None
    assert 0 <= final.score <= 100
    assert final.evaluation.overall_score == final.score

    session = _session(orchestrator, started.session_id)
    assert session.status == SessionStatus.COMPLETED
    assert len(session.answers) == len(session.questions) == session.total_questions == 5
    assert len(session.transcript) == 10
    assert session.current_question_number == 5
    assert session.completed_at is not None
    assert session.provider == EvaluationSource.REMOTE
    assert session.questions[3].context == "Follow-up to question 3"


def test_context_prompt_carries_previous_exchange(orchestrator, remote) -> None:
    started = _start(orchestrator)
    _answer(orchestrator, started.session_id, text="Indexes speed up reads at the cost of slower writes.")

    follow_up = remote.question_requests[-1]
    assert follow_up.question_number == 2
    assert 'Previous Q: "remote question 1"' in follow_up.user_prompt
    assert "Indexes speed up reads" in follow_up.user_prompt


def test_fallback_questions_follow_question_number(remote, orchestrator) -> None:
    remote.fail_questions = True

    started = _start(orchestrator, role="Frontend", difficulty="Advanced")
    second = _answer(orchestrator, started.session_id)
    third = _answer(orchestrator, started.session_id)

    bank = QUESTION_BANK[(Role.FRONTEND, Difficulty.ADVANCED, InterviewType.TECHNICAL)]
    assert started.first_question == bank[0]
    assert second.next_question == bank[1]
    assert third.next_question == bank[2]


def test_remote_evaluation_failure_uses_fallback_scorer(remote, orchestrator) -> None:
    remote.fail_evaluation = True
    started = _start(orchestrator)
    for _ in range(5):
        outcome = _answer(orchestrator, started.session_id, text="I don't know")

    assert outcome.completed is True
    assert outcome.evaluation.source == EvaluationSource.FALLBACK
    assert outcome.score <= 30
    assert _session(orchestrator, started.session_id).provider == EvaluationSource.FALLBACK


def test_submit_after_completion_leaves_session_unchanged(orchestrator) -> None:
    started = _start(orchestrator)
    for _ in range(5):
        _answer(orchestrator, started.session_id)
    before = _session(orchestrator, started.session_id)

    with pytest.raises(SessionAlreadyCompletedError):
        _answer(orchestrator, started.session_id)

    assert _session(orchestrator, started.session_id) == before


def test_unknown_session_and_wrong_owner(orchestrator) -> None:
    started = _start(orchestrator)

    with pytest.raises(SessionNotFoundError):
        _answer(orchestrator, "missing")

    with pytest.raises(NotOwnerError):
        _answer(orchestrator, started.session_id, owner="someone-else")

    with pytest.raises(NotOwnerError):
        asyncio.run(orchestrator.get_session(started.session_id, "someone-else"))


def test_blank_answer_is_rejected(orchestrator) -> None:
    started = _start(orchestrator)

    with pytest.raises(ValidationError):
        _answer(orchestrator, started.session_id, text="   ")

    assert _session(orchestrator, started.session_id).answers == []


def test_failed_follow_up_keeps_answer_and_counter(remote, store, settings, scripted_provider_cls) -> None:
    fallback = scripted_provider_cls(name="fallback")
    orchestrator = InterviewOrchestrator(ProviderRegistry(remote, fallback), store, settings)
    started = _start(orchestrator)

    remote.fail_questions = True
    fallback.fail_questions = True
    with pytest.raises(QuestionGenerationError):
        _answer(orchestrator, started.session_id)

    session = _session(orchestrator, started.session_id)
    assert session.current_question_number == 1
    assert len(session.answers) == 1
    assert session.has_pending_step

    with pytest.raises(PendingStepError):
        _answer(orchestrator, started.session_id)

    remote.fail_questions = False
    resumed = asyncio.run(orchestrator.resume(started.session_id, OWNER))

    assert resumed.question_number == 2
    assert resumed.next_question == "remote question 2"


def test_failed_evaluation_keeps_answer_and_resume_completes(remote, store, settings, scripted_provider_cls) -> None:
    fallback = scripted_provider_cls(name="fallback")
    orchestrator = InterviewOrchestrator(ProviderRegistry(remote, fallback), store, settings)
    started = _start(orchestrator)
    for _ in range(4):
        _answer(orchestrator, started.session_id)

    remote.fail_evaluation = True
    fallback.fail_evaluation = True
    with pytest.raises(EvaluationError):
        _answer(orchestrator, started.session_id, text="My final answer about caching strategies.")

    session = _session(orchestrator, started.session_id)
    assert session.status == SessionStatus.IN_PROGRESS
    assert session.answers[-1].text == "My final answer about caching strategies."
    assert session.evaluation is None

    remote.fail_evaluation = False
    resumed = asyncio.run(orchestrator.resume(started.session_id, OWNER))

    assert resumed.completed is True
    assert resumed.score == remote.score
    assert _session(orchestrator, started.session_id).status == SessionStatus.COMPLETED


def test_resume_without_pending_step_is_rejected(orchestrator) -> None:
    started = _start(orchestrator)

    with pytest.raises(ValidationError):
        asyncio.run(orchestrator.resume(started.session_id, OWNER))


def test_list_sessions_newest_first(orchestrator, store) -> None:
    first = _start(orchestrator)
    second = _start(orchestrator, role="Frontend")
    _start(orchestrator)
    asyncio.run(orchestrator.start(owner_id="other", role="MERN", difficulty="Beginner"))

    older = asyncio.run(store.get(first.session_id))
    older.created_at = older.created_at - timedelta(hours=1)
    asyncio.run(store.save(older))

    summaries = asyncio.run(orchestrator.list_sessions(OWNER))

    assert len(summaries) == 3
    assert summaries[-1].id == first.session_id
    assert second.session_id in [summary.id for summary in summaries[:2]]
    assert all(summary.status == SessionStatus.IN_PROGRESS for summary in summaries)


def test_abandon_marks_in_progress_session(orchestrator) -> None:
    started = _start(orchestrator)

    abandoned = asyncio.run(orchestrator.abandon(started.session_id))

    assert abandoned.status == SessionStatus.ABANDONED
    with pytest.raises(ValidationError):
        _answer(orchestrator, started.session_id)


def test_abandon_leaves_completed_session(orchestrator) -> None:
    started = _start(orchestrator)
    for _ in range(5):
        _answer(orchestrator, started.session_id)

    session = asyncio.run(orchestrator.abandon(started.session_id))

    assert session.status == SessionStatus.COMPLETED


def test_stored_session_is_isolated_from_callers(orchestrator) -> None:
    started = _start(orchestrator)
    session = _session(orchestrator, started.session_id)

    session.questions.clear()

    assert len(_session(orchestrator, started.session_id).questions) == 1


def test_injected_empty_store_is_kept(registry, store, settings) -> None:
    orchestrator = InterviewOrchestrator(registry, store, settings)

    assert len(store) == 0
    assert orchestrator.store is store

    started = _start(orchestrator)

    assert len(store) == 1
    assert asyncio.run(store.get(started.session_id)).id == started.session_id
