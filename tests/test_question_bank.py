import asyncio

from prepcoach.core.fallback_provider import FallbackProvider
from prepcoach.core.providers import QuestionRequest
from prepcoach.core.question_bank import (
    DEFAULT_KEY,
    GENERIC_QUESTION,
    QUESTION_BANK,
    get_question,
    resolve_bucket,
)
from prepcoach.models.roles import Difficulty, InterviewType, Role


def test_every_combination_has_a_bucket() -> None:
    for role in Role:
        for difficulty in Difficulty:
            for kind in InterviewType:
                bucket = QUESTION_BANK[(role, difficulty, kind)]
                assert len(bucket) == 10
                assert all(question.strip() for question in bucket)


def test_question_number_selects_and_wraps() -> None:
    key = (Role.MERN, Difficulty.BEGINNER, InterviewType.BEHAVIORAL)
    bucket = QUESTION_BANK[key]

    assert get_question(*key, 1) == bucket[0]
    assert get_question(*key, 10) == bucket[9]
    assert get_question(*key, 11) == bucket[0]
    assert get_question(*key, 0) == bucket[0]


def test_lookup_is_pure() -> None:
    args = (Role.FRONTEND, Difficulty.INTERMEDIATE, InterviewType.MIXED, 4)

    assert get_question(*args) == get_question(*args)


def test_missing_type_falls_back_to_technical_bucket() -> None:
    technical = (Role.BACKEND, Difficulty.ADVANCED, InterviewType.TECHNICAL)
    bank = {technical: ("Only technical",), DEFAULT_KEY: ("Default",)}

    assert resolve_bucket(Role.BACKEND, Difficulty.ADVANCED, InterviewType.BEHAVIORAL, bank) == ("Only technical",)


def test_unknown_values_fall_back_to_default_bucket() -> None:
    assert resolve_bucket("Data Scientist", "Expert", "Panel") == QUESTION_BANK[DEFAULT_KEY]


def test_empty_bank_uses_generic_question() -> None:
    question = get_question(Role.FRONTEND, Difficulty.BEGINNER, InterviewType.TECHNICAL, 3, bank={})

    assert question == GENERIC_QUESTION.format(role="Frontend")


def test_fallback_provider_serves_bank_questions() -> None:
    request = QuestionRequest(
        system_prompt="system",
        user_prompt="user",
        role=Role.FULL_STACK,
        difficulty=Difficulty.ADVANCED,
        interview_type=InterviewType.TECHNICAL,
        question_number=2,
    )

    question = asyncio.run(FallbackProvider().generate_question(request))

    assert question == QUESTION_BANK[(Role.FULL_STACK, Difficulty.ADVANCED, InterviewType.TECHNICAL)][1]
