from prepcoach.core.evaluation_engine import HeuristicEvaluator
from prepcoach.models.evaluation import EvaluationSource, HeuristicThresholds
from prepcoach.models.roles import Difficulty, InterviewType, Role

LONG_ANSWER = (
    "A closure captures variables from its enclosing scope, so an inner function keeps access to them "
    "after the outer function returns. I use closures for memoization, event handlers, and module privacy."
)

MEDIUM_ANSWER = "Promises represent a value that will be available later."


def _evaluate(answers, role=Role.BACKEND, difficulty=Difficulty.BEGINNER, kind=InterviewType.TECHNICAL):
    return HeuristicEvaluator().evaluate(role, difficulty, kind, answers)


def test_five_dont_know_answers_score_poorly() -> None:
    answers = ["I don't know"] * 5

    tally = HeuristicEvaluator().tally(answers)
    evaluation = _evaluate(answers)

    assert tally.weak_count == 5
    assert tally.strong_count == 0
    assert evaluation.overall_score <= 30
    assert evaluation.source == EvaluationSource.FALLBACK
    assert "Multiple incorrect answers indicate significant knowledge gaps" in evaluation.weaknesses


def test_five_detailed_answers_score_well_and_keep_weaknesses() -> None:
    assert len(LONG_ANSWER) > 150
    evaluation = _evaluate([LONG_ANSWER] * 5)

    assert HeuristicEvaluator().tally([LONG_ANSWER] * 5).strong_count == 5
    assert evaluation.overall_score == 75
    assert evaluation.overall_score <= 100
    assert evaluation.weaknesses == [
        "Could provide more detailed answers",
        "Need deeper technical understanding",
    ]
    assert "Some Backend knowledge demonstrated" in evaluation.strengths


def test_medium_answers_keep_baseline() -> None:
    tally = HeuristicEvaluator().tally([MEDIUM_ANSWER] * 3)

    assert (tally.score, tally.weak_count, tally.strong_count) == (50, 0, 0)


def test_more_weak_than_strong_caps_below_average() -> None:
    answers = [LONG_ANSWER, "not sure", "no idea", MEDIUM_ANSWER]

    tally = HeuristicEvaluator().tally(answers)

    assert tally.weak_count == 2
    assert tally.strong_count == 1
    assert tally.score == 35


def test_low_confidence_phrase_marks_long_answer_weak() -> None:
    answer = "I am not sure, but I think the event loop handles callbacks after the stack clears."

    assert HeuristicEvaluator().is_weak(answer)
    assert HeuristicEvaluator().is_weak("I dont know about that one")


def test_score_never_leaves_bounds() -> None:
    many_weak = HeuristicEvaluator().tally(["?"] * 20)
    many_strong = HeuristicEvaluator().tally([LONG_ANSWER] * 30)

    assert many_weak.score == 0
    assert many_strong.score == 100


def test_evaluation_is_deterministic() -> None:
    answers = [LONG_ANSWER, "wrong", MEDIUM_ANSWER, "I don't know", LONG_ANSWER]

    assert _evaluate(answers) == _evaluate(answers)


def test_no_list_is_ever_empty() -> None:
    for answers in ([], ["x"], [MEDIUM_ANSWER], [LONG_ANSWER] * 3):
        evaluation = _evaluate(answers, role=Role.FULL_STACK, kind=InterviewType.MIXED)
        assert evaluation.strengths
        assert evaluation.weaknesses
        assert evaluation.missed_topics
        assert evaluation.suggestions
        assert "Full Stack" in evaluation.role_specific_feedback


def test_behavioral_interview_weaknesses() -> None:
    evaluation = _evaluate([MEDIUM_ANSWER] * 5, kind=InterviewType.BEHAVIORAL)

    assert "Use more concrete examples from past experience" in evaluation.weaknesses


def test_detailed_evaluation_counts_answers() -> None:
    evaluation = _evaluate(["I don't know", MEDIUM_ANSWER], difficulty=Difficulty.ADVANCED)

    assert evaluation.detailed_evaluation.startswith("The candidate answered 2 questions at the Advanced level.")
    assert "1 answer(s) were incomplete" in evaluation.detailed_evaluation


def test_custom_thresholds() -> None:
    evaluator = HeuristicEvaluator(HeuristicThresholds(baseline_score=60, weak_penalty=20))

    assert evaluator.tally(["no"]).score == 40
