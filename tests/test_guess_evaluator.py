"""
Tests for GuessEvaluator, including duplicate-letter handling.
"""

import pytest

from wrathword.models import Feedback, TileState

C = TileState.CORRECT
P = TileState.PRESENT
A = TileState.ABSENT


@pytest.mark.parametrize("answer, guess, expected", [
    ("HELLO", "HELLO", [C, C, C, C, C]),
    ("HELLO", "HELPS", [C, C, C, A, A]),
    ("CRANE", "NACRE", [P, P, P, P, C]),
    ("LEVEL", "BELLE", [A, C, P, P, P]),
    ("LEVEL", "LEMON", [C, C, A, A, A]),
    ("HELLO", "LLLLL", [A, A, C, C, A]),
    ("SPEED", "EERIE", [P, P, A, A, A]),
    ("ABBEY", "BBBBB", [A, C, C, A, A]),
])
def test_evaluate(evaluator, answer, guess, expected):
    assert evaluator.evaluate(answer, guess) == Feedback.from_states(expected)


def test_case_insensitive(evaluator):
    assert evaluator.evaluate("crane", "CRANE").is_win()
    assert evaluator.evaluate("CRANE", "crane").is_win()


def test_feedback_length_matches_word(evaluator):
    for answer, guess in [("BOOK", "COOK"), ("PLANET", "PLANTS")]:
        assert len(evaluator.evaluate(answer, guess)) == len(answer)


def test_present_letters_never_exceed_answer_count(evaluator):
    feedback = evaluator.evaluate("ROBOT", "OOOOO")
    marked = feedback.count_by_state(C) + feedback.count_by_state(P)
    assert marked == 2


def test_length_mismatch_raises(evaluator):
    with pytest.raises(ValueError):
        evaluator.evaluate("HELLO", "HELL")
