import random

import pytest

from syntax_scoring.delimiters import MedianUndefinedError, SyntaxScoringError, UnscoredCloserError
from syntax_scoring.scoring import (
    COMPLETION_POINTS,
    CORRUPTION_POINTS,
    completion_score,
    corruption_score,
    median_score,
)


def test_corruption_points_table():
    assert dict(CORRUPTION_POINTS) == {")": 3, "]": 57, "}": 1197, ">": 25137}
    assert dict(COMPLETION_POINTS) == {")": 1, "]": 2, "}": 3, ">": 4}


def test_corruption_score_canonical_example():
    assert corruption_score(["}", ")", "]", ")", ">"]) == 26397


def test_corruption_score_ignores_unknown_and_empty():
    assert corruption_score([]) == 0
    assert corruption_score(["x", "", ")"]) == 3


@pytest.mark.parametrize("sequence,expected", [
    ("])}>", 294),
    ("}}]])})]", 288957),
    (")}>]})", 5566),
    ("}}>}>))))", 1480781),
    ("]]}}]}]}>", 995444),
    ("", 0),
])
def test_completion_score_is_base_five(sequence, expected):
    assert completion_score(sequence) == expected


def test_completion_score_order_matters():
    assert completion_score("])") == 11
    assert completion_score(")]") == 7


def test_completion_score_exceeds_32_bits():
    assert completion_score(">" * 20) == 5 ** 20 - 1
    assert completion_score(">" * 20) > 2 ** 32


def test_median_of_canonical_scores():
    scores = [288957, 5566, 1480781, 995444, 294]
    random.Random(7).shuffle(scores)
    assert median_score(scores) == 288957


def test_median_is_central_element_not_average():
    assert median_score([1, 2, 100]) == 2
    assert median_score([5]) == 5


@pytest.mark.parametrize("scores", [[], [1, 100], [4, 3, 2, 1]])
def test_median_undefined_for_empty_or_even(scores):
    with pytest.raises(MedianUndefinedError):
        median_score(scores)


def test_completion_score_names_unscored_closer():
    with pytest.raises(UnscoredCloserError) as exc:
        completion_score(")b")
    assert exc.value.char == "b"
    assert isinstance(exc.value, SyntaxScoringError)
    assert str(exc.value) == "No completion points defined for closer 'b'"


def test_completion_score_with_custom_points():
    assert completion_score("bb", {"b": 2}) == 12
