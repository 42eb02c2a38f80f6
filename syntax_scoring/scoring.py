# File: syntax_scoring/scoring.py
"""
Score tables and reducers.

Corruption: each offending closer maps to a fixed point value; the total is a
plain sum, so line order does not matter.

Completion: each closing sequence is read as a base-5 number whose digits are
the closers' point values, innermost closer first. The winner is the median of
all per-line scores, taken only after every line has been scored.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .delimiters import MedianUndefinedError, UnscoredCloserError

CORRUPTION_POINTS: Mapping[str, int] = MappingProxyType({
    ")": 3,
    "]": 57,
    "}": 1197,
    ">": 25137,
})

COMPLETION_POINTS: Mapping[str, int] = MappingProxyType({
    ")": 1,
    "]": 2,
    "}": 3,
    ">": 4,
})

COMPLETION_BASE = 5


def corruption_score(chars: Iterable[str], points: Mapping[str, int] = CORRUPTION_POINTS) -> int:
    """Sum of points for each offending character; unknown characters count 0."""
    return sum(points.get(ch, 0) for ch in chars)


def completion_score(sequence: Iterable[str], points: Mapping[str, int] = COMPLETION_POINTS) -> int:
    """
    Fold a completion sequence left to right: score = score * 5 + points[ch].

    A closer missing from the point table raises UnscoredCloserError.

    Example:
        >>> completion_score("])}>")
        294
    """
    score = 0
    for ch in sequence:
        if ch not in points:
            raise UnscoredCloserError(ch)
        score = score * COMPLETION_BASE + points[ch]
    return score


def median_score(scores: Iterable[int]) -> int:
    """
    Exact middle element of the sorted scores.

    Only odd-sized inputs have a middle element; empty and even-sized inputs
    raise MedianUndefinedError instead of picking a neighbour.
    """
    ordered = sorted(scores)
    if not ordered:
        raise MedianUndefinedError("No completion scores to take a median of")
    if len(ordered) % 2 == 0:
        raise MedianUndefinedError(
            f"Median is undefined for an even number of scores ({len(ordered)})"
        )
    return ordered[len(ordered) // 2]
