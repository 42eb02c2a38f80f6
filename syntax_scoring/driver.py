# File: syntax_scoring/driver.py
"""
Reads a navigation document, classifies every line and produces both scores.

Corrupted lines feed the corruption scorer. Incomplete lines carry their
residual open-stack to the completer, so a corrupted line never reaches it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Tuple

from .classifier import Classification, Corrupted, Incomplete, classify
from .completer import completion_for
from .delimiters import DEFAULT_TABLE, DelimiterTable, UnrecognizedCharacterError
from .scoring import (
    COMPLETION_POINTS,
    CORRUPTION_POINTS,
    completion_score,
    corruption_score,
    median_score,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineResult:
    number: int  # 1-based position among the supplied lines
    line: str
    classification: Classification
    completion: Optional[str] = None  # set for incomplete lines only
    score: int = 0                    # corruption points or completion score

    @property
    def status(self) -> str:
        if isinstance(self.classification, Corrupted):
            return "corrupted"
        if isinstance(self.classification, Incomplete):
            return "incomplete"
        return "balanced"


@dataclass(frozen=True)
class SyntaxReport:
    corruption_score: int
    completion_score: Optional[int]  # None when no line was incomplete
    lines: Tuple[LineResult, ...] = ()

    def count(self, status: str) -> int:
        return sum(1 for r in self.lines if r.status == status)

    @property
    def corrupted(self) -> Tuple[LineResult, ...]:
        return tuple(r for r in self.lines if r.status == "corrupted")

    @property
    def incomplete(self) -> Tuple[LineResult, ...]:
        return tuple(r for r in self.lines if r.status == "incomplete")


def read_lines(path: Path) -> List[str]:
    """
    Line supplier: every non-blank line of a UTF-8 text file, stripped.

    Raises FileNotFoundError / OSError if the document cannot be read,
    UnicodeDecodeError if it is not valid UTF-8.
    """
    text = Path(path).read_text(encoding="utf-8")
    lines = [ln.strip() for ln in text.splitlines()]
    return [ln for ln in lines if ln]


def score_lines(
    lines: Iterable[str],
    table: DelimiterTable = DEFAULT_TABLE,
    *,
    corruption_points: Mapping[str, int] = CORRUPTION_POINTS,
    completion_points: Mapping[str, int] = COMPLETION_POINTS,
) -> SyntaxReport:
    """
    Classify and score every line.

    Custom delimiter tables need point tables covering their closers;
    an incomplete line whose closer has no completion points raises
    UnscoredCloserError.
    """
    results: List[LineResult] = []
    offending: List[str] = []
    completions: List[int] = []

    for number, line in enumerate(lines, start=1):
        try:
            state = classify(line, table)
        except UnrecognizedCharacterError as e:
            raise e.with_line_number(number) from None

        if isinstance(state, Corrupted):
            points = corruption_score([state.char], corruption_points)
            offending.append(state.char)
            results.append(LineResult(number, line, state, score=points))
            logger.debug("line %d corrupted at column %d: %s", number, state.position + 1, state.describe())
        elif isinstance(state, Incomplete):
            completion = completion_for(state, table)
            points = completion_score(completion, completion_points)
            completions.append(points)
            results.append(LineResult(number, line, state, completion=completion, score=points))
            logger.debug("line %d incomplete, completed by %s (%d points)", number, completion, points)
        else:
            results.append(LineResult(number, line, state))
            logger.debug("line %d balanced", number)

    total = corruption_score(offending, corruption_points)
    median = median_score(completions) if completions else None
    logger.info(
        "scored %d lines: %d corrupted, %d incomplete, %d balanced",
        len(results), len(offending), len(completions), len(results) - len(offending) - len(completions),
    )
    return SyntaxReport(corruption_score=total, completion_score=median, lines=tuple(results))


def run(path: Path, table: DelimiterTable = DEFAULT_TABLE) -> SyntaxReport:
    """Read every line first, then score; a missing document aborts before scoring."""
    lines = read_lines(path)
    logger.info("read %d lines from %s", len(lines), path)
    return score_lines(lines, table)


__all__ = [
    "LineResult",
    "SyntaxReport",
    "read_lines",
    "run",
    "score_lines",
]
