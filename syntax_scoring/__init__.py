# File: syntax_scoring/__init__.py
"""syntax_scoring package: bracket-line corruption checks, autocompletion and their scores."""

__version__ = "0.1.0"

from .classifier import Balanced, Classification, Corrupted, Incomplete, classify, is_corrupted
from .completer import complete_line, completion_for, repair
from .delimiters import (
    DEFAULT_TABLE,
    CorruptedLineError,
    DelimiterTable,
    MedianUndefinedError,
    SyntaxScoringError,
    UnrecognizedCharacterError,
    UnscoredCloserError,
)
from .driver import LineResult, SyntaxReport, read_lines, run, score_lines
from .scoring import completion_score, corruption_score, median_score

__all__ = [
    "Balanced",
    "Classification",
    "Corrupted",
    "Incomplete",
    "classify",
    "is_corrupted",
    "complete_line",
    "completion_for",
    "repair",
    "DEFAULT_TABLE",
    "DelimiterTable",
    "SyntaxScoringError",
    "UnrecognizedCharacterError",
    "CorruptedLineError",
    "MedianUndefinedError",
    "UnscoredCloserError",
    "LineResult",
    "SyntaxReport",
    "read_lines",
    "run",
    "score_lines",
    "corruption_score",
    "completion_score",
    "median_score",
]
