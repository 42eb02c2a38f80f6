# File: syntax_scoring/delimiters.py
"""Delimiter pair table and the error types shared across syntax_scoring."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

STANDARD_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("(", ")"),
    ("[", "]"),
    ("{", "}"),
    ("<", ">"),
)


class SyntaxScoringError(Exception):
    """Base class for everything this package raises on purpose."""


class UnrecognizedCharacterError(SyntaxScoringError, ValueError):
    """A line contained a character outside the delimiter alphabet."""

    def __init__(self, char: str, position: int, line_number: Optional[int] = None):
        self.char = char
        self.position = position
        self.line_number = line_number
        where = f"column {position + 1}"
        if line_number is not None:
            where = f"line {line_number}, {where}"
        super().__init__(f"Unrecognized character {char!r} at {where}")

    def with_line_number(self, line_number: int) -> "UnrecognizedCharacterError":
        return UnrecognizedCharacterError(self.char, self.position, line_number)


class CorruptedLineError(SyntaxScoringError, ValueError):
    """Raised when a completion is requested for a corrupted line."""


class MedianUndefinedError(SyntaxScoringError, ValueError):
    """Raised when a median is requested over an empty or even-sized score list."""


class UnscoredCloserError(SyntaxScoringError, KeyError):
    """A completion contained a closer with no entry in the completion point table."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(char)

    def __str__(self) -> str:
        return f"No completion points defined for closer {self.char!r}"


@dataclass(frozen=True)
class DelimiterTable:
    """
    Immutable bijection between opening and closing delimiters.

    Two lookups are derived once at construction:
      - closer_to_opener: validates a close against the top of the open-stack
      - opener_to_closer: synthesizes a completion from the open-stack
    """
    pairs: Tuple[Tuple[str, str], ...]
    opener_to_closer: Mapping[str, str] = field(init=False, repr=False, compare=False)
    closer_to_opener: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        pairs = tuple((o, c) for o, c in self.pairs)
        if not pairs:
            raise ValueError("Delimiter table needs at least one pair")
        seen: set[str] = set()
        for opener, closer in pairs:
            for sym in (opener, closer):
                if len(sym) != 1:
                    raise ValueError(f"Delimiters must be single characters, got {sym!r}")
                if sym in seen:
                    raise ValueError(f"Delimiter {sym!r} appears more than once")
                seen.add(sym)
        object.__setattr__(self, "pairs", pairs)
        object.__setattr__(self, "opener_to_closer", MappingProxyType(dict(pairs)))
        object.__setattr__(self, "closer_to_opener", MappingProxyType({c: o for o, c in pairs}))

    @property
    def openers(self) -> frozenset[str]:
        return frozenset(self.opener_to_closer)

    @property
    def closers(self) -> frozenset[str]:
        return frozenset(self.closer_to_opener)

    def is_opener(self, ch: str) -> bool:
        return ch in self.opener_to_closer

    def is_closer(self, ch: str) -> bool:
        return ch in self.closer_to_opener

    def closing_for(self, opener: str) -> str:
        return self.opener_to_closer[opener]

    def opening_for(self, closer: str) -> str:
        return self.closer_to_opener[closer]


DEFAULT_TABLE = DelimiterTable(STANDARD_PAIRS)
