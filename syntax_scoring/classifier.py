# File: syntax_scoring/classifier.py
"""
Stack-based delimiter matcher.

classify() scans a line once and reports one of three outcomes:
  Corrupted  - first closer that does not match the innermost open delimiter
  Incomplete - no mismatch, but delimiters are still open at end of line
  Balanced   - every delimiter opened was closed
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .delimiters import DEFAULT_TABLE, DelimiterTable, UnrecognizedCharacterError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Corrupted:
    char: str
    position: int                   # 0-based column of the offending closer
    expected: Optional[str] = None  # closer that would have been legal; None if nothing was open

    def describe(self) -> str:
        if self.expected is None:
            return f"Nothing open, but found {self.char} instead."
        return f"Expected {self.expected}, but found {self.char} instead."


@dataclass(frozen=True)
class Incomplete:
    open_stack: Tuple[str, ...]  # bottom (outermost) to top (innermost)


@dataclass(frozen=True)
class Balanced:
    pass


Classification = Union[Corrupted, Incomplete, Balanced]


def classify(line: str, table: DelimiterTable = DEFAULT_TABLE) -> Classification:
    stack: List[str] = []
    for pos, ch in enumerate(line):
        if table.is_opener(ch):
            stack.append(ch)
        elif table.is_closer(ch):
            # First mismatch ends the scan; later characters are never examined.
            if not stack or stack[-1] != table.opening_for(ch):
                expected = table.closing_for(stack[-1]) if stack else None
                return Corrupted(ch, pos, expected)
            stack.pop()
        else:
            raise UnrecognizedCharacterError(ch, pos)
    if stack:
        return Incomplete(tuple(stack))
    return Balanced()


def is_corrupted(line: str, table: DelimiterTable = DEFAULT_TABLE) -> bool:
    return isinstance(classify(line, table), Corrupted)
