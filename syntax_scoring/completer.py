# File: syntax_scoring/completer.py
"""Synthesizes the closing sequence that repairs an incomplete line."""
from __future__ import annotations

from typing import Union

from .classifier import Balanced, Corrupted, Incomplete, classify
from .delimiters import DEFAULT_TABLE, CorruptedLineError, DelimiterTable


def completion_for(state: Union[Incomplete, Balanced], table: DelimiterTable = DEFAULT_TABLE) -> str:
    """
    Closers for every still-open delimiter, innermost first.

    The open-stack is read top to bottom; reading it the other way would close
    an outer chunk while an inner one is still open. A Balanced line needs
    nothing and yields "".
    """
    if isinstance(state, Balanced):
        return ""
    return "".join(table.closing_for(opener) for opener in reversed(state.open_stack))


def complete_line(line: str, table: DelimiterTable = DEFAULT_TABLE) -> str:
    state = classify(line, table)
    if isinstance(state, Corrupted):
        raise CorruptedLineError(
            f"Cannot complete a corrupted line: {state.describe()} (column {state.position + 1})"
        )
    return completion_for(state, table)


def repair(line: str, table: DelimiterTable = DEFAULT_TABLE) -> str:
    """Return the line with its completion appended."""
    return line + complete_line(line, table)
