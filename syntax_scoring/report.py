# File: syntax_scoring/report.py
"""Result sinks: bare numbers, a rich summary table, or JSON."""
from __future__ import annotations

import json
from typing import Any, Dict

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .classifier import Corrupted
from .driver import SyntaxReport

_STATUS_STYLE = {
    "corrupted": "bold red",
    "incomplete": "yellow",
    "balanced": "green",
}


def _fmt_score(value: int | None) -> str:
    return "--" if value is None else str(value)


def render_plain(report: SyntaxReport, console: Console) -> None:
    """Two lines: corruption score, then median completion score."""
    console.print(str(report.corruption_score), markup=False, highlight=False)
    console.print(_fmt_score(report.completion_score), markup=False, highlight=False)


def render_table(report: SyntaxReport, console: Console, *, details: bool = False) -> None:
    if details:
        console.print(_details_table(report))

    summary = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan")
    summary.add_column("Metric", style="white", no_wrap=True)
    summary.add_column("Value", justify="right", no_wrap=True)
    summary.add_row("Lines", str(len(report.lines)))
    summary.add_row("Corrupted", str(report.count("corrupted")))
    summary.add_row("Incomplete", str(report.count("incomplete")))
    summary.add_row("Balanced", str(report.count("balanced")))
    summary.add_row(Text("Corruption score", style="bold"), str(report.corruption_score))
    summary.add_row(Text("Completion score (median)", style="bold"), _fmt_score(report.completion_score))
    console.print(summary)


def _details_table(report: SyntaxReport) -> Table:
    table = Table(box=box.SIMPLE, expand=True, show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", no_wrap=True, min_width=2)
    table.add_column("Line", overflow="fold", min_width=16)
    table.add_column("Status", no_wrap=True)
    table.add_column("Detail", overflow="fold")
    table.add_column("Score", justify="right", no_wrap=True)
    for r in report.lines:
        # Lines are full of '[' so every cell goes through Text to bypass markup.
        if isinstance(r.classification, Corrupted):
            detail = Text(r.classification.describe())
        elif r.completion:
            detail = Text(f"Complete by adding {r.completion}.")
        else:
            detail = Text("")
        table.add_row(
            str(r.number),
            Text(r.line),
            Text(r.status, style=_STATUS_STYLE[r.status]),
            detail,
            str(r.score) if r.status != "balanced" else "",
        )
    return table


def to_dict(report: SyntaxReport, *, details: bool = False) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "corruption_score": report.corruption_score,
        "completion_score": report.completion_score,
        "counts": {
            "lines": len(report.lines),
            "corrupted": report.count("corrupted"),
            "incomplete": report.count("incomplete"),
            "balanced": report.count("balanced"),
        },
    }
    if details:
        rows = []
        for r in report.lines:
            row: Dict[str, Any] = {"number": r.number, "line": r.line, "status": r.status, "score": r.score}
            if isinstance(r.classification, Corrupted):
                row["illegal"] = r.classification.char
                row["column"] = r.classification.position + 1
                row["expected"] = r.classification.expected
            elif r.completion is not None:
                row["completion"] = r.completion
            rows.append(row)
        data["lines"] = rows
    return data


def to_json(report: SyntaxReport, *, details: bool = False) -> str:
    return json.dumps(to_dict(report, details=details), indent=2)
