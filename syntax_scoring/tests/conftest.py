"""Pytest configuration for syntax_scoring tests."""
import sys
from pathlib import Path

import pytest

# Add the repository root to sys.path so tests can import the package uninstalled
repo_root = Path(__file__).resolve().parents[2]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


EXAMPLE_LINES = [
    "[({(<(())[]>[[{[]{<()<>>",
    "[(()[<>])]({[<{<<[]>>(",
    "{([(<{}[<>[]}>{[]{[(<()>",
    "(((({<>}<{<{<>}{[]{[]{}",
    "[[<[([]))<([[{}[[()]]]",
    "[{[{({}]{}}([{[{{{}}([]",
    "{<[[]]>}<{[{[{[]{()[[[]",
    "[<(<(<(<{}))><([]([]()",
    "<{([([[(<>()){}]>(<<{{",
    "<{([{{}}[<[[[<>{}]]]>[]]",
]


@pytest.fixture
def example_lines():
    """The ten lines of the canonical navigation subsystem example."""
    return list(EXAMPLE_LINES)


@pytest.fixture
def example_file(tmp_path: Path) -> Path:
    p = tmp_path / "navigation.txt"
    p.write_text("\n".join(EXAMPLE_LINES) + "\n", encoding="utf-8")
    return p
