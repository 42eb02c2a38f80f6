import pytest

from syntax_scoring.classifier import Balanced, Corrupted, Incomplete, classify, is_corrupted
from syntax_scoring.delimiters import UnrecognizedCharacterError


@pytest.mark.parametrize("line", [
    "",
    "()",
    "[]",
    "([])",
    "{()()()}",
    "<([{}])>",
    "[<>({}){}[([])<>]]",
    "(((((((((())))))))))",
])
def test_balanced_lines(line):
    assert classify(line) == Balanced()
    assert not is_corrupted(line)


def test_mismatch_reports_offending_closer():
    assert classify("(]") == Corrupted("]", 1, ")")


def test_stray_closer_with_nothing_open():
    result = classify(")")
    assert result == Corrupted(")", 0, None)
    assert result.describe() == "Nothing open, but found ) instead."


def test_only_first_mismatch_is_reported():
    result = classify("(]>")
    assert isinstance(result, Corrupted)
    assert result.char == "]" and result.position == 1


def test_scan_stops_at_corruption_before_later_characters():
    # 'x' would be rejected, but the scan never gets that far
    assert classify("(]x") == Corrupted("]", 1, ")")


def test_canonical_corrupted_line_details():
    result = classify("{([(<{}[<>[]}>{[]{[(<()>")
    assert result == Corrupted("}", 12, "]")
    assert result.describe() == "Expected ], but found } instead."


def test_canonical_corrupted_characters(example_lines):
    found = [r.char for r in map(classify, example_lines) if isinstance(r, Corrupted)]
    assert found == ["}", ")", "]", ")", ">"]


def test_incomplete_keeps_open_stack_bottom_to_top():
    assert classify("[({") == Incomplete(("[", "(", "{"))
    assert classify("[()<") == Incomplete(("[", "<"))


def test_unrecognized_character_fails_fast():
    with pytest.raises(UnrecognizedCharacterError) as exc:
        classify("<x>")
    assert exc.value.char == "x"
    assert exc.value.position == 1
    assert exc.value.line_number is None
