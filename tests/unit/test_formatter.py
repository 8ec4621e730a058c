"""Tests for row layout, truncation and highlighting."""

import pytest

from ka.core.config import DisplayConfig
from ka.core.formatter import (
    build_rows,
    command_width,
    format_row,
    highlight,
    sanitize,
    truncate,
)
from ka.core.models import ProcessCandidate

START = "\033[1;42;37m"
END = "\033[0m"


@pytest.fixture
def display():
    return DisplayConfig()


class TestSanitize:
    @pytest.mark.parametrize("text", ["a\nb", "a\rb", "\r\n", "plain", "x\n\n\ry"])
    def test_removes_line_breaks(self, text):
        result = sanitize(text)
        assert "\n" not in result
        assert "\r" not in result

    def test_replaces_with_space(self):
        assert sanitize("a\nb\rc") == "a b c"


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("abc", 10) == "abc"

    def test_exact_width_unchanged(self):
        assert truncate("abcde", 5) == "abcde"

    def test_long_text_gets_two_char_marker(self):
        result = truncate("abcdefghij", 6)
        assert result == "abcd.."
        assert len(result) == 6

    def test_counts_characters_not_bytes(self):
        result = truncate("ééééééé", 5)
        assert result == "ééé.."

    @pytest.mark.parametrize("width", [0, 1, 2, 3])
    def test_narrow_width_hard_cuts(self, width):
        result = truncate("abcdefgh", width)
        assert result == "abcdefgh"[:width]
        assert ".." not in result

    @pytest.mark.parametrize("width", [4, 5, 10, 25])
    def test_never_exceeds_width(self, width):
        text = "x" * 40
        result = truncate(text, width)
        assert len(result) == width
        assert result.endswith("..")
        assert not result.endswith("...")


class TestHighlight:
    def test_wraps_each_occurrence(self):
        assert highlight("foo bar foo", "foo", "<", ">") == "<foo> bar <foo>"

    def test_no_occurrence_leaves_text(self):
        assert highlight("nothing here", "zzz", START, END) == "nothing here"

    def test_literal_not_regex(self):
        assert highlight("a.b axb", "a.b", "<", ">") == "<a.b> axb"

    def test_empty_pattern_is_noop(self):
        assert highlight("abc", "", "<", ">") == "abc"


class TestCommandWidth:
    def test_standard_terminal(self, display):
        assert command_width(80, display) == 80 - 8 - 25 - 11

    def test_narrow_terminal_floors_at_ten(self, display):
        assert command_width(40, display) == 10

    def test_tiny_terminal_floors_at_ten(self, display):
        assert command_width(5, display) == 10


class TestFormatRow:
    def test_layout_without_match(self, display):
        candidate = ProcessCandidate(123, "sleep", "sleep 100")

        row = format_row(candidate, "nomatch", 80, display)

        assert row.pid == 123
        assert row.text == f"{'123':<8}  {'sleep':<25}  {'sleep 100':<36}"

    def test_highlights_after_truncation(self, display):
        candidate = ProcessCandidate(7, "worker", "python " + "x" * 50 + " worker")

        row = format_row(candidate, "worker", 40, display)

        name_part = row.text[10:]
        assert name_part.startswith(f"{START}worker{END}")
        # command truncated to 10 before highlighting; the trailing match is gone
        assert row.text.count(START) == 1
        assert row.text.endswith("python x..")

    def test_columns_padded_on_visible_width(self, display):
        plain = format_row(ProcessCandidate(1, "abc", "abc"), "zzz", 80, display)
        marked = format_row(ProcessCandidate(1, "abc", "abc"), "b", 80, display)

        visible = marked.text.replace(START, "").replace(END, "")
        assert visible == plain.text

    def test_newlines_removed(self, display):
        row = format_row(ProcessCandidate(9, "we\nird", "line1\nline2\r"), "zzz", 80, display)
        assert "\n" not in row.text
        assert "\r" not in row.text

    def test_custom_markers(self):
        display = DisplayConfig(highlight_start="[", highlight_end="]", ellipsis="~~")
        row = format_row(ProcessCandidate(1, "nginx", "nginx: worker"), "nginx", 80, display)
        assert "[nginx]" in row.text


def test_build_rows_unique_even_when_names_collide(display):
    candidates = [ProcessCandidate(pid, "python", "python app.py") for pid in (100, 200, 300)]

    rows = build_rows(candidates, "app", 80, display)

    assert [row.pid for row in rows] == [100, 200, 300]
    assert len({row.text for row in rows}) == 3


def test_marker_wider_than_column_hard_cuts():
    result = truncate("abcdefghij", 4, "<cut>")
    assert result == "abcd"
    assert len(result) <= 4
