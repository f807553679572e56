"""Tests for line splitting and line-number formatting."""

from __future__ import annotations

import pytest

from inline_diff.lines import format_line_num, format_line_num_padded, max_line, split_on_newlines


class TestSplitOnNewlines:
    """Test split_on_newlines function."""

    def test_trailing_newline_gives_empty_last_line(self):
        assert split_on_newlines("a\nb\n") == ["a", "b", ""]

    def test_no_trailing_newline(self):
        assert split_on_newlines("a\nb") == ["a", "b"]

    def test_crlf(self):
        assert split_on_newlines("a\r\nb\r\n") == ["a", "b", ""]

    def test_empty(self):
        assert split_on_newlines("") == [""]


class TestMaxLine:
    """Test max_line function."""

    @pytest.mark.parametrize(
        ("src", "expected"),
        [
            ("", 0),
            ("a", 0),
            ("a\n", 0),
            ("a\nb", 1),
            ("a\nb\n", 1),
            ("a\n\n", 1),
        ],
    )
    def test_max_line(self, src, expected):
        assert max_line(src) == expected


class TestFormatLineNum:
    """Test line-number formatting."""

    def test_one_based_with_trailing_space(self):
        assert format_line_num(0) == "1 "
        assert format_line_num(99) == "100 "

    def test_padded_right_aligns(self):
        assert format_line_num_padded(4, 4) == "  5 "

    def test_padded_at_exact_width(self):
        assert format_line_num_padded(9, len(format_line_num(9))) == "10 "
