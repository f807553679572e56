"""Tests for formatters (style, table)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from inline_diff.config import DisplayOptions
from inline_diff.formatters import style, table
from inline_diff.hunks import Side

COLOR = DisplayOptions(use_color=True)
NO_COLOR = DisplayOptions(use_color=False)


class TestApplyColors:
    """Test apply_colors function."""

    def test_one_entry_per_line(self):
        src = "a\nb\nc\n"
        lines = style.apply_colors(src, Side.LEFT, False, "text", "dark", set())
        assert len(lines) == 4
        assert all(line.endswith("\n") for line in lines)

    def test_context_lines_stay_plain_without_highlighting(self):
        lines = style.apply_colors("a\nb\n", Side.LEFT, False, "text", "dark", {1})
        assert lines[0] == "a\n"
        assert "\x1b[" in lines[1]
        assert "b" in lines[1]

    def test_syntax_highlighting_keeps_line_count(self):
        src = "def f(x):\n    return x\n\nprint(f(1))\n"
        lines = style.apply_colors(src, Side.RIGHT, True, "python", "light", {3})
        assert len(lines) == len(src.split("\n"))
        assert all(line.endswith("\n") for line in lines)

    def test_tabs_survive_highlighting(self):
        lines = style.apply_colors("\tx = 1\n", Side.LEFT, True, "python", "dark", set())
        assert "\t" in lines[0]

    def test_crlf_source(self):
        lines = style.apply_colors("a\r\nb\r\n", Side.RIGHT, True, "text", "dark", set())
        assert len(lines) == 3
        assert all("\r" not in line for line in lines)


class TestReplaceTabs:
    """Test replace_tabs function."""

    def test_replaces_each_tab(self):
        assert style.replace_tabs("\ta\tb", 2) == "  a  b"

    def test_zero_width(self):
        assert style.replace_tabs("\ta", 0) == "a"


class TestLineNumberColor:
    """Test apply_line_number_color function."""

    def test_no_color_passthrough(self):
        assert style.apply_line_number_color("12 ", True, Side.LEFT, NO_COLOR) == "12 "

    def test_novel_and_context_differ(self):
        novel = style.apply_line_number_color("12 ", True, Side.LEFT, COLOR)
        context = style.apply_line_number_color("12 ", False, Side.LEFT, COLOR)
        assert novel != context
        assert "12 " in novel
        assert "12 " in context

    def test_sides_differ_when_novel(self):
        left = style.apply_line_number_color("1 ", True, Side.LEFT, COLOR)
        right = style.apply_line_number_color("1 ", True, Side.RIGHT, COLOR)
        assert left != right


class TestHeader:
    """Test header function."""

    def test_single_hunk_has_no_divider(self):
        assert style.header("a.py", None, 1, 1, "python", NO_COLOR) == "a.py --- python"

    def test_hunk_counter(self):
        assert style.header("a.py", None, 2, 3, "python", NO_COLOR) == "a.py --- 2/3 --- python"

    def test_plain_format_name(self):
        assert style.header("notes", None, 1, 1, style.PLAIN_FORMAT, NO_COLOR) == "notes --- Text"

    def test_extra_info_on_second_line(self):
        result = style.header("b.py", "Renamed from a.py to b.py", 1, 1, "python", NO_COLOR)
        assert result == "b.py --- python\nRenamed from a.py to b.py"

    def test_colored_path(self):
        result = style.header("a.py", None, 1, 1, "python", COLOR)
        assert result.startswith("\x1b[")
        assert result.endswith(" --- python")


class TestGuessFileFormat:
    """Test guess_file_format function."""

    def test_python(self):
        assert style.guess_file_format("x.py", "print(1)\n") == "python"

    def test_unknown_falls_back_to_text(self):
        with patch("inline_diff.formatters.style.Syntax.guess_lexer", return_value="default"):
            assert style.guess_file_format("x.unknown", "") == style.PLAIN_FORMAT


class TestRenderRichTable:
    """Test render_rich_table function."""

    def test_render_rich_table_basic(self):
        rows = [
            {"hunk": 1, "lhs": "1-3", "rhs": "2-4"},
            {"hunk": 2, "lhs": "", "rhs": "9"},
        ]
        with patch("inline_diff.formatters.table.Console") as mock_console_class:
            mock_console = MagicMock()
            mock_console_class.return_value = mock_console

            table.render_rich_table(rows, ["hunk", "lhs", "rhs"])

            mock_console.print.assert_called_once()
            call_args = mock_console.print.call_args[0]
            assert call_args[0].__class__.__name__ == "Table"
            assert call_args[0].row_count == 2

    def test_render_rich_table_with_title(self):
        with patch("inline_diff.formatters.table.Console") as mock_console_class:
            mock_console = MagicMock()
            mock_console_class.return_value = mock_console

            table.render_rich_table([{"hunk": 1}], ["hunk"], title="b.txt")

            assert mock_console.print.call_args[0][0].title == "b.txt"

    def test_render_rich_table_missing_columns(self):
        with patch("inline_diff.formatters.table.Console") as mock_console_class:
            mock_console = MagicMock()
            mock_console_class.return_value = mock_console

            table.render_rich_table([{"hunk": 1}], ["hunk", "lhs"])

            mock_console.print.assert_called_once()
