"""Line splitting and line-number formatting.

Line numbers are zero-based ``int`` indices into a side's source lines and
are shown one-based.
"""

from __future__ import annotations


def split_on_newlines(src: str) -> list[str]:
    """Split on ``\\n``, tolerating ``\\r\\n``.

    A trailing newline yields a final empty entry, so the result always has
    ``src.count("\\n") + 1`` items.
    """
    return [line[:-1] if line.endswith("\r") else line for line in src.split("\n")]


def max_line(src: str) -> int:
    """Return the index of the last line of ``src`` (0 for empty text)."""
    count = src.count("\n")
    if src and not src.endswith("\n"):
        count += 1
    return max(count, 1) - 1


def format_line_num(line_num: int) -> str:
    return f"{line_num + 1} "


def format_line_num_padded(line_num: int, column_width: int) -> str:
    """Right-align the one-based number so the result is ``column_width`` wide."""
    return f"{line_num + 1:>{column_width - 1}} "
