"""Inline, or "unified", diff display.

Each hunk is printed as two stacked blocks: every left line in the hunk's
left interval, then every right line in its right interval. Context lines
common to both sides are printed once, in the left block when they precede
the hunk and in the right block when they follow it.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from inline_diff.config import DisplayOptions
from inline_diff.errors import MalformedIntervalError
from inline_diff.formatters import style
from inline_diff.formatters.context import (
    NO_LIMITS,
    Limits,
    calculate_after_context,
    calculate_before_context,
    opposite_positions,
)
from inline_diff.hunks import Hunk, LinePair, Side
from inline_diff.lines import format_line_num, format_line_num_padded, max_line, split_on_newlines

logger = logging.getLogger(__name__)

Interval = tuple[int, int]


def to_lhs(pairs: Iterable[LinePair]) -> list[int]:
    return [pair.lhs for pair in pairs if pair.lhs is not None]


def to_rhs(pairs: Iterable[LinePair]) -> list[int]:
    return [pair.rhs for pair in pairs if pair.rhs is not None]


def first_last(values: Iterable[int]) -> Interval | None:
    """Reduce a sequence to its first and last element, or None if empty."""
    first = last = None
    for value in values:
        if first is None:
            first = value
        last = value
    if first is None or last is None:
        return None
    if first > last:
        raise MalformedIntervalError(f"display interval runs backwards: {first + 1} > {last + 1}")
    return first, last


def _split_common_prefix(pairs: Sequence[LinePair]) -> tuple[Sequence[LinePair], Sequence[LinePair]]:
    common_len = 0
    for pair in pairs:
        if not pair.is_common:
            break
        common_len += 1
    return pairs[:common_len], pairs[common_len:]


def _split_common_suffix(pairs: Sequence[LinePair]) -> tuple[Sequence[LinePair], Sequence[LinePair]]:
    common_len = 0
    for pair in reversed(pairs):
        if not pair.is_common:
            break
        common_len += 1
    split = len(pairs) - common_len
    return pairs[:split], pairs[split:]


def first_rhs_line(before_lines: Sequence[LinePair], hunk_lines: Sequence[LinePair]) -> int | None:
    """Where the right block starts, given the before-context window.

    Common pairs leading the window are shown in the left block only. If
    anything follows them, the right block starts at the first such pair.
    Otherwise it starts just after the last common line, if that still lies
    before the hunk's first right line.
    """
    common_lines, uncommon_lines = _split_common_prefix(before_lines)
    if uncommon_lines:
        return uncommon_lines[0].rhs
    if common_lines:
        last_common = common_lines[-1].rhs
        hunk_rhs = to_rhs(hunk_lines)
        if last_common is not None and hunk_rhs and last_common + 1 <= hunk_rhs[0]:
            return last_common + 1
    return None


def last_lhs_line(after_lines: Sequence[LinePair], hunk_lines: Sequence[LinePair]) -> int | None:
    """Where the left block ends, given the after-context window.

    Mirror image of :func:`first_rhs_line`: trailing common pairs are shown
    in the right block only.
    """
    uncommon_lines, common_lines = _split_common_suffix(after_lines)
    if uncommon_lines:
        return uncommon_lines[-1].lhs
    if common_lines:
        first_common = common_lines[0].lhs
        hunk_lhs = to_lhs(hunk_lines)
        if first_common is not None and hunk_lhs and hunk_lhs[-1] <= first_common - 1:
            return first_common - 1
    return None


@dataclass(frozen=True)
class HunkLayout:
    """Printable intervals and novel lines of one hunk."""

    lhs_interval: Interval | None
    rhs_interval: Interval | None
    lhs_novel: tuple[int, ...]
    rhs_novel: tuple[int, ...]
    column_width: int

    def interval(self, side: Side) -> Interval | None:
        return self.lhs_interval if side is Side.LEFT else self.rhs_interval

    def classify(self, side: Side) -> Iterator[tuple[int, bool]]:
        """Yield ``(line_num, is_novel)`` for every line of the side's interval."""
        interval = self.interval(side)
        if interval is None:
            return
        novel = self.lhs_novel if side is Side.LEFT else self.rhs_novel
        cursor = 0
        first, last = interval
        for line_num in range(first, last + 1):
            is_novel = cursor < len(novel) and novel[cursor] == line_num
            if is_novel:
                cursor += 1
            yield line_num, is_novel


def layout_hunk(
    hunk_lines: Sequence[LinePair],
    before_lines: Sequence[LinePair],
    after_lines: Sequence[LinePair],
) -> HunkLayout:
    """Resolve boundaries and assemble both sides' display intervals."""
    last_lhs = last_lhs_line(after_lines, hunk_lines)
    first_rhs = first_rhs_line(before_lines, hunk_lines)
    if last_lhs is None and after_lines:
        logger.debug("No left boundary from %d after-context lines", len(after_lines))
    if first_rhs is None and before_lines:
        logger.debug("No right boundary from %d before-context lines", len(before_lines))

    lhs_novel = to_lhs(hunk_lines)
    rhs_novel = to_rhs(hunk_lines)
    lhs_interval = first_last(
        [*to_lhs(before_lines), *lhs_novel, *([] if last_lhs is None else [last_lhs])]
    )
    rhs_interval = first_last(
        [*([] if first_rhs is None else [first_rhs]), *rhs_novel, *to_rhs(after_lines)]
    )

    # Same column width on both sides keeps the blocks aligned.
    max_shown = max((interval[1] for interval in (lhs_interval, rhs_interval) if interval), default=0)
    return HunkLayout(
        lhs_interval=lhs_interval,
        rhs_interval=rhs_interval,
        lhs_novel=tuple(lhs_novel),
        rhs_novel=tuple(rhs_novel),
        column_width=len(format_line_num(max_shown)),
    )


def _next_hunk_start(hunk_lines: Sequence[LinePair] | None) -> Limits:
    if not hunk_lines:
        return NO_LIMITS
    lhs = to_lhs(hunk_lines)
    rhs = to_rhs(hunk_lines)
    return (lhs[0] if lhs else None, rhs[0] if rhs else None)


def hunk_layouts(
    hunks: Sequence[Hunk],
    matched: Iterable[tuple[int, int]],
    max_lhs_line: int,
    max_rhs_line: int,
    num_context_lines: int,
) -> Iterator[HunkLayout]:
    """Lay out each hunk in order.

    Context windows stop at the neighbouring hunks: after-context before the
    next hunk's first line, before-context past the last line the previous
    hunk printed on either side.
    """
    matched = list(matched)
    opposite_to_lhs = opposite_positions(matched)
    opposite_to_rhs = opposite_positions((rhs, lhs) for lhs, rhs in matched)

    floor: Limits = NO_LIMITS
    for index, hunk_lines in enumerate(hunks):
        next_hunk = hunks[index + 1] if index + 1 < len(hunks) else None
        before_lines = calculate_before_context(
            hunk_lines, opposite_to_lhs, opposite_to_rhs, num_context_lines, floor=floor
        )
        after_lines = calculate_after_context(
            [*before_lines, *hunk_lines],
            opposite_to_lhs,
            opposite_to_rhs,
            max_lhs_line,
            max_rhs_line,
            num_context_lines,
            ceiling=_next_hunk_start(next_hunk),
        )
        layout = layout_hunk(hunk_lines, before_lines, after_lines)
        floor = (
            layout.lhs_interval[1] if layout.lhs_interval else floor[0],
            layout.rhs_interval[1] if layout.rhs_interval else floor[1],
        )
        yield layout


def _prepare_lines(
    src: str,
    side: Side,
    options: DisplayOptions,
    file_format: str,
    novel_lines: set[int],
) -> list[str]:
    if options.use_color:
        lines = style.apply_colors(
            src, side, options.syntax_highlight, file_format, options.background, novel_lines
        )
    else:
        lines = [f"{line}\n" for line in split_on_newlines(src)]
    return [style.replace_tabs(line, options.tab_width) for line in lines]


def render_inline(
    lhs_src: str,
    rhs_src: str,
    options: DisplayOptions,
    hunks: Sequence[Hunk],
    matched: Iterable[tuple[int, int]],
    display_path: str,
    extra_info: str | None = None,
    file_format: str = style.PLAIN_FORMAT,
) -> Iterator[str]:
    """Yield the inline view of ``hunks`` chunk by chunk.

    Source lines keep their own newline; each hunk ends with a blank line.
    A line table lookup out of range means the hunks do not belong to these
    sources and raises ``IndexError``.
    """
    lhs_lines = _prepare_lines(
        lhs_src, Side.LEFT, options, file_format, {p.lhs for h in hunks for p in h if p.lhs is not None}
    )
    rhs_lines = _prepare_lines(
        rhs_src, Side.RIGHT, options, file_format, {p.rhs for h in hunks for p in h if p.rhs is not None}
    )

    layouts = hunk_layouts(hunks, matched, max_line(lhs_src), max_line(rhs_src), options.num_context_lines)
    for hunk_num, layout in enumerate(layouts, start=1):
        yield style.header(display_path, extra_info, hunk_num, len(hunks), file_format, options) + "\n"

        for line_num, is_novel in layout.classify(Side.LEFT):
            number = format_line_num_padded(line_num, layout.column_width)
            number = style.apply_line_number_color(number, is_novel, Side.LEFT, options)
            yield f"{number}   {lhs_lines[line_num]}"

        for line_num, is_novel in layout.classify(Side.RIGHT):
            number = format_line_num_padded(line_num, layout.column_width)
            number = style.apply_line_number_color(number, is_novel, Side.RIGHT, options)
            yield f"   {number}{rhs_lines[line_num]}"

        yield "\n"


def print_inline(
    lhs_src: str,
    rhs_src: str,
    options: DisplayOptions,
    hunks: Sequence[Hunk],
    matched: Iterable[tuple[int, int]],
    display_path: str,
    extra_info: str | None = None,
    file_format: str = style.PLAIN_FORMAT,
    *,
    stream: TextIO | None = None,
) -> None:
    """Write :func:`render_inline` output to ``stream`` (stdout by default).

    Chunks are written as they are produced, so output already written is
    kept if a later hunk fails.
    """
    out = stream or sys.stdout
    for chunk in render_inline(lhs_src, rhs_src, options, hunks, matched, display_path, extra_info, file_format):
        out.write(chunk)
