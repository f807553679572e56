"""Line pairs, hunks and the line-level matcher that produces them."""

from __future__ import annotations

import difflib
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from inline_diff.lines import split_on_newlines

logger = logging.getLogger(__name__)


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class LinePair:
    """A left line and/or a right line occupying the same place in the view.

    Both present: the matcher considers them the same logical line.
    Only ``lhs``: a deletion. Only ``rhs``: an insertion.
    """

    lhs: int | None = None
    rhs: int | None = None

    def __post_init__(self) -> None:
        if self.lhs is None and self.rhs is None:
            raise ValueError("LinePair needs at least one line number")

    @property
    def is_common(self) -> bool:
        return self.lhs is not None and self.rhs is not None


Hunk = tuple[LinePair, ...]


@dataclass(frozen=True)
class DiffResult:
    """Hunks of novel lines plus the unchanged (lhs, rhs) line matches."""

    hunks: list[Hunk] = field(default_factory=list)
    matched: list[tuple[int, int]] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.hunks)


def _source_lines(src: str) -> list[str]:
    """Real lines of ``src``; the empty piece after a final newline is dropped."""
    if not src:
        return []
    lines = split_on_newlines(src)
    if src.endswith("\n"):
        lines.pop()
    return lines


def _change_pairs(tag: str, i1: int, i2: int, j1: int, j2: int) -> Iterator[LinePair]:
    """Pairs for one non-equal opcode.

    Replaced lines are paired positionally; whatever is left over on either
    side becomes a one-sided pair.
    """
    common = min(i2 - i1, j2 - j1) if tag == "replace" else 0
    for offset in range(common):
        yield LinePair(i1 + offset, j1 + offset)
    for lhs in range(i1 + common, i2):
        yield LinePair(lhs, None)
    for rhs in range(j1 + common, j2):
        yield LinePair(None, rhs)


def compute_diff(lhs_src: str, rhs_src: str, num_context_lines: int = 3) -> DiffResult:
    """Match the lines of two texts and group the changes into hunks.

    Change blocks separated by at most ``2 * num_context_lines`` unchanged
    lines belong to the same hunk, so their context windows cannot overlap.
    """
    matcher = difflib.SequenceMatcher(None, _source_lines(lhs_src), _source_lines(rhs_src), autojunk=False)

    hunks: list[Hunk] = []
    matched: list[tuple[int, int]] = []
    current: list[LinePair] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            matched.extend(zip(range(i1, i2), range(j1, j2)))
            if current and i2 - i1 > 2 * num_context_lines:
                hunks.append(tuple(current))
                current = []
            continue
        current.extend(_change_pairs(tag, i1, i2, j1, j2))
    if current:
        hunks.append(tuple(current))

    logger.debug("Matched %d lines, %d hunks", len(matched), len(hunks))
    return DiffResult(hunks=hunks, matched=matched)
