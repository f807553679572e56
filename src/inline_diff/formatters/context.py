"""Context windows around a hunk.

A window walks away from the hunk on one side, one line at a time, pairing
each visited line with its matched line on the other side (if any).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from inline_diff.hunks import LinePair

# (lhs limit, rhs limit); None means unbounded on that side
Limits = tuple[int | None, int | None]

NO_LIMITS: Limits = (None, None)


def opposite_positions(matched: Iterable[tuple[int, int]]) -> dict[int, int]:
    """Map the first line of each matched pair to the second."""
    return {line: opposite for line, opposite in matched}


def _before_with_opposites(
    before_line: int,
    opposites: dict[int, int],
    num_context_lines: int,
    floor: int | None,
    opposite_floor: int | None,
) -> list[tuple[int, int | None]]:
    lines: list[tuple[int, int | None]] = []
    current = before_line
    for _ in range(num_context_lines):
        if current == 0:
            break
        current -= 1
        opposite = opposites.get(current)
        if floor is not None and current <= floor:
            break
        if opposite is not None and opposite_floor is not None and opposite <= opposite_floor:
            break
        lines.append((current, opposite))
    lines.reverse()
    return lines


def _after_with_opposites(
    after_line: int,
    opposites: dict[int, int],
    num_context_lines: int,
    max_line: int,
    ceiling: int | None,
    opposite_ceiling: int | None,
) -> list[tuple[int, int | None]]:
    lines: list[tuple[int, int | None]] = []
    current = after_line
    for _ in range(num_context_lines):
        if current >= max_line:
            break
        current += 1
        opposite = opposites.get(current)
        if ceiling is not None and current >= ceiling:
            break
        if opposite is not None and opposite_ceiling is not None and opposite >= opposite_ceiling:
            break
        lines.append((current, opposite))
    return lines


def calculate_before_context(
    lines: Sequence[LinePair],
    opposite_to_lhs: dict[int, int],
    opposite_to_rhs: dict[int, int],
    num_context_lines: int,
    floor: Limits = NO_LIMITS,
) -> list[LinePair]:
    """Context pairs immediately before ``lines``.

    Lines at or below ``floor`` (per side) belong to the previous hunk's
    output and stop the walk.
    """
    if not lines:
        return []
    first = lines[0]
    lhs_floor, rhs_floor = floor
    if first.lhs is not None:
        return [
            LinePair(lhs, rhs)
            for lhs, rhs in _before_with_opposites(first.lhs, opposite_to_lhs, num_context_lines, lhs_floor, rhs_floor)
        ]
    elif first.rhs is not None:
        return [
            LinePair(lhs, rhs)
            for rhs, lhs in _before_with_opposites(first.rhs, opposite_to_rhs, num_context_lines, rhs_floor, lhs_floor)
        ]
    return []


def calculate_after_context(
    lines: Sequence[LinePair],
    opposite_to_lhs: dict[int, int],
    opposite_to_rhs: dict[int, int],
    max_lhs_line: int,
    max_rhs_line: int,
    num_context_lines: int,
    ceiling: Limits = NO_LIMITS,
) -> list[LinePair]:
    """Context pairs immediately after ``lines``.

    Lines at or above ``ceiling`` (per side) belong to the next hunk and stop
    the walk.
    """
    if not lines:
        return []
    last = lines[-1]
    lhs_ceiling, rhs_ceiling = ceiling
    if last.lhs is not None:
        return [
            LinePair(lhs, rhs)
            for lhs, rhs in _after_with_opposites(
                last.lhs, opposite_to_lhs, num_context_lines, max_lhs_line, lhs_ceiling, rhs_ceiling
            )
        ]
    elif last.rhs is not None:
        return [
            LinePair(lhs, rhs)
            for rhs, lhs in _after_with_opposites(
                last.rhs, opposite_to_rhs, num_context_lines, max_rhs_line, rhs_ceiling, lhs_ceiling
            )
        ]
    return []
