"""Diff commands: the inline view and a per-hunk summary."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

from inline_diff._exit_codes import CHANGES_FOUND
from inline_diff.commands import command_context, read_source
from inline_diff.config import resolve_options
from inline_diff.formatters.inline import HunkLayout, hunk_layouts, print_inline
from inline_diff.formatters.style import guess_file_format
from inline_diff.hunks import Side, compute_diff
from inline_diff.lines import max_line


def _interval_dict(layout: HunkLayout, side: Side) -> dict[str, int] | None:
    interval = layout.interval(side)
    if interval is None:
        return None
    return {"first": interval[0] + 1, "last": interval[1] + 1}


def _interval_label(layout: HunkLayout, side: Side) -> str:
    interval = layout.interval(side)
    if interval is None:
        return ""
    first, last = interval
    return f"{first + 1}" if first == last else f"{first + 1}-{last + 1}"


def layout_to_dict(hunk_num: int, layout: HunkLayout) -> dict[str, Any]:
    """JSON shape of one hunk, with one-based line numbers."""
    return {
        "hunk": hunk_num,
        "lhs": _interval_dict(layout, Side.LEFT),
        "rhs": _interval_dict(layout, Side.RIGHT),
        "lines": {
            side.value: [{"line": n + 1, "novel": novel} for n, novel in layout.classify(side)]
            for side in (Side.LEFT, Side.RIGHT)
        },
    }


def _rename_info(left: Path, right: Path) -> str | None:
    if left.name == right.name:
        return None
    return f"Renamed from {left} to {right}"


def show(
    left: Path = typer.Argument(help="Old version of the file."),
    right: Path = typer.Argument(help="New version of the file."),
    context: int | None = typer.Option(None, "--context", "-C", help="Context lines around each hunk."),
    tab_width: int | None = typer.Option(None, "--tab-width", help="Spaces per tab."),
    color: str | None = typer.Option(None, "--color", help="auto, always or never."),
    syntax_highlight: str | None = typer.Option(None, "--syntax-highlight", help="on or off."),
    background: str | None = typer.Option(None, "--background", help="dark or light."),
    display_path: str | None = typer.Option(None, "--display-path", help="Path shown in hunk headers."),
    exit_code: bool = typer.Option(False, "--exit-code", help="Exit with 1 when changes are found."),
) -> None:
    """Show the changes between two files as an inline diff."""
    with command_context("rendering diff") as output:
        options = resolve_options(
            context=context,
            tab_width=tab_width,
            color=color,
            syntax_highlight=syntax_highlight,
            background=background,
        )
        lhs_src = read_source(left)
        rhs_src = read_source(right)
        result = compute_diff(lhs_src, rhs_src, options.num_context_lines)

        if output.is_json_mode:
            layouts = hunk_layouts(
                result.hunks, result.matched, max_line(lhs_src), max_line(rhs_src), options.num_context_lines
            )
            output.render_json([layout_to_dict(i, layout) for i, layout in enumerate(layouts, start=1)])
        elif not result.has_changes:
            output.status("No changes.")
        else:
            print_inline(
                lhs_src,
                rhs_src,
                options,
                result.hunks,
                result.matched,
                display_path or str(right),
                _rename_info(left, right),
                guess_file_format(str(right), rhs_src),
            )

    if exit_code and result.has_changes:
        raise typer.Exit(CHANGES_FOUND)


def hunks(
    left: Path = typer.Argument(help="Old version of the file."),
    right: Path = typer.Argument(help="New version of the file."),
    context: int | None = typer.Option(None, "--context", "-C", help="Context lines around each hunk."),
) -> None:
    """List hunks with the line ranges the inline view would print."""
    with command_context("listing hunks") as output:
        options = resolve_options(context=context)
        lhs_src = read_source(left)
        rhs_src = read_source(right)
        result = compute_diff(lhs_src, rhs_src, options.num_context_lines)
        layouts = hunk_layouts(
            result.hunks, result.matched, max_line(lhs_src), max_line(rhs_src), options.num_context_lines
        )
        rows = [
            {
                "hunk": i,
                "lhs": _interval_label(layout, Side.LEFT),
                "rhs": _interval_label(layout, Side.RIGHT),
                "novel_lhs": len(layout.lhs_novel),
                "novel_rhs": len(layout.rhs_novel),
            }
            for i, layout in enumerate(layouts, start=1)
        ]
        output.render_table(rows, columns=["hunk", "lhs", "rhs", "novel_lhs", "novel_rhs"], title=str(right))
