"""Rich table rendering for hunk summaries."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table


def render_rich_table(
    rows: list[dict[str, Any]],
    columns: list[str],
    *,
    title: str | None = None,
) -> None:
    """Render a Rich table to the console."""
    console = Console()
    table = Table(title=title, show_edge=False, pad_edge=False)

    for col in columns:
        justify = "right" if col == "hunk" else "left"
        table.add_column(col.upper(), no_wrap=True, justify=justify)

    for row in rows:
        table.add_row(*["" if row.get(col) is None else str(row[col]) for col in columns])

    console.print(table)
