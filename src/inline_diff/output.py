"""Output manager: --json/--fields/--jq, TTY-aware tables, status and error lines."""

from __future__ import annotations

import json
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from inline_diff._exit_codes import ERROR
from inline_diff._tty import failure, is_tty, muted


@dataclass
class OutputContext:
    """Decides how command results reach the terminal.

    - TTY: Rich tables
    - Non-TTY: tab-separated values for piping
    - --json: JSON output, optionally filtered to specific fields
    - --jq: JSON piped through a jq expression
    - --quiet: status messages suppressed, errors kept
    """

    json_fields: list[str] | None = None
    jq_expr: str | None = None
    quiet: bool = False
    force_json: bool = False
    _is_tty: bool = field(default_factory=is_tty)

    @property
    def is_json_mode(self) -> bool:
        """Check if JSON output is requested."""
        return self.force_json or self.json_fields is not None or self.jq_expr is not None

    def render_table(self, rows: list[dict[str, Any]], columns: list[str], *, title: str | None = None) -> None:
        """Render rows as a Rich table in a TTY, TSV otherwise."""
        if self.is_json_mode:
            self.render_json(rows)
            return

        if not rows:
            self.status("No hunks.")
            return

        if self._is_tty:
            from inline_diff.formatters.table import render_rich_table

            render_rich_table(rows, columns, title=title)
        else:
            for row in rows:
                sys.stdout.write("\t".join(_format_value(row.get(col, "")) for col in columns) + "\n")

    def render_json(self, data: Any) -> None:
        """Render JSON, always as an array, after --fields and --jq filtering."""
        items = data if isinstance(data, list) else [data]
        if self.json_fields:
            items = [_pick_fields(item, self.json_fields) for item in items]

        json_str = json.dumps(items, indent=2, default=str)
        if self.jq_expr:
            json_str = _apply_jq(json_str, self.jq_expr)

        sys.stdout.write(json_str + "\n")

    def status(self, msg: str) -> None:
        """Print a status message (suppressed in --quiet mode)."""
        if not self.quiet:
            sys.stderr.write(f"{muted(msg)}\n")

    def error(self, msg: str) -> None:
        """Print an error message (always shown)."""
        sys.stderr.write(f"{failure(msg)}\n")


def _pick_fields(item: dict[str, Any], fields: Sequence[str]) -> dict[str, Any]:
    return {f: _deep_get(item, f) for f in fields}


def _deep_get(data: dict[str, Any], key: str) -> Any:
    """Look up a dot-separated key path, None when any step is missing."""
    result: Any = data
    for part in key.split("."):
        if not isinstance(result, dict):
            return None
        result = result.get(part)
    return result


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (list, dict)):
        return json.dumps(value, default=str)
    return str(value)


def _apply_jq(json_str: str, expr: str) -> str:
    """Run ``jq expr`` over the JSON text."""
    try:
        result = subprocess.run(["jq", expr], input=json_str, capture_output=True, text=True, check=True)
    except FileNotFoundError:
        sys.stderr.write("error: `jq` is required for --jq but was not found in PATH\n")
        raise SystemExit(ERROR) from None
    except subprocess.CalledProcessError as e:
        sys.stderr.write(f"error: jq failed: {e.stderr.strip()}\n")
        raise SystemExit(ERROR) from None
    return result.stdout.rstrip()
