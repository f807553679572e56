"""Shared command infrastructure."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from inline_diff.errors import InlineDiffError, SourceReadError

if TYPE_CHECKING:
    from inline_diff.output import OutputContext

logger = logging.getLogger(__name__)


@contextmanager
def command_context(operation: str = "") -> Generator[OutputContext, None, None]:
    """Shared context for all commands: error reporting and exit codes.

    Args:
        operation: Human-readable label for error messages (e.g. "rendering diff").
    """
    from inline_diff.main import state

    output = state.output
    try:
        yield output
    except InlineDiffError as e:
        prefix = f"{operation}: " if operation else ""
        output.error(f"error: {prefix}{e}")
        raise typer.Exit(e.exit_code) from None


def read_source(path: Path) -> str:
    """Read a text file, falling back to latin-1 when it is not valid UTF-8."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceReadError(f"cannot read {path}: {e.strerror or e}") from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("%s is not valid UTF-8, decoding as latin-1", path)
        return data.decode("latin-1")
