"""Exception hierarchy shared by the library and the CLI."""

from __future__ import annotations

from inline_diff._exit_codes import ERROR


class InlineDiffError(Exception):
    """Base class for failures surfaced to the caller of a render pass."""

    def __init__(self, message: str, exit_code: int = ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ConfigError(InlineDiffError):
    """Raised when a display option has an invalid value."""


class SourceReadError(InlineDiffError):
    """Raised when an input file cannot be read."""


class MalformedIntervalError(InlineDiffError):
    """Raised when a hunk resolves to a display interval with first > last."""
