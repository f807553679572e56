"""TTY detection and color selection."""

from __future__ import annotations

import os
import sys


def is_tty() -> bool:
    """Check if stdout is connected to a terminal."""
    if os.getenv("INLINE_DIFF_FORCE_TTY") == "1":
        return True
    return sys.stdout.isatty()


def should_use_color() -> bool:
    """Determine if color output should be used."""
    if os.getenv("NO_COLOR"):
        return False
    if os.getenv("CLICOLOR") == "0":
        return False
    if os.getenv("CLICOLOR_FORCE"):
        return True
    return is_tty()


def _colorize(text: str, code: str) -> str:
    if not should_use_color():
        return text
    return f"\033[{code}m{text}\033[0m"


def failure(msg: str) -> str:
    """Red X for failure."""
    symbol = "✗" if is_tty() else "x"
    return _colorize(f"{symbol} {msg}", "0;31")


def muted(msg: str) -> str:
    """Gray dash for muted status lines."""
    return _colorize(f"- {msg}", "0;37")
