"""Display option resolution: flags -> env -> config file -> defaults."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from inline_diff._tty import should_use_color
from inline_diff.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / "inline-diff"
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_CONTEXT_LINES = 3
DEFAULT_TAB_WIDTH = 8
COLOR_CHOICES = ("auto", "always", "never")
HIGHLIGHT_CHOICES = ("on", "off")
BACKGROUND_CHOICES = ("dark", "light")


@dataclass(frozen=True)
class DisplayOptions:
    """Resolved rendering options."""

    num_context_lines: int = DEFAULT_CONTEXT_LINES
    tab_width: int = DEFAULT_TAB_WIDTH
    use_color: bool = False
    syntax_highlight: bool = True
    background: str = "dark"


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML config file, return empty dict if missing."""
    if not path.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib  # type: ignore[no-redef]
        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception:
        logger.warning("Failed to parse config file: %s", path)
        return {}


def _resolve(flag_value: Any, env_var: str, toml_value: Any, default: str) -> str:
    """Resolve a config value using the precedence chain."""
    if flag_value is not None:
        return str(flag_value)
    env = os.getenv(env_var)
    if env:
        return env
    if toml_value is not None:
        return str(toml_value)
    return default


def _parse_count(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"invalid {name} `{raw}`, expected a non-negative integer") from None
    if value < 0:
        raise ConfigError(f"invalid {name} `{raw}`, expected a non-negative integer")
    return value


def _parse_choice(name: str, raw: str, choices: tuple[str, ...]) -> str:
    value = raw.lower()
    if value not in choices:
        raise ConfigError(f"invalid {name} `{raw}`, expected one of: {', '.join(choices)}")
    return value


def resolve_options(
    *,
    context: int | None = None,
    tab_width: int | None = None,
    color: str | None = None,
    syntax_highlight: str | None = None,
    background: str | None = None,
    config_file: Path | None = None,
) -> DisplayOptions:
    """Resolve display options from all sources.

    Resolution order: flags -> env vars -> config file -> defaults. Values
    from every source are validated the same way, so a bad env var fails
    just like a bad flag.
    """
    toml_data = _load_toml(config_file or CONFIG_FILE)
    section = toml_data.get("display", {})

    num_context_lines = _parse_count(
        "context",
        _resolve(context, "INLINE_DIFF_CONTEXT", section.get("context"), str(DEFAULT_CONTEXT_LINES)),
    )
    resolved_tab_width = _parse_count(
        "tab width",
        _resolve(tab_width, "INLINE_DIFF_TAB_WIDTH", section.get("tab_width"), str(DEFAULT_TAB_WIDTH)),
    )
    color_mode = _parse_choice(
        "color",
        _resolve(color, "INLINE_DIFF_COLOR", section.get("color"), "auto"),
        COLOR_CHOICES,
    )
    highlight = _parse_choice(
        "syntax highlight",
        _resolve(syntax_highlight, "INLINE_DIFF_SYNTAX_HIGHLIGHT", section.get("syntax_highlight"), "on"),
        HIGHLIGHT_CHOICES,
    )
    resolved_background = _parse_choice(
        "background",
        _resolve(background, "INLINE_DIFF_BACKGROUND", section.get("background"), "dark"),
        BACKGROUND_CHOICES,
    )

    if color_mode == "auto":
        use_color = should_use_color()
    else:
        use_color = color_mode == "always"

    options = DisplayOptions(
        num_context_lines=num_context_lines,
        tab_width=resolved_tab_width,
        use_color=use_color,
        syntax_highlight=highlight == "on",
        background=resolved_background,
    )
    logger.debug("Resolved display options: %s", options)
    return options
