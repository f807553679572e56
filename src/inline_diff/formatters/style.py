"""ANSI styling for source lines, line numbers and hunk headers (via Rich)."""

from __future__ import annotations

from collections.abc import Collection

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style
from rich.syntax import Syntax
from rich.text import Text

from inline_diff.config import DisplayOptions
from inline_diff.hunks import Side
from inline_diff.lines import split_on_newlines

PLAIN_FORMAT = "text"

THEMES = {
    "dark": "monokai",
    "light": "default",
}

NOVEL_COLORS = {
    ("dark", Side.LEFT): "bright_red",
    ("dark", Side.RIGHT): "bright_green",
    ("light", Side.LEFT): "red",
    ("light", Side.RIGHT): "green",
}

HEADER_COLORS = {
    "dark": "bright_yellow",
    "light": "yellow",
}

COLOR_SYSTEM = ColorSystem.EIGHT_BIT


def guess_file_format(path: str, code: str) -> str:
    """Guess a Pygments lexer name for ``path``, ``"text"`` when unknown."""
    lexer = Syntax.guess_lexer(path, code)
    return PLAIN_FORMAT if lexer == "default" else lexer


def format_name(file_format: str) -> str:
    return "Text" if file_format == PLAIN_FORMAT else file_format


def novel_style(side: Side, background: str) -> Style:
    return Style(color=NOVEL_COLORS[(background, side)])


def _to_ansi(text: Text, console: Console) -> str:
    # Text.render neither wraps nor expands tabs; replace_tabs runs afterwards.
    return "".join(
        segment.style.render(segment.text, color_system=COLOR_SYSTEM) if segment.style else segment.text
        for segment in text.render(console)
    )


def apply_colors(
    src: str,
    side: Side,
    syntax_highlight: bool,
    file_format: str,
    background: str,
    novel_lines: Collection[int],
) -> list[str]:
    """Pre-render every line of ``src`` with ANSI styling.

    Returns one entry per line of ``split_on_newlines(src)``, each ending in
    a newline. Novel lines are drawn in the side's color; other lines keep
    their syntax highlighting when it is enabled.
    """
    lines = split_on_newlines(src)
    if syntax_highlight:
        normalized = "\n".join(lines)
        # tab_size=0 keeps tabs out of the lexer so replace_tabs applies the configured width.
        syntax = Syntax(
            normalized, file_format, theme=THEMES[background], background_color="default", tab_size=0
        )
        texts = syntax.highlight(normalized).split("\n", allow_blank=True)[: len(lines)]
    else:
        texts = []
    texts.extend(Text(line) for line in lines[len(texts) :])

    console = Console(color_system="256", force_terminal=True)
    style = novel_style(side, background)
    rendered = []
    for line_num, text in enumerate(texts):
        if line_num in novel_lines:
            text.stylize(style)
        rendered.append(_to_ansi(text, console) + "\n")
    return rendered


def replace_tabs(line: str, tab_width: int) -> str:
    return line.replace("\t", " " * tab_width)


def apply_line_number_color(text: str, is_novel: bool, side: Side, options: DisplayOptions) -> str:
    """Style a padded line number: side color and bold for novel lines, dim for context."""
    if not options.use_color:
        return text
    if is_novel:
        style = novel_style(side, options.background) + Style(bold=True)
    else:
        style = Style(dim=True)
    return style.render(text, color_system=COLOR_SYSTEM)


def header(
    display_path: str,
    extra_info: str | None,
    hunk_num: int,
    hunk_total: int,
    file_format: str,
    options: DisplayOptions,
) -> str:
    """Build the header line printed above each hunk (one-based ``hunk_num``)."""
    divider = "" if hunk_total == 1 else f"{hunk_num}/{hunk_total} --- "
    path = display_path
    if options.use_color:
        path = Style(color=HEADER_COLORS[options.background], bold=True).render(path, color_system=COLOR_SYSTEM)
    line = f"{path} --- {divider}{format_name(file_format)}"
    if extra_info:
        line = f"{line}\n{extra_info}"
    return line
