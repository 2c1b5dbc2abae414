"""Human readable terminal lines.

Layout: ``LEVEL  message  key=value ...``. Attributes are rendered as logfmt
with strict deduplication and units attached to duration values.
"""

from collections.abc import Sequence
from dataclasses import replace

import regex

from slogpy.core.config import DurationFormat, FormatterConfig
from slogpy.core.encoding.logfmt import encode_logfmt
from slogpy.core.models import Attribute, Level

RESET = "\x1b[0m"
BOLD = "\x1b[1m"

LEVEL_COLORS = {
    Level.ERROR: "\x1b[31m",
    Level.WARN: "\x1b[33m",
    Level.DEBUG: "\x1b[38;5;205m",
}

LEVEL_WIDTH = 5
SEPARATOR = "  "
CONTINUATION_MARKER = "↳ "

# One SGR escape sequence or one extended grapheme cluster
_TOKEN = regex.compile(r"\x1b\[[0-9;]*m|\X")


def terminal_config(config: FormatterConfig) -> FormatterConfig:
    return replace(
        config, strict=True, duration_format=DurationFormat.VALUE_WITH_UNITS
    )


def format_level(level: Level, colors: bool) -> str:
    padding = " " * max(LEVEL_WIDTH - len(level.name), 0)
    color = LEVEL_COLORS.get(level)
    if colors and color:
        return f"{color}{level.name}{RESET}{padding}"
    return level.name + padding


def wrap(line: str, width: int) -> str:
    """Hard-wrap a line every ``width`` grapheme clusters.

    Escape sequences are carried along with the text but do not count
    towards the width. Continuation lines start with CONTINUATION_MARKER.
    """
    tokens = _TOKEN.findall(line)
    visible = sum(1 for token in tokens if not token.startswith("\x1b"))
    if width <= 0 or visible <= width:
        return line

    chunks: list[str] = []
    current: list[str] = []
    count = 0
    for token in tokens:
        if token.startswith("\x1b"):
            current.append(token)
            continue
        if count == width:
            chunks.append("".join(current))
            current, count = [], 0
        current.append(token)
        count += 1
    chunks.append("".join(current))

    return ("\n" + CONTINUATION_MARKER).join(chunks)


def render_terminal(
    level: Level,
    message: str,
    attrs: Sequence[Attribute],
    config: FormatterConfig,
) -> str:
    """Compose a terminal line.

    Args:
        level: Severity, colored when ``config.terminal_colors`` is set.
        message: Log message, bold when colors are on.
        attrs: Attributes in insertion order, oldest first.
        config: Formatter settings. ``strict`` and ``duration_format`` are
            overridden.

    Returns:
        The line, wrapped to ``config.terminal_max_width``.
    """
    fields = encode_logfmt(attrs, terminal_config(config))
    if config.terminal_colors:
        message = f"{BOLD}{message}{RESET}"

    line = format_level(level, config.terminal_colors) + SEPARATOR + message
    if fields:
        line += SEPARATOR + fields
    return wrap(line, config.terminal_max_width)
