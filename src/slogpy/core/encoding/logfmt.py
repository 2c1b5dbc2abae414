"""Logfmt encoder for attribute lists.

Values go through their JSON text first, so strings pick up JSON escaping.
The surrounding quotes are then dropped unless the text contains a space.
"""

from collections.abc import Sequence

from slogpy.core.config import FormatterConfig
from slogpy.core.durations import resolve_durations
from slogpy.core.encoding.jsonline import render_value
from slogpy.core.models import Attribute, JsonValue
from slogpy.core.pairs import dedupe, flatten, sort_pairs


def encode_value(value: JsonValue) -> str:
    """Render a logfmt value: bare unless it contains a space."""
    text = render_value(value)
    if " " in text:
        return text
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def encode_logfmt(attrs: Sequence[Attribute], config: FormatterConfig) -> str:
    """Encode attributes to a logfmt line.

    Groups are always flattened to dotted keys; ``config.flat`` is ignored.

    Args:
        attrs: Attributes in insertion order, oldest first.
        config: Formatter settings.

    Returns:
        Space separated ``key=value`` tokens, empty string if none.
    """
    pairs = flatten(resolve_durations(attrs, config.duration_format))
    if config.strict:
        pairs = dedupe(pairs)
    pairs = sort_pairs(pairs, config.sort_order)
    return " ".join(f"{key}={encode_value(value)}" for key, value in pairs)
