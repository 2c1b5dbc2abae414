"""Single-line JSON encoder for attribute lists."""

import json
import math
from collections.abc import Iterable, Mapping, Sequence

from slogpy.core.config import FormatterConfig
from slogpy.core.durations import resolve_durations
from slogpy.core.models import Attribute, JsonValue, format_float
from slogpy.core.pairs import JsonObject, Pair, dedupe, flatten, nest, sort_pairs

# Non-finite floats have no JSON literal and are rendered as strings
NON_FINITE_FLOATS = {"nan": "NaN", "inf": "Infinity", "-inf": "-Infinity"}


def render_float(value: float) -> str:
    """Render a float as JSON: always with a decimal point, never NaN."""
    if not math.isfinite(value):
        return json.dumps(NON_FINITE_FLOATS[repr(value)])
    return format_float(value)


def render_value(value: JsonValue) -> str:
    """Render one value as compact JSON text.

    Mappings and sequences returned by ``AnyAttr`` encoders are walked so
    their floats follow the same rules as top-level ones.
    """
    if isinstance(value, JsonObject):
        return render_object(value.pairs)
    if isinstance(value, float):
        return render_float(value)
    if isinstance(value, Mapping):
        return render_object(
            (key if isinstance(key, str) else json.dumps(key), item)
            for key, item in value.items()
        )
    if isinstance(value, list | tuple):
        return "[" + ",".join(render_value(item) for item in value) + "]"
    return json.dumps(
        value, ensure_ascii=False, separators=(",", ":"), allow_nan=False
    )


def render_object(pairs: Iterable[Pair]) -> str:
    """Render pairs as a JSON object, keeping their order and duplicates."""
    members = ",".join(
        f"{json.dumps(key, ensure_ascii=False)}:{render_value(value)}"
        for key, value in pairs
    )
    return "{" + members + "}"


def encode_json(attrs: Sequence[Attribute], config: FormatterConfig) -> str:
    """Encode attributes to a single-line JSON object.

    Args:
        attrs: Attributes in insertion order, oldest first.
        config: Formatter settings (strict, flat, duration_format,
            sort_order are honoured).

    Returns:
        The JSON text, or an empty string when there is nothing to emit.
    """
    resolved = resolve_durations(attrs, config.duration_format)
    if config.flat:
        pairs = flatten(resolved)
        if config.strict:
            pairs = dedupe(pairs)
    else:
        pairs = nest(resolved, strict=config.strict)
    pairs = sort_pairs(pairs, config.sort_order)

    if not pairs:
        return ""

    return render_object(pairs)
