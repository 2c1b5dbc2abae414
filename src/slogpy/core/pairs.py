"""Turning attribute trees into ordered (key, value) pairs.

Flattening, strict deduplication and priority sorting all work on plain
lists of pairs so the serializers only have to render them.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from slogpy.core.config import DurationFormat
from slogpy.core.durations import resolve_duration
from slogpy.core.models import (
    AnyAttr,
    Attribute,
    DurationAttr,
    GroupAttr,
    JsonValue,
)

Pair = tuple[str, JsonValue]


@dataclass(frozen=True)
class JsonObject:
    """A nested object whose pairs keep their order, duplicates included."""

    pairs: tuple[Pair, ...]


def join_key(prefix: str | None, key: str) -> str:
    if not prefix:
        return key
    return f"{prefix}.{key}"


def project(attr: Attribute) -> JsonValue:
    """Canonical JSON projection of a leaf attribute.

    Raises:
        Whatever the encoder of an AnyAttr raises.
    """
    if isinstance(attr, AnyAttr):
        return attr.encoder(attr.value)
    if isinstance(attr, DurationAttr):
        return resolve_duration(attr, DurationFormat.KEY_WITH_UNITS).value
    if isinstance(attr, GroupAttr):
        raise TypeError("groups have no leaf projection")
    return attr.value


def _leaf_key(attr: Attribute) -> str:
    # Unresolved durations still need their unit appended to the key
    if isinstance(attr, DurationAttr):
        return resolve_duration(attr, DurationFormat.KEY_WITH_UNITS).key
    return attr.key


def flatten(attrs: Iterable[Attribute], prefix: str | None = None) -> list[Pair]:
    """Flatten groups into dotted keys, depth first and left to right.

    Example:
        ``[GroupAttr("a", (IntAttr("d", 2),)), IntAttr("b", 1)]`` flattens to
        ``[("a.d", 2), ("b", 1)]``.

    Args:
        attrs: Attributes in insertion order.
        prefix: Key prefix of the enclosing group, if any.

    Returns:
        List of (key, value) pairs.
    """
    out: list[Pair] = []
    _flatten_into(out, attrs, prefix)
    return out


def _flatten_into(
    out: list[Pair], attrs: Iterable[Attribute], prefix: str | None
) -> None:
    for attr in attrs:
        if isinstance(attr, GroupAttr):
            _flatten_into(out, attr.children, join_key(prefix, attr.key))
        else:
            out.append((join_key(prefix, _leaf_key(attr)), project(attr)))


def nest(attrs: Iterable[Attribute], strict: bool = False) -> list[Pair]:
    """Build pairs where groups become nested objects.

    Only the outermost level is deduplicated when ``strict`` is set; nested
    objects keep every pair.
    """
    pairs: list[Pair] = []
    for attr in attrs:
        if isinstance(attr, GroupAttr):
            pairs.append((attr.key, JsonObject(tuple(nest(attr.children)))))
        else:
            pairs.append((_leaf_key(attr), project(attr)))
    return dedupe(pairs) if strict else pairs


def dedupe(pairs: Iterable[Pair]) -> list[Pair]:
    """Collapse repeated keys: first position kept, last value wins."""
    merged: dict[str, JsonValue] = {}
    for key, value in pairs:
        merged[key] = value
    return list(merged.items())


def sort_pairs(pairs: Sequence[Pair], priority: Sequence[str]) -> list[Pair]:
    """Order pairs by a key priority list.

    Keys listed in ``priority`` come first, in list order. The rest follow
    in lexical order. An empty priority keeps the input order.
    """
    if not priority:
        return list(pairs)
    rank = {key: index for index, key in enumerate(priority)}

    def sort_key(pair: Pair) -> tuple[int, int, str]:
        key = pair[0]
        if key in rank:
            return (0, rank[key], "")
        return (1, 0, key)

    return sorted(pairs, key=sort_key)
