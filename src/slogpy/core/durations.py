"""Duration unit resolution.

A duration attribute is rendered as a float in one of three units. The unit
comes from the key suffix when there is one (``elapsed_ms``), otherwise it
is picked from the magnitude and appended to the key.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from slogpy.core.config import DurationFormat
from slogpy.core.models import (
    Attribute,
    DurationAttr,
    FloatAttr,
    GroupAttr,
    StringAttr,
    format_float,
)


@dataclass(frozen=True)
class TimeUnit:
    """A rendering unit for durations."""

    abbreviation: str
    nanoseconds: int
    suffixes: tuple[str, ...]


SECONDS = TimeUnit("s", 1_000_000_000, ("_s", "_sec"))
MILLISECONDS = TimeUnit("ms", 1_000_000, ("_ms", "_msec"))
MICROSECONDS = TimeUnit("µs", 1_000, ("_us", "_usec", "_µs", "_µsec"))

UNITS = (SECONDS, MILLISECONDS, MICROSECONDS)


def match_unit(key: str) -> tuple[TimeUnit, str] | None:
    """Find the unit named by the key suffix.

    Returns:
        The unit and the matched suffix as written in the key, or None.
    """
    lowered = key.lower()
    for unit in UNITS:
        for suffix in unit.suffixes:
            if lowered.endswith(suffix):
                return unit, key[len(key) - len(suffix) :]
    return None


def auto_unit(duration: DurationAttr) -> TimeUnit:
    """Unit picked from magnitude: under 1ms is µs, under 1s is ms.

    The sign is ignored, so -5ms resolves to milliseconds like 5ms.
    """
    magnitude = abs(duration.total_nanoseconds)
    if magnitude < MILLISECONDS.nanoseconds:
        return MICROSECONDS
    if magnitude < SECONDS.nanoseconds:
        return MILLISECONDS
    return SECONDS


def _suffixed(key: str, duration: DurationAttr) -> tuple[str, TimeUnit, str]:
    """Return the unit-suffixed key, its unit and the suffix as written."""
    matched = match_unit(key)
    if matched is not None:
        unit, suffix = matched
        return key, unit, suffix
    unit = auto_unit(duration)
    suffix = unit.suffixes[0]
    return key + suffix, unit, suffix


def resolve(key: str, duration: DurationAttr) -> tuple[str, float]:
    """Resolve a duration to a unit-suffixed key and a value in that unit.

    Args:
        key: The attribute key.
        duration: The duration to convert.

    Returns:
        Tuple of (key, value). The key is unchanged when it already names a
        unit, otherwise it gains ``_s``, ``_ms`` or ``_us``.
    """
    key, unit, _ = _suffixed(key, duration)
    return key, duration.total_nanoseconds / unit.nanoseconds


def resolve_duration(
    duration: DurationAttr, duration_format: DurationFormat
) -> FloatAttr | StringAttr:
    """Replace a duration attribute with its rendered form.

    KEY_WITH_UNITS keeps the unit in the key, VALUE_WITH_UNITS moves it to
    the value (``"2.0ms"``) and DIMENSIONLESS drops it. A key made of the
    suffix alone (``"_ms"``) keeps it, since stripping would leave no key.
    """
    key, unit, suffix = _suffixed(duration.key, duration)
    value = duration.total_nanoseconds / unit.nanoseconds
    if duration_format is DurationFormat.KEY_WITH_UNITS:
        return FloatAttr(key, value)

    bare_key = key[: len(key) - len(suffix)] or key
    if duration_format is DurationFormat.VALUE_WITH_UNITS:
        return StringAttr(bare_key, f"{format_float(value)}{unit.abbreviation}")
    return FloatAttr(bare_key, value)


def resolve_durations(
    attrs: Iterable[Attribute], duration_format: DurationFormat
) -> Sequence[Attribute]:
    """Resolve every duration in the list, descending into groups."""
    resolved: list[Attribute] = []
    for attr in attrs:
        if isinstance(attr, DurationAttr):
            resolved.append(resolve_duration(attr, duration_format))
        elif isinstance(attr, GroupAttr):
            resolved.append(
                GroupAttr(attr.key, resolve_durations(attr.children, duration_format))
            )
        else:
            resolved.append(attr)
    return resolved
