"""Core domain models for structured log attributes."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum
from typing import Any

NANOS_PER_SECOND = 1_000_000_000

# Anything json.dumps can render
JsonValue = Any


def format_float(value: float) -> str:
    """Render a finite float so that it always carries a decimal point.

    ``repr`` already does for the positional range; exponent forms such as
    ``1e+20`` become ``1.0e+20``.
    """
    text = repr(value)
    mantissa, sep, exponent = text.partition("e")
    if sep and "." not in mantissa:
        return f"{mantissa}.0e{exponent}"
    return text


class Level(IntEnum):
    """Log severity, ordered ALL < ERROR < WARN < INFO < DEBUG."""

    ALL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4


@dataclass(frozen=True)
class StringAttr:
    """A text attribute. The value is raw, not yet quoted."""

    key: str
    value: str


@dataclass(frozen=True)
class IntAttr:
    """An integer attribute."""

    key: str
    value: int


@dataclass(frozen=True)
class FloatAttr:
    """A floating point attribute."""

    key: str
    value: float


@dataclass(frozen=True)
class BoolAttr:
    """A boolean attribute."""

    key: str
    value: bool


@dataclass(frozen=True)
class DurationAttr:
    """A duration attribute stored as an exact (seconds, nanoseconds) pair.

    The pair is normalised so that ``0 <= nanoseconds < 1_000_000_000``;
    negative durations carry their sign in ``seconds``.

    Attributes:
        key: Attribute key. A unit suffix (``_s``, ``_ms``, ``_us``...) pins
            the unit used when rendering.
        seconds: Whole seconds.
        nanoseconds: Remaining nanoseconds.
    """

    key: str
    seconds: int = 0
    nanoseconds: int = 0

    def __post_init__(self) -> None:
        extra, nanos = divmod(self.nanoseconds, NANOS_PER_SECOND)
        object.__setattr__(self, "seconds", self.seconds + extra)
        object.__setattr__(self, "nanoseconds", nanos)

    @classmethod
    def of(
        cls,
        key: str,
        *,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> "DurationAttr":
        """Build a duration from integer components.

        Example:
            ```python
            DurationAttr.of("elapsed", milliseconds=3200)
            ```
        """
        total = (
            nanoseconds
            + microseconds * 1_000
            + milliseconds * 1_000_000
            + seconds * NANOS_PER_SECOND
        )
        return cls(key, 0, total)

    @classmethod
    def from_timedelta(cls, key: str, delta: timedelta) -> "DurationAttr":
        """Build a duration from a timedelta without going through floats."""
        return cls.of(
            key,
            seconds=delta.days * 86_400 + delta.seconds,
            microseconds=delta.microseconds,
        )

    @property
    def total_nanoseconds(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanoseconds


@dataclass(frozen=True)
class GroupAttr:
    """A named group of attributes, nested to any depth."""

    key: str
    children: tuple["Attribute", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class AnyAttr:
    """An opaque value rendered through a caller-supplied JSON encoder.

    The encoder maps ``value`` to something ``json.dumps`` accepts. Errors
    raised by the encoder propagate to whoever formats the attribute.
    """

    key: str
    value: object
    encoder: Callable[[object], JsonValue] = field(compare=False)


Attribute = (
    StringAttr | IntAttr | FloatAttr | BoolAttr | DurationAttr | GroupAttr | AnyAttr
)

ATTRIBUTE_TYPES = (
    StringAttr,
    IntAttr,
    FloatAttr,
    BoolAttr,
    DurationAttr,
    GroupAttr,
    AnyAttr,
)
