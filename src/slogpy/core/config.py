"""Formatter configuration.

A `FormatterConfig` is chosen once when a logger is built and read-only
afterwards. The ``with_*`` methods return modified copies, so a single
instance can be shared across threads.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, TypeVar


class TimeFormat(Enum):
    """How the synthetic time attribute is rendered."""

    RFC3339 = "rfc3339"
    UNIX_SECONDS = "unix_seconds"
    UNIX_NANOSECONDS = "unix_nanoseconds"
    OMIT = "omit"


class DurationFormat(Enum):
    """Where the unit of a duration attribute ends up."""

    KEY_WITH_UNITS = "key_with_units"
    VALUE_WITH_UNITS = "value_with_units"
    DIMENSIONLESS = "dimensionless"


@dataclass(frozen=True)
class FormatterConfig:
    """Immutable formatter settings.

    Attributes:
        strict: Collapse duplicate keys, last value wins.
        flat: Render groups as dotted keys instead of nested objects
            (JSON only, logfmt always flattens).
        time_key: Key of the synthetic time attribute.
        msg_key: Key of the synthetic message attribute.
        level_key: Key of the synthetic level attribute.
        time_format: Rendering of the timestamp.
        duration_format: Rendering of duration units.
        sort_order: Keys that sort first, in this order. Empty keeps
            insertion order.
        terminal_max_width: Wrap width of terminal lines.
        terminal_colors: Emit ANSI colors on terminal lines.
    """

    strict: bool = False
    flat: bool = False
    time_key: str = "time"
    msg_key: str = "msg"
    level_key: str = "level"
    time_format: TimeFormat = TimeFormat.RFC3339
    duration_format: DurationFormat = DurationFormat.KEY_WITH_UNITS
    sort_order: tuple[str, ...] = ()
    terminal_max_width: int = 120
    terminal_colors: bool = True

    def with_strict(self, strict: bool) -> "FormatterConfig":
        return replace(self, strict=strict)

    def with_flat(self, flat: bool) -> "FormatterConfig":
        return replace(self, flat=flat)

    def with_time_key(self, key: str) -> "FormatterConfig":
        return replace(self, time_key=key)

    def with_msg_key(self, key: str) -> "FormatterConfig":
        return replace(self, msg_key=key)

    def with_level_key(self, key: str) -> "FormatterConfig":
        return replace(self, level_key=key)

    def with_time_format(self, time_format: TimeFormat) -> "FormatterConfig":
        return replace(self, time_format=time_format)

    def with_duration_format(
        self, duration_format: DurationFormat
    ) -> "FormatterConfig":
        return replace(self, duration_format=duration_format)

    def with_sort_order(self, keys: Iterable[str]) -> "FormatterConfig":
        return replace(self, sort_order=tuple(keys))

    def with_terminal_max_width(self, width: int) -> "FormatterConfig":
        return replace(self, terminal_max_width=width)

    def with_terminal_colors(self, colors: bool) -> "FormatterConfig":
        return replace(self, terminal_colors=colors)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "FormatterConfig":
        """Build a config from an untyped mapping such as parsed settings.

        Enum options accept member names or values in any case
        (``"rfc3339"``, ``"VALUE_WITH_UNITS"``). ``sort_order`` accepts a
        list of keys or a comma separated string.

        Args:
            options: Option names mapped to raw values. Missing options keep
                their defaults.

        Returns:
            A new FormatterConfig.

        Raises:
            ValueError: Unknown option, unknown enum value or non-positive
                terminal width.
            TypeError: Option value of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"unknown formatter option(s): {', '.join(unknown)}")

        config = cls()
        for name, raw in options.items():
            if name in ("strict", "flat", "terminal_colors"):
                config = replace(config, **{name: _parse_bool(name, raw)})
            elif name in ("time_key", "msg_key", "level_key"):
                if not isinstance(raw, str):
                    raise TypeError(f"{name} must be a string")
                config = replace(config, **{name: raw})
            elif name == "time_format":
                config = replace(config, time_format=_parse_enum(TimeFormat, raw))
            elif name == "duration_format":
                config = replace(
                    config, duration_format=_parse_enum(DurationFormat, raw)
                )
            elif name == "sort_order":
                config = replace(config, sort_order=_parse_keys(raw))
            elif name == "terminal_max_width":
                if isinstance(raw, bool) or not isinstance(raw, (int, str)):
                    raise TypeError("terminal_max_width must be an integer")
                width = int(raw)
                if width <= 0:
                    raise ValueError("terminal_max_width must be positive")
                config = replace(config, terminal_max_width=width)
        return config


E = TypeVar("E", bound=Enum)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"{name} must be a boolean, got {raw!r}")
    raise TypeError(f"{name} must be a boolean")


def _parse_enum(enum_cls: type[E], raw: Any) -> E:
    if isinstance(raw, enum_cls):
        return raw
    if not isinstance(raw, str):
        raise TypeError(f"{enum_cls.__name__} option must be a string")
    lowered = raw.strip().lower().replace("-", "_")
    for member in enum_cls:
        if lowered in (member.name.lower(), str(member.value)):
            return member
    choices = ", ".join(str(m.value) for m in enum_cls)
    raise ValueError(f"unknown {enum_cls.__name__} {raw!r} (expected one of {choices})")


def _parse_keys(raw: Any) -> tuple[str, ...]:
    if isinstance(raw, str):
        return tuple(key.strip() for key in raw.split(",") if key.strip())
    if isinstance(raw, Iterable):
        keys = tuple(raw)
        if not all(isinstance(key, str) for key in keys):
            raise TypeError("sort_order must contain only strings")
        return keys
    raise TypeError("sort_order must be a list of keys or a comma separated string")
