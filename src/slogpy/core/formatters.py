"""Formatters turning a log call into a line of text.

Loggers hold their attributes newest first. Every formatter reverses them
back to insertion order, prepends the synthetic time, level and message
attributes, drops empty-key attributes and hands the result to an encoder.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

from slogpy.core.config import FormatterConfig, TimeFormat
from slogpy.core.encoding.jsonline import encode_json
from slogpy.core.encoding.logfmt import encode_logfmt
from slogpy.core.encoding.terminal import render_terminal, terminal_config, wrap
from slogpy.core.models import Attribute, Level, StringAttr

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _as_utc(timestamp: datetime) -> datetime:
    # Naive timestamps are taken to be UTC already
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(UTC)


def unix_parts(timestamp: datetime) -> tuple[int, int]:
    """Split a timestamp into whole unix seconds and remaining nanoseconds."""
    delta = _as_utc(timestamp) - EPOCH
    return delta.days * 86_400 + delta.seconds, delta.microseconds * 1_000


def format_timestamp(timestamp: datetime, time_format: TimeFormat) -> str:
    """Render a timestamp as text.

    Returns:
        RFC 3339 in UTC with millisecond precision, unix seconds, unix
        nanoseconds (seconds followed by a 9-digit remainder) or an empty
        string for OMIT.
    """
    if time_format is TimeFormat.OMIT:
        return ""
    if time_format is TimeFormat.RFC3339:
        return (
            _as_utc(timestamp)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )
    seconds, nanos = unix_parts(timestamp)
    if time_format is TimeFormat.UNIX_SECONDS:
        return str(seconds)
    return f"{seconds}{nanos:09d}"


def time_attr(timestamp: datetime, config: FormatterConfig) -> StringAttr:
    """Synthetic time attribute. OMIT yields the empty-key sentinel."""
    if config.time_format is TimeFormat.OMIT:
        return StringAttr("", "")
    return StringAttr(config.time_key, format_timestamp(timestamp, config.time_format))


def drop_empty_keys(attrs: Iterable[Attribute]) -> list[Attribute]:
    return [attr for attr in attrs if attr.key]


def insertion_order(attrs: Sequence[Attribute]) -> list[Attribute]:
    """Reverse a newest-first attribute list."""
    return list(reversed(attrs))


def inject_metadata(
    timestamp: datetime,
    level: Level,
    message: str,
    attrs: Iterable[Attribute],
    config: FormatterConfig,
) -> list[Attribute]:
    """Prepend time, level and message attributes, then drop empty keys.

    Args:
        timestamp: Time of the log call.
        level: Severity, rendered by name.
        message: Log message.
        attrs: Attributes in insertion order.
        config: Supplies key names and the time format.

    Returns:
        Attributes ready for encoding.
    """
    return drop_empty_keys(
        [
            time_attr(timestamp, config),
            StringAttr(config.level_key, level.name),
            StringAttr(config.msg_key, message),
            *attrs,
        ]
    )


class AttributeFormatter(ABC):
    """Base class for formatters.

    Subclasses implement ``_encode``, which receives attributes in insertion
    order with metadata already injected.
    """

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self._config = config or FormatterConfig()

    @property
    def config(self) -> FormatterConfig:
        return self._config

    def format(
        self,
        timestamp: datetime,
        level: Level,
        message: str,
        attrs: Sequence[Attribute],
    ) -> str:
        """Format a log call. ``attrs`` are newest first."""
        injected = inject_metadata(
            timestamp, level, message, insertion_order(attrs), self._config
        )
        return self._encode(injected)

    def format_attrs(self, attrs: Sequence[Attribute]) -> str:
        """Format attributes alone, without time, level or message.

        Returns:
            The line, or an empty string when there is nothing to emit.
        """
        return self._encode(drop_empty_keys(insertion_order(attrs)))

    @abstractmethod
    def _encode(self, attrs: Sequence[Attribute]) -> str:
        """Encode attributes in insertion order with metadata injected."""


class JsonFormatter(AttributeFormatter):
    """Formats log calls as single-line JSON objects.

    Example:
        ```python
        formatter = JsonFormatter(FormatterConfig().with_strict(True))
        line = formatter.format(datetime.now(UTC), Level.INFO, "started", attrs)
        ```
    """

    def _encode(self, attrs: Sequence[Attribute]) -> str:
        return encode_json(attrs, self._config)


class LogfmtFormatter(AttributeFormatter):
    """Formats log calls as logfmt lines."""

    def _encode(self, attrs: Sequence[Attribute]) -> str:
        return encode_logfmt(attrs, self._config)


class TerminalFormatter(AttributeFormatter):
    """Formats log calls for people reading a terminal.

    The timestamp is not shown. Level and message lead the line and the
    attributes follow as logfmt.
    """

    def format(
        self,
        timestamp: datetime,
        level: Level,
        message: str,
        attrs: Sequence[Attribute],
    ) -> str:
        return render_terminal(
            level, message, drop_empty_keys(insertion_order(attrs)), self._config
        )

    def _encode(self, attrs: Sequence[Attribute]) -> str:
        line = encode_logfmt(attrs, terminal_config(self._config))
        return wrap(line, self._config.terminal_max_width)
