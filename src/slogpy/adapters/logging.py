"""Python logging handler adapter for slogpy.

This adapter bridges Python's standard library logging module to a slogpy
formatter and sink, so existing ``logging`` calls produce JSON, logfmt or
terminal lines.
"""

import logging
import traceback
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta

from slogpy.core.models import (
    ATTRIBUTE_TYPES,
    Attribute,
    BoolAttr,
    DurationAttr,
    FloatAttr,
    GroupAttr,
    IntAttr,
    Level,
    StringAttr,
)
from slogpy.core.ports import FormatterPort, SinkPort

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno"]


def level_from_levelno(levelno: int) -> Level:
    """Map a stdlib level number onto a slogpy Level."""
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARN
    if levelno >= logging.INFO:
        return Level.INFO
    return Level.DEBUG


def to_attribute(key: str, value: object) -> Attribute | None:
    """Convert a plain Python value into an attribute.

    Supports str, int, float, bool, timedelta, mappings (as groups) and
    ready-made attributes. Anything else yields None.
    """
    if isinstance(value, ATTRIBUTE_TYPES):
        return value
    if isinstance(value, bool):
        return BoolAttr(key, value)
    if isinstance(value, int):
        return IntAttr(key, value)
    if isinstance(value, float):
        return FloatAttr(key, value)
    if isinstance(value, str):
        return StringAttr(key, value)
    if isinstance(value, timedelta):
        return DurationAttr.from_timedelta(key, value)
    if isinstance(value, Mapping):
        children = [
            attr
            for child_key, child in value.items()
            if (attr := to_attribute(str(child_key), child)) is not None
        ]
        return GroupAttr(key, tuple(children))
    return None


class SlogHandler(logging.Handler):
    """Logging handler that formats records with slogpy and writes them to a sink.

    Example:
        ```python
        from slogpy import ConsoleSink, LogfmtFormatter, SlogHandler

        handler = SlogHandler(LogfmtFormatter(), ConsoleSink())
        logging.getLogger().addHandler(handler)
        logging.getLogger(__name__).info("ready", extra={"port": 8080})
        ```
    """

    def __init__(
        self,
        formatter: FormatterPort,
        sink: SinkPort,
        include_attrs: list[str] | None = None,
    ) -> None:
        """Initialize the handler with a formatter and a sink.

        Args:
            formatter: Formatter implementing FormatterPort.
            sink: Sink implementing SinkPort.
            include_attrs: List of LogRecord attributes to include. Defaults to
                ["module", "funcName", "lineno"].
        """
        super().__init__()
        self._line_formatter = formatter
        self._sink = sink
        self._include_attrs = (
            _DEFAULT_INCLUDE_ATTRS if include_attrs is None else include_attrs
        )

    def record_attributes(self, record: logging.LogRecord) -> list[Attribute]:
        """Build attributes for a record, oldest first.

        Args:
            record: The log record.

        Returns:
            Attributes from the configured record fields, extras and
            exception info, in that order.
        """
        # Map of attribute names to their values from LogRecord
        attr_mapping: dict[str, str | int] = {
            "module": record.module,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }

        attributes: list[Attribute] = []
        for key in self._include_attrs:
            if key in attr_mapping:
                attr = to_attribute(key, attr_mapping[key])
                if attr is not None:
                    attributes.append(attr)

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and not key.startswith("_"):
                attr = to_attribute(key, value)
                if attr is not None:
                    attributes.append(attr)

        # Extract exception info if present
        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                attributes.append(StringAttr("exc_type", exc_type.__name__))
            if exc_value is not None:
                attributes.append(StringAttr("exc_message", str(exc_value)))
            if exc_tb is not None:
                attributes.append(
                    StringAttr(
                        "exc_traceback",
                        "".join(
                            traceback.format_exception(exc_type, exc_value, exc_tb)
                        ),
                    )
                )
        return attributes

    def emit(self, record: logging.LogRecord) -> None:
        """Format a log record and write it to the sink.

        Args:
            record: The log record to emit.
        """
        level = level_from_levelno(record.levelno)
        line = self._line_formatter.format(
            datetime.fromtimestamp(record.created, UTC),
            level,
            record.getMessage(),
            tuple(reversed(self.record_attributes(record))),
        )
        self._sink.write(line, level)
