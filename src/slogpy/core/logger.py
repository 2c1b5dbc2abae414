"""Logger handle.

A Logger carries attributes, a level threshold, a formatter and a sink.
Attributes are stored newest first so adding one is a single prepend;
formatters reverse them back into insertion order.
"""

from dataclasses import dataclass, replace
from datetime import UTC, datetime

from slogpy.core.models import Attribute, GroupAttr, Level
from slogpy.core.ports import FormatterPort, SinkPort


@dataclass(frozen=True)
class Logger:
    """Immutable logger handle.

    Every ``with_*`` method returns a new Logger, so handles can be shared
    and specialised freely.

    Example:
        ```python
        from slogpy import ConsoleSink, Logger, LogfmtFormatter, StringAttr

        log = Logger(LogfmtFormatter(), ConsoleSink())
        log.with_attrs(StringAttr("service", "api")).info("started")
        ```

    Attributes:
        formatter: Turns a call into a line.
        sink: Receives the line.
        level: Most verbose level emitted. ALL emits everything.
        attrs: Accumulated attributes, newest first.
    """

    formatter: FormatterPort
    sink: SinkPort
    level: Level = Level.INFO
    attrs: tuple[Attribute, ...] = ()

    def with_attrs(self, *attrs: Attribute) -> "Logger":
        """Add attributes. The last argument becomes the newest."""
        return replace(self, attrs=(*reversed(attrs), *self.attrs))

    def with_group(self, key: str, *attrs: Attribute) -> "Logger":
        """Add a group of attributes under ``key``."""
        return self.with_attrs(GroupAttr(key, attrs))

    def with_level(self, level: Level) -> "Logger":
        return replace(self, level=level)

    def enabled(self, level: Level) -> bool:
        """Return True if a record at ``level`` passes the threshold."""
        return self.level is Level.ALL or level <= self.level

    def log(
        self,
        level: Level,
        message: str,
        *attrs: Attribute,
        timestamp: datetime | None = None,
    ) -> str:
        """Format a record and write it to the sink.

        Args:
            level: Severity of the record.
            message: Log message.
            *attrs: Call-site attributes, newer than the handle's.
            timestamp: Time of the record (default: now, UTC).

        Returns:
            The line written, or an empty string when filtered out.
        """
        if not self.enabled(level):
            return ""
        line = self.formatter.format(
            timestamp or datetime.now(UTC),
            level,
            message,
            (*reversed(attrs), *self.attrs),
        )
        if line:
            self.sink.write(line, level)
        return line

    def error(self, message: str, *attrs: Attribute) -> str:
        return self.log(Level.ERROR, message, *attrs)

    def warn(self, message: str, *attrs: Attribute) -> str:
        return self.log(Level.WARN, message, *attrs)

    def info(self, message: str, *attrs: Attribute) -> str:
        return self.log(Level.INFO, message, *attrs)

    def debug(self, message: str, *attrs: Attribute) -> str:
        return self.log(Level.DEBUG, message, *attrs)
