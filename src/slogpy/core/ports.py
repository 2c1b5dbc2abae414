"""Port interfaces between loggers, formatters and sinks.

Loggers depend only on these protocols. Formatters live in
slogpy.core.formatters, sinks in slogpy.adapters.sinks.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol, runtime_checkable

from slogpy.core.models import Attribute, Level


@runtime_checkable
class FormatterPort(Protocol):
    """Port for turning a log call into a line of text.

    Implementations: JsonFormatter, LogfmtFormatter, TerminalFormatter.
    Formatters are pure and safe to share between threads.
    """

    def format(
        self,
        timestamp: datetime,
        level: Level,
        message: str,
        attrs: Sequence[Attribute],
    ) -> str:
        """Format a log call.

        Args:
            timestamp: Time of the call.
            level: Severity.
            message: Log message.
            attrs: Attributes, newest first.

        Returns:
            The formatted line.
        """
        ...

    def format_attrs(self, attrs: Sequence[Attribute]) -> str:
        """Format attributes without synthetic metadata.

        Returns:
            The formatted line, empty string when there is nothing to emit.
        """
        ...


@runtime_checkable
class SinkPort(Protocol):
    """Port for writing formatted lines somewhere.

    Examples: ConsoleSink, InMemorySink.
    """

    def write(self, line: str, level: Level) -> None:
        """Write one line."""
        ...
