"""In-memory sink."""

from slogpy.core.models import Level


class InMemorySink:
    """In-memory implementation of SinkPort.

    Keeps every line written, with its level. Suitable for testing and for
    embedding log output in other reports.
    """

    def __init__(self) -> None:
        self._records: list[tuple[Level, str]] = []

    def write(self, line: str, level: Level) -> None:
        """Record a line. Empty lines are skipped."""
        if line:
            self._records.append((level, line))

    @property
    def records(self) -> list[tuple[Level, str]]:
        return list(self._records)

    @property
    def lines(self) -> list[str]:
        return [line for _, line in self._records]

    def clear(self) -> None:
        self._records.clear()
