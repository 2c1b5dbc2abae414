"""Console sink routing lines by severity."""

import sys
from typing import TextIO

from slogpy.core.models import Level

# Levels written to the error stream
_STDERR_LEVELS = frozenset({Level.ERROR, Level.WARN})


class ConsoleSink:
    """Console implementation of SinkPort.

    ERROR and WARN lines go to standard error, everything else to standard
    output. Streams are looked up at write time unless given explicitly, so
    redirections of ``sys.stdout`` made later are honoured.

    Args:
        stdout: Stream for regular lines (default: ``sys.stdout``).
        stderr: Stream for warnings and errors (default: ``sys.stderr``).
    """

    def __init__(
        self, stdout: TextIO | None = None, stderr: TextIO | None = None
    ) -> None:
        self._stdout = stdout
        self._stderr = stderr

    def write(self, line: str, level: Level) -> None:
        """Write a line followed by a newline. Empty lines are skipped."""
        if not line:
            return
        if level in _STDERR_LEVELS:
            stream = self._stderr or sys.stderr
        else:
            stream = self._stdout or sys.stdout
        stream.write(line + "\n")
        stream.flush()
