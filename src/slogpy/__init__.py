"""slogpy: structured log attribute formatting.

Turns typed, possibly nested attributes plus a level, message and timestamp
into JSON, logfmt or terminal lines.
"""

from slogpy.adapters.logging import SlogHandler
from slogpy.adapters.sinks import ConsoleSink, InMemorySink
from slogpy.core.config import DurationFormat, FormatterConfig, TimeFormat
from slogpy.core.formatters import JsonFormatter, LogfmtFormatter, TerminalFormatter
from slogpy.core.logger import Logger
from slogpy.core.models import (
    AnyAttr,
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

__all__ = [
    "AnyAttr",
    "Attribute",
    "BoolAttr",
    "ConsoleSink",
    "DurationAttr",
    "DurationFormat",
    "FloatAttr",
    "FormatterConfig",
    "FormatterPort",
    "GroupAttr",
    "InMemorySink",
    "IntAttr",
    "JsonFormatter",
    "Level",
    "LogfmtFormatter",
    "Logger",
    "SinkPort",
    "SlogHandler",
    "StringAttr",
    "TerminalFormatter",
    "TimeFormat",
]
