"""Sink adapters implementing SinkPort."""

from slogpy.adapters.sinks.console import ConsoleSink
from slogpy.adapters.sinks.in_memory import InMemorySink

__all__ = [
    "ConsoleSink",
    "InMemorySink",
]
