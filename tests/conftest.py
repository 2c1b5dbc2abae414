"""Shared test fixtures for all test modules."""

from datetime import UTC, datetime

import pytest

from slogpy.adapters.sinks import InMemorySink
from slogpy.core.config import FormatterConfig, TimeFormat


@pytest.fixture
def timestamp() -> datetime:
    """Fixed timestamp: 2024-05-01T12:30:45.123456Z (unix 1714566645)."""
    return datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=UTC)


@pytest.fixture
def config() -> FormatterConfig:
    """Default formatter configuration."""
    return FormatterConfig()


@pytest.fixture
def untimed_config() -> FormatterConfig:
    """Default configuration without the time attribute.

    Used in tests that assert on whole lines without caring about the clock.
    """
    return FormatterConfig(time_format=TimeFormat.OMIT)


@pytest.fixture
def plain_terminal_config() -> FormatterConfig:
    """Terminal configuration without colors or wrapping."""
    return FormatterConfig(terminal_colors=False, terminal_max_width=10_000)


@pytest.fixture
def sink() -> InMemorySink:
    """Fixture providing an empty in-memory sink."""
    return InMemorySink()
