"""BDD step definitions for formatting features."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest
from pytest_bdd import given, parsers, then, when

from slogpy.core.config import FormatterConfig, TimeFormat
from slogpy.core.encoding.jsonline import encode_json
from slogpy.core.formatters import JsonFormatter, LogfmtFormatter, TerminalFormatter
from slogpy.core.models import (
    Attribute,
    DurationAttr,
    GroupAttr,
    IntAttr,
    Level,
    StringAttr,
)

SCENARIO_TIME = datetime(2024, 5, 1, 12, 30, 45, tzinfo=UTC)


@dataclass
class FormattingScenarioContext:
    """State shared between the steps of one scenario.

    Attributes are collected in the order the steps list them. Steps that
    go through a formatter treat that list as the logger's newest-first
    attribute list.
    """

    config: FormatterConfig = field(default_factory=FormatterConfig)
    attrs: list[Attribute] = field(default_factory=list)
    output: str | None = None


@pytest.fixture
def ctx() -> FormattingScenarioContext:
    """Fresh scenario context for each test."""
    return FormattingScenarioContext()


# === Configuration Steps ===
@given("the default formatter config")
def step_default_config(ctx: FormattingScenarioContext) -> None:
    ctx.config = FormatterConfig()


@given("strict mode is on")
def step_strict(ctx: FormattingScenarioContext) -> None:
    ctx.config = ctx.config.with_strict(True)


@given("the time is omitted")
def step_omit_time(ctx: FormattingScenarioContext) -> None:
    ctx.config = ctx.config.with_time_format(TimeFormat.OMIT)


@given("terminal colors are off")
def step_no_colors(ctx: FormattingScenarioContext) -> None:
    ctx.config = ctx.config.with_terminal_colors(False).with_terminal_max_width(
        10_000
    )


# === Attribute Steps ===
@given(parsers.parse('a string attribute "{key}" set to "{value}"'))
def step_string_attr(ctx: FormattingScenarioContext, key: str, value: str) -> None:
    ctx.attrs.append(StringAttr(key, value))


@given(parsers.parse('an int attribute "{key}" set to {value:d}'))
def step_int_attr(ctx: FormattingScenarioContext, key: str, value: int) -> None:
    ctx.attrs.append(IntAttr(key, value))


@given(parsers.parse('a duration attribute "{key}" of {value:d} milliseconds'))
def step_duration_attr(ctx: FormattingScenarioContext, key: str, value: int) -> None:
    ctx.attrs.append(DurationAttr.of(key, milliseconds=value))


@given(
    parsers.parse(
        'a group "{key}" with int "{int_key}" set to {int_value:d} '
        'and string "{str_key}" set to "{str_value}"'
    )
)
def step_group_attr(
    ctx: FormattingScenarioContext,
    key: str,
    int_key: str,
    int_value: int,
    str_key: str,
    str_value: str,
) -> None:
    ctx.attrs.append(
        GroupAttr(key, (IntAttr(int_key, int_value), StringAttr(str_key, str_value)))
    )


# === Formatting Steps ===
@when("the attributes are encoded as JSON")
def step_encode_json(ctx: FormattingScenarioContext) -> None:
    ctx.output = encode_json(ctx.attrs, ctx.config)


@when(parsers.parse("the logger attributes are formatted as {fmt}"))
def step_format_attrs(ctx: FormattingScenarioContext, fmt: str) -> None:
    formatters = {"JSON": JsonFormatter, "logfmt": LogfmtFormatter}
    ctx.output = formatters[fmt](ctx.config).format_attrs(tuple(ctx.attrs))


@when(parsers.parse('"{message}" is logged at {level} as logfmt'))
def step_log_logfmt(ctx: FormattingScenarioContext, message: str, level: str) -> None:
    ctx.output = LogfmtFormatter(ctx.config).format(
        SCENARIO_TIME, Level[level], message, tuple(ctx.attrs)
    )


@when(parsers.parse('"{message}" is logged at {level} on the terminal'))
def step_log_terminal(
    ctx: FormattingScenarioContext, message: str, level: str
) -> None:
    ctx.output = TerminalFormatter(ctx.config).format(
        SCENARIO_TIME, Level[level], message, tuple(ctx.attrs)
    )


# === Assertion Steps ===
@then(parsers.parse("the output is '{expected}'"))
def step_output_is(ctx: FormattingScenarioContext, expected: str) -> None:
    assert ctx.output == expected


@then("there is no output")
def step_no_output(ctx: FormattingScenarioContext) -> None:
    assert ctx.output == ""
