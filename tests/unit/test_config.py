"""Tests for FormatterConfig."""

from dataclasses import FrozenInstanceError

import pytest

from slogpy.core.config import DurationFormat, FormatterConfig, TimeFormat


class TestDefaults:
    """Tests for default configuration values."""

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_defaults(self) -> None:
        """A fresh config is lax, nested, RFC 3339 and keeps units in keys."""
        config = FormatterConfig()
        assert config.strict is False
        assert config.flat is False
        assert (config.time_key, config.msg_key, config.level_key) == (
            "time",
            "msg",
            "level",
        )
        assert config.time_format is TimeFormat.RFC3339
        assert config.duration_format is DurationFormat.KEY_WITH_UNITS
        assert config.sort_order == ()
        assert config.terminal_max_width == 120
        assert config.terminal_colors is True


class TestBuilders:
    """Tests for with_* copy builders."""

    @pytest.mark.core
    @pytest.mark.tier(0)
    @pytest.mark.tra("Config.Builder.Copy")
    def test_builder_returns_modified_copy(self) -> None:
        """with_* methods return a new config and leave the original alone."""
        base = FormatterConfig()
        strict = base.with_strict(True)
        assert strict.strict is True
        assert base.strict is False
        assert strict is not base

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_builders_chain(self) -> None:
        """Builders can be chained."""
        config = (
            FormatterConfig()
            .with_flat(True)
            .with_time_key("ts")
            .with_msg_key("message")
            .with_level_key("severity")
            .with_time_format(TimeFormat.UNIX_SECONDS)
            .with_duration_format(DurationFormat.DIMENSIONLESS)
            .with_sort_order(["message", "severity"])
            .with_terminal_max_width(40)
            .with_terminal_colors(False)
        )
        assert config == FormatterConfig(
            flat=True,
            time_key="ts",
            msg_key="message",
            level_key="severity",
            time_format=TimeFormat.UNIX_SECONDS,
            duration_format=DurationFormat.DIMENSIONLESS,
            sort_order=("message", "severity"),
            terminal_max_width=40,
            terminal_colors=False,
        )

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_config_is_frozen(self) -> None:
        """Configs cannot be mutated in place."""
        with pytest.raises(FrozenInstanceError):
            FormatterConfig().strict = True  # type: ignore[misc]


class TestFromMapping:
    """Tests for FormatterConfig.from_mapping()."""

    @pytest.mark.core
    @pytest.mark.tier(0)
    @pytest.mark.tra("Config.FromMapping")
    def test_parses_string_values(self) -> None:
        """Strings from settings files are parsed into typed values."""
        config = FormatterConfig.from_mapping(
            {
                "strict": "true",
                "flat": "no",
                "time_format": "unix-nanoseconds",
                "duration_format": "VALUE_WITH_UNITS",
                "sort_order": "msg, level",
                "terminal_max_width": "80",
                "msg_key": "message",
            }
        )
        assert config.strict is True
        assert config.flat is False
        assert config.time_format is TimeFormat.UNIX_NANOSECONDS
        assert config.duration_format is DurationFormat.VALUE_WITH_UNITS
        assert config.sort_order == ("msg", "level")
        assert config.terminal_max_width == 80
        assert config.msg_key == "message"

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_accepts_typed_values(self) -> None:
        """Already typed values pass through."""
        config = FormatterConfig.from_mapping(
            {"time_format": TimeFormat.OMIT, "sort_order": ["a"], "strict": True}
        )
        assert config.time_format is TimeFormat.OMIT
        assert config.sort_order == ("a",)
        assert config.strict is True

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_empty_mapping_gives_defaults(self) -> None:
        """Missing options keep their defaults."""
        assert FormatterConfig.from_mapping({}) == FormatterConfig()

    @pytest.mark.core
    @pytest.mark.tier(0)
    @pytest.mark.tra("Config.FromMapping.UnknownOption")
    def test_unknown_option_raises_valueerror(self) -> None:
        """Unknown option names are rejected."""
        with pytest.raises(ValueError, match="unknown formatter option"):
            FormatterConfig.from_mapping({"colour": True})

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_unknown_enum_value_raises_valueerror(self) -> None:
        """Unknown enum values are rejected."""
        with pytest.raises(ValueError, match="TimeFormat"):
            FormatterConfig.from_mapping({"time_format": "iso9000"})

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_non_positive_width_raises_valueerror(self) -> None:
        """Terminal width must be positive."""
        with pytest.raises(ValueError, match="positive"):
            FormatterConfig.from_mapping({"terminal_max_width": 0})

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_bad_bool_raises_valueerror(self) -> None:
        """Unrecognised boolean strings are rejected."""
        with pytest.raises(ValueError, match="strict must be a boolean"):
            FormatterConfig.from_mapping({"strict": "maybe"})

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_wrong_type_raises_typeerror(self) -> None:
        """Values of the wrong type are rejected."""
        with pytest.raises(TypeError):
            FormatterConfig.from_mapping({"msg_key": 3})
        with pytest.raises(TypeError):
            FormatterConfig.from_mapping({"sort_order": [1, 2]})
