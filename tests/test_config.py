"""Unit tests for geocoord_formatter.config module."""

from pathlib import Path

import pytest

from geocoord_formatter.config import (
    DEFAULT_CONFIG,
    CoordinateUnit,
    FormatConfig,
    get_default_config,
)


class TestFormatConfig:
    """Tests for FormatConfig frozen dataclass."""

    def test_defaults(self) -> None:
        config = FormatConfig()

        assert config.locale == "en_US_POSIX"
        assert config.smallest_unit is CoordinateUnit.MINUTES
        assert config.fractional_digits == 2
        assert config.degree_string == "°"
        assert config.minute_string == "′"
        assert config.second_string == "″"
        assert config.component_separator == " "
        assert config.uses_hemisphere_suffixes is True
        assert config.minus_sign == "−"
        assert (config.north_string, config.south_string) == ("N", "S")
        assert (config.east_string, config.west_string) == ("E", "W")

    def test_default_config(self) -> None:
        assert get_default_config() == FormatConfig() == DEFAULT_CONFIG

    def test_frozen(self) -> None:
        """Test FormatConfig is immutable."""
        config = FormatConfig()

        with pytest.raises(AttributeError):
            config.fractional_digits = 4  # type: ignore[misc]

    def test_replace(self) -> None:
        config = FormatConfig()
        changed = config.replace(fractional_digits=5, minus_sign="-")

        assert changed.fractional_digits == 5
        assert changed.minus_sign == "-"
        assert config.fractional_digits == 2

    def test_equality(self) -> None:
        assert FormatConfig(locale="de_DE") == FormatConfig(locale="de_DE")
        assert FormatConfig(locale="de_DE") != FormatConfig()


class TestFromDict:
    """Tests for FormatConfig.from_dict()."""

    def test_empty(self) -> None:
        assert FormatConfig.from_dict({}) == FormatConfig()

    @pytest.mark.parametrize(
        "unit,expected",
        [
            ("degrees", CoordinateUnit.DEGREES),
            ("Minutes", CoordinateUnit.MINUTES),
            ("SECONDS", CoordinateUnit.SECONDS),
            (CoordinateUnit.SECONDS, CoordinateUnit.SECONDS),
        ],
        ids=["lower", "title", "upper", "enum"],
    )
    def test_unit(self, unit, expected: CoordinateUnit) -> None:
        assert FormatConfig.from_dict({"smallest_unit": unit}).smallest_unit is expected

    def test_all_options(self) -> None:
        config = FormatConfig.from_dict({
            "locale": "de_DE",
            "smallest_unit": "seconds",
            "fractional_digits": 5,
            "degree_string": "d",
            "minute_string": "m",
            "second_string": "s",
            "component_separator": "",
            "uses_hemisphere_suffixes": False,
            "minus_sign": "-",
            "north_string": "n",
            "south_string": "s",
            "east_string": "e",
            "west_string": "w",
        })

        assert config.locale == "de_DE"
        assert config.smallest_unit is CoordinateUnit.SECONDS
        assert config.fractional_digits == 5
        assert config.uses_hemisphere_suffixes is False
        assert config.west_string == "w"

    def test_negative_digits_accepted(self) -> None:
        assert FormatConfig.from_dict({"fractional_digits": -1}).fractional_digits == -1

    @pytest.mark.parametrize(
        "data,message",
        [
            ({"smallest_unit": "hours"}, "Invalid smallest_unit"),
            ({"fractional_digits": "2"}, "fractional_digits"),
            ({"fractional_digits": True}, "fractional_digits"),
            ({"fractional_digits": 2.5}, "fractional_digits"),
            ({"uses_hemisphere_suffixes": "yes"}, "uses_hemisphere_suffixes"),
            ({"minus_sign": 1}, "minus_sign"),
            ({"precision": 3}, "Unknown configuration keys"),
        ],
        ids=["unit", "digits-str", "digits-bool", "digits-float", "suffix-str",
             "glyph-int", "unknown-key"],
    )
    def test_invalid(self, data: dict, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            FormatConfig.from_dict(data)

    def test_not_a_dict(self) -> None:
        with pytest.raises(ValueError, match="must be a dictionary"):
            FormatConfig.from_dict(["seconds"])  # type: ignore[arg-type]

    def test_to_dict_round_trip(self) -> None:
        config = FormatConfig(smallest_unit=CoordinateUnit.DEGREES, fractional_digits=3)
        data = config.to_dict()

        assert data["smallest_unit"] == "degrees"
        assert FormatConfig.from_dict(data) == config


class TestYaml:
    """Tests for YAML loading and saving."""

    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "format.yaml"
        path.write_text(
            "coordinate_format:\n"
            "  smallest_unit: seconds\n"
            "  fractional_digits: 5\n"
            "  uses_hemisphere_suffixes: false\n"
            "  minus_sign: '-'\n",
            encoding="utf-8",
        )

        config = FormatConfig.from_yaml(str(path))

        assert config == FormatConfig(
            smallest_unit=CoordinateUnit.SECONDS,
            fractional_digits=5,
            uses_hemisphere_suffixes=False,
            minus_sign="-",
        )

    def test_empty_section_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "format.yaml"
        path.write_text("coordinate_format:\n", encoding="utf-8")

        assert FormatConfig.from_yaml(str(path)) == FormatConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            FormatConfig.from_yaml(str(tmp_path / "missing.yaml"))

    @pytest.mark.parametrize(
        "content,message",
        [
            ("", "empty"),
            ("other:\n  key: 1\n", "missing 'coordinate_format'"),
            ("- a\n- b\n", "missing 'coordinate_format'"),
            ("coordinate_format: [unclosed\n", "Failed to parse"),
            ("coordinate_format:\n  smallest_unit: hours\n", "Invalid smallest_unit"),
        ],
        ids=["empty", "no-section", "list", "malformed", "bad-value"],
    )
    def test_invalid_file(self, tmp_path: Path, content: str, message: str) -> None:
        path = tmp_path / "format.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ValueError, match=message):
            FormatConfig.from_yaml(str(path))

    def test_save_and_load(self, tmp_path: Path) -> None:
        config = FormatConfig(
            locale="fr_FR", smallest_unit=CoordinateUnit.SECONDS, component_separator=""
        )
        path = tmp_path / "nested" / "format.yaml"

        config.save_to_yaml(str(path))

        assert FormatConfig.from_yaml(str(path)) == config
        assert "°" in path.read_text(encoding="utf-8")
