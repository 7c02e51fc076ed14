"""
Configuration for sexagesimal coordinate formatting.

A FormatConfig is an immutable snapshot of every option that shapes the
rendered string. It can be built in code, from a plain dictionary or from a
YAML file with a ``coordinate_format`` section.
"""

import logging
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

YAML_SECTION = 'coordinate_format'

DEFAULT_LOCALE = 'en_US_POSIX'
DEFAULT_FRACTIONAL_DIGITS = 2
DEGREE_SIGN = '°'
PRIME = '′'
DOUBLE_PRIME = '″'
MINUS_SIGN = '−'


class CoordinateUnit(Enum):
    """Smallest sexagesimal unit printed by the formatter.

    All larger units are always printed, for example ``0° 0′ 3″`` for SECONDS.
    """

    DEGREES = "degrees"
    """12.345°"""

    MINUTES = "minutes"
    """12° 34.5′"""

    SECONDS = "seconds"
    """12° 34′ 56.7″"""


@dataclass(frozen=True)
class FormatConfig:
    """Options controlling how coordinates are rendered.

    Attributes:
        locale: Locale tag used for decimal separators (e.g. "en_US_POSIX", "de_DE").
        smallest_unit: Finest unit to print. Coarser units are always printed.
        fractional_digits: Digits beyond integer degrees. Integer minutes and
            integer seconds consume two digits each, the remainder becomes the
            fractional digits of the smallest unit. Approximate resolution at
            the equator:
                DEGREES, 0  ->  1°       = 111 km
                DEGREES, 1  ->  0.1°     = 11.1 km
                MINUTES, 2  ->  0° 1′    = 1.86 km
                MINUTES, 3  ->  0° 0.1′  = 186 m
                SECONDS, 4  ->  0° 0′ 1″ = 31 m
                SECONDS, 5  ->  0° 0′ 0.1″ = 3.1 m
        degree_string: Glyph appended directly to the degrees number.
        minute_string: Glyph appended directly to the minutes number.
        second_string: Glyph appended directly to the seconds number.
        component_separator: Inserted between degrees, minutes, seconds and suffix.
        uses_hemisphere_suffixes: Append N/S/E/W instead of using a minus sign.
        minus_sign: Sign glyph used when hemisphere suffixes are disabled.
        north_string: Suffix for the Northern hemisphere.
        south_string: Suffix for the Southern hemisphere.
        east_string: Suffix for the Eastern hemisphere.
        west_string: Suffix for the Western hemisphere.
    """
    locale: str = DEFAULT_LOCALE
    smallest_unit: CoordinateUnit = CoordinateUnit.MINUTES
    fractional_digits: int = DEFAULT_FRACTIONAL_DIGITS
    degree_string: str = DEGREE_SIGN
    minute_string: str = PRIME
    second_string: str = DOUBLE_PRIME
    component_separator: str = ' '
    uses_hemisphere_suffixes: bool = True
    minus_sign: str = MINUS_SIGN
    north_string: str = 'N'
    south_string: str = 'S'
    east_string: str = 'E'
    west_string: str = 'W'

    @classmethod
    def from_yaml(cls, path: str) -> 'FormatConfig':
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            FormatConfig instance loaded from file

        Raises:
            FileNotFoundError: If configuration file does not exist
            ValueError: If configuration file is malformed or contains invalid values

        Example:
            >>> config = FormatConfig.from_yaml('config/coordinates.yaml')
            >>> print(config.smallest_unit)
            CoordinateUnit.SECONDS
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                f"Please create a configuration file or use get_default_config()"
            )

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not data:
            raise ValueError(
                f"Configuration file is empty: {path}\n"
                f"Expected a '{YAML_SECTION}' section with formatting options"
            )

        if not isinstance(data, dict) or YAML_SECTION not in data:
            raise ValueError(
                f"Configuration file missing '{YAML_SECTION}' section: {path}\n"
                f"Expected structure: {YAML_SECTION}:\n  smallest_unit: ...\n  ..."
            )

        config = cls.from_dict(data[YAML_SECTION] or {})
        logger.info("Loaded coordinate format configuration from %s", config_path)
        return config

    @staticmethod
    def _parse_unit(unit: Any) -> CoordinateUnit:
        """Parse a unit name into CoordinateUnit enum.

        Raises:
            ValueError: If unit is not a valid unit name
        """
        if isinstance(unit, CoordinateUnit):
            return unit
        try:
            return CoordinateUnit(str(unit).lower())
        except ValueError:
            valid_units = [u.value for u in CoordinateUnit]
            raise ValueError(
                f"Invalid smallest_unit '{unit}'. "
                f"Must be one of: {', '.join(valid_units)}"
            ) from None

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'FormatConfig':
        """Create configuration from dictionary.

        Keys match the attribute names; missing keys keep their defaults.

        Args:
            config: Dictionary of formatting options

        Returns:
            FormatConfig instance

        Raises:
            ValueError: If configuration contains unknown keys or values of the wrong type

        Example:
            >>> config = FormatConfig.from_dict({
            ...     'smallest_unit': 'seconds',
            ...     'fractional_digits': 5,
            ...     'uses_hemisphere_suffixes': False,
            ... })
        """
        if not isinstance(config, dict):
            raise ValueError(f"Configuration must be a dictionary, got {type(config)}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ValueError(
                f"Unknown configuration keys: {', '.join(map(str, unknown))}. "
                f"Valid keys: {', '.join(sorted(known))}"
            )

        values: Dict[str, Any] = {}
        for key, value in config.items():
            if key == 'smallest_unit':
                values[key] = cls._parse_unit(value)
            elif key == 'fractional_digits':
                # bool is an int subclass, but True digits is never intended
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValueError(
                        f"'fractional_digits' must be an integer, got {type(value).__name__}"
                    )
                values[key] = value
            elif key == 'uses_hemisphere_suffixes':
                if not isinstance(value, bool):
                    raise ValueError(
                        f"'uses_hemisphere_suffixes' must be a boolean, got {type(value).__name__}"
                    )
                values[key] = value
            else:
                if not isinstance(value, str):
                    raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
                values[key] = value

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Dictionary representation suitable for YAML serialization

        Example:
            >>> get_default_config().to_dict()['smallest_unit']
            'minutes'
        """
        result = asdict(self)
        result['smallest_unit'] = self.smallest_unit.value
        return result

    def replace(self, **changes: Any) -> 'FormatConfig':
        """Return a copy with the given attributes changed."""
        return replace(self, **changes)

    def save_to_yaml(self, path: str) -> None:
        """Save configuration to YAML file.

        Args:
            path: Path where configuration file should be written

        Raises:
            IOError: If file cannot be written
        """
        config_path = Path(path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Wrap in section for consistency with from_yaml
        output = {YAML_SECTION: self.to_dict()}

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(output, f, default_flow_style=False, sort_keys=False,
                               allow_unicode=True)
        except IOError as e:
            raise IOError(f"Failed to write configuration file: {e}") from e


DEFAULT_CONFIG = FormatConfig()


def get_default_config() -> FormatConfig:
    """Return the default configuration.

    Prints minutes with no fractional digits and hemisphere suffixes,
    for example ``12° 34′ N``.
    """
    return DEFAULT_CONFIG
