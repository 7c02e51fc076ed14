"""
Human-readable formatting of geographic coordinates.

Every public function takes the configuration explicitly and is a pure
function of its arguments. CoordinateFormatter bundles a configuration with
the same operations for callers that prefer a long-lived object.

Example Usage:
    >>> from geocoord_formatter import CoordinateUnit, FormatConfig, format_coordinate
    >>> config = FormatConfig(smallest_unit=CoordinateUnit.SECONDS, fractional_digits=4)
    >>> format_coordinate(-49.937888, 15.628472, config)
    '49° 56′ 16″ S, 15° 37′ 42″ E'
"""

import logging
import numbers
from collections.abc import Sequence
from functools import singledispatch
from typing import Any, Optional

import numpy as np

from geocoord_formatter.config import DEFAULT_CONFIG, CoordinateUnit, FormatConfig
from geocoord_formatter.coordinate import Coordinate
from geocoord_formatter.decompose import Axis, decompose, smallest_unit_precision
from geocoord_formatter.rendering import render_number

logger = logging.getLogger(__name__)

COORDINATE_SEPARATOR = ', '


def _is_finite_number(value: Any) -> bool:
    """Check for a real, non-boolean number that is neither NaN nor infinite."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Integral):
        return True
    try:
        return bool(np.isfinite(float(value)))
    except (OverflowError, TypeError, ValueError):
        return False


def hemisphere_suffix(axis: Axis, negative: bool, config: FormatConfig) -> str:
    """Return the cardinal letter for a value, or "" for an undefined axis."""
    if axis is Axis.LATITUDAL:
        return config.south_string if negative else config.north_string
    if axis is Axis.LONGITUDAL:
        return config.west_string if negative else config.east_string
    return ''


def build_format(value: float, axis: Axis, config: FormatConfig) -> str:
    """Format one value for the given axis.

    Returns:
        The assembled string, or "" when value is NaN or infinite.
    """
    if not _is_finite_number(value):
        logger.debug("Rejecting non-finite coordinate value: %r", value)
        return ''

    value = int(value) if isinstance(value, numbers.Integral) else float(value)
    decomposed = decompose(value, config)
    precision = smallest_unit_precision(config)

    def render(number: float, digits: int) -> str:
        return render_number(number, digits, config.locale, config.minus_sign)

    if config.smallest_unit is CoordinateUnit.DEGREES:
        # 12.34567° S
        components = [render(decomposed.degrees, precision) + config.degree_string]
    elif config.smallest_unit is CoordinateUnit.MINUTES:
        # 12° 34.567′ S
        components = [
            render(decomposed.degrees, 0) + config.degree_string,
            render(decomposed.minutes, precision) + config.minute_string,
        ]
    else:
        # 12° 34′ 56.7″ S
        components = [
            render(decomposed.degrees, 0) + config.degree_string,
            render(decomposed.minutes, 0) + config.minute_string,
            render(decomposed.seconds, precision) + config.second_string,
        ]

    if config.uses_hemisphere_suffixes:
        hemisphere = hemisphere_suffix(axis, value < 0, config)
        if hemisphere:
            components.append(hemisphere)

    return config.component_separator.join(components)


def format_number(value: float, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Format a value with no specific axis; never appends a hemisphere suffix."""
    return build_format(value, Axis.UNDEFINED, config)


def format_latitude(value: float, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Format a latitude, appending N/S if hemisphere suffixes are enabled."""
    return build_format(value, Axis.LATITUDAL, config)


def format_longitude(value: float, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Format a longitude, appending E/W if hemisphere suffixes are enabled."""
    return build_format(value, Axis.LONGITUDAL, config)


def format_coordinate(latitude: float, longitude: float,
                      config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Format a latitude/longitude pair joined with ", ".

    Each side is formatted on its own, so an invalid latitude leaves the
    longitude intact (and vice versa).
    """
    return (
        build_format(latitude, Axis.LATITUDAL, config)
        + COORDINATE_SEPARATOR
        + build_format(longitude, Axis.LONGITUDAL, config)
    )


def format_point(point: Coordinate, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Format a Coordinate record like format_coordinate()."""
    return format_coordinate(point.latitude, point.longitude, config)


@singledispatch
def _format_value(value: Any, config: FormatConfig) -> Optional[str]:
    logger.debug("Unsupported value for coordinate formatting: %s", type(value).__name__)
    return None


@_format_value.register
def _(value: numbers.Real, config: FormatConfig) -> Optional[str]:
    if isinstance(value, bool):
        logger.debug("Unsupported value for coordinate formatting: bool")
        return None
    return format_number(value, config)


@_format_value.register
def _(value: Coordinate, config: FormatConfig) -> Optional[str]:
    return format_point(value, config)


@_format_value.register(str)
@_format_value.register(bytes)
def _(value: Any, config: FormatConfig) -> Optional[str]:
    logger.debug("Unsupported value for coordinate formatting: %s", type(value).__name__)
    return None


def _format_pair(items: Sequence, config: FormatConfig) -> Optional[str]:
    if len(items) != 2:
        logger.debug("Expected [latitude, longitude], got %d items", len(items))
        return None
    if any(isinstance(item, bool) or not isinstance(item, numbers.Real) for item in items):
        logger.debug("Expected [latitude, longitude] of real numbers")
        return None
    return format_coordinate(items[0], items[1], config)


@_format_value.register
def _(value: Sequence, config: FormatConfig) -> Optional[str]:
    return _format_pair(value, config)


@_format_value.register
def _(value: np.ndarray, config: FormatConfig) -> Optional[str]:
    if value.ndim != 1 or value.dtype.kind not in 'iuf':
        logger.debug("Expected a 1-D numeric array, got shape %s dtype %s",
                     value.shape, value.dtype)
        return None
    return _format_pair(value.tolist(), config)


def format_any(value: Any, config: FormatConfig = DEFAULT_CONFIG) -> Optional[str]:
    """Format any supported value.

    Supported values:
        - a real number, formatted with no axis
        - a Coordinate record
        - a two-element sequence or 1-D array of numbers, as [latitude, longitude]

    Returns:
        Formatted string, or None for unsupported values so callers can fall
        back to their own rendering.
    """
    return _format_value(value, config)


class CoordinateFormatter:
    """Formatter object holding one FormatConfig.

    The configuration itself is immutable; configure() swaps in a modified
    copy. Default output looks like ``12° 34′ N, 12° 34′ W``.

    Example:
        >>> formatter = CoordinateFormatter(smallest_unit=CoordinateUnit.DEGREES,
        ...                                 fractional_digits=3)
        >>> formatter.format_number(56.246)
        '56.246°'
        >>> formatter.configure(uses_hemisphere_suffixes=False).format_latitude(-12.5)
        '−12.500°'
    """

    def __init__(self, config: Optional[FormatConfig] = None, **overrides: Any):
        config = config if config is not None else DEFAULT_CONFIG
        self._config = config.replace(**overrides) if overrides else config

    @property
    def config(self) -> FormatConfig:
        """Current configuration snapshot."""
        return self._config

    @config.setter
    def config(self, config: FormatConfig) -> None:
        if not isinstance(config, FormatConfig):
            raise TypeError(f"Expected FormatConfig, got {type(config).__name__}")
        self._config = config

    def configure(self, **changes: Any) -> 'CoordinateFormatter':
        """Replace configuration attributes; returns self for chaining."""
        self._config = self._config.replace(**changes)
        return self

    def format_number(self, value: float) -> str:
        return format_number(value, self._config)

    def format_latitude(self, value: float) -> str:
        return format_latitude(value, self._config)

    def format_longitude(self, value: float) -> str:
        return format_longitude(value, self._config)

    def format_coordinate(self, latitude: float, longitude: float) -> str:
        return format_coordinate(latitude, longitude, self._config)

    def format_point(self, point: Coordinate) -> str:
        return format_point(point, self._config)

    def format_any(self, value: Any) -> Optional[str]:
        return format_any(value, self._config)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"
