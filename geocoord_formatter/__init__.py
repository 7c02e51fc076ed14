"""
Human-readable geographic coordinate formatting.

This package renders decimal degrees as degrees, minutes and seconds with
configurable precision, unit glyphs, separators and hemisphere notation.

Example Usage:
    >>> from geocoord_formatter import CoordinateFormatter, CoordinateUnit
    >>>
    >>> formatter = CoordinateFormatter()
    >>> formatter.format_latitude(0.0)
    '0° 0′ N'
    >>> _ = formatter.configure(smallest_unit=CoordinateUnit.SECONDS, fractional_digits=4)
    >>> formatter.format_coordinate(-49.937888, 15.628472)
    '49° 56′ 16″ S, 15° 37′ 42″ E'

Available Classes:
    Configuration:
        - FormatConfig: Immutable formatting options
        - CoordinateUnit: Smallest printed unit (degrees, minutes, seconds)

    Formatting:
        - CoordinateFormatter: Formatter object holding a FormatConfig
        - Coordinate: Latitude/longitude record
        - Axis: Latitude, longitude or plain number
        - DecomposedCoordinate: Degrees/minutes/seconds components
"""

# Configuration
from geocoord_formatter.config import (
    DEFAULT_CONFIG,
    CoordinateUnit,
    FormatConfig,
    get_default_config,
)
from geocoord_formatter.coordinate import Coordinate
from geocoord_formatter.decompose import Axis, DecomposedCoordinate, decompose

# Formatting
from geocoord_formatter.formatter import (
    CoordinateFormatter,
    format_any,
    format_coordinate,
    format_latitude,
    format_longitude,
    format_number,
    format_point,
)

# Define public API
__all__ = [
    # Configuration
    'DEFAULT_CONFIG',
    'CoordinateUnit',
    'FormatConfig',
    'get_default_config',

    # Data
    'Axis',
    'Coordinate',
    'DecomposedCoordinate',
    'decompose',

    # Formatting
    'CoordinateFormatter',
    'format_any',
    'format_coordinate',
    'format_latitude',
    'format_longitude',
    'format_number',
    'format_point',
]

# Package metadata
__version__ = '0.1.0'
__description__ = 'Human-readable sexagesimal formatting of geographic coordinates'
