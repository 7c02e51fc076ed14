"""
Unit type annotations for sexagesimal coordinate components.

This module defines NewType aliases for the angular units that flow through
the formatting pipeline. They document which component a value represents
without any runtime cost.

Usage Example:
    >>> from geocoord_formatter.types import ArcMinutes, Degrees
    >>>
    >>> def minutes_of(value: Degrees) -> ArcMinutes:
    ...     return ArcMinutes(abs(value) % 1 * 60)
"""

from typing import NewType

# Angular units
Degrees = NewType('Degrees', float)
"""Angle in decimal degrees (e.g., latitude, longitude, integer degree component)"""

ArcMinutes = NewType('ArcMinutes', float)
"""Minutes of arc, 1/60 of a degree"""

ArcSeconds = NewType('ArcSeconds', float)
"""Seconds of arc, 1/3600 of a degree"""

# Precision
FractionDigits = NewType('FractionDigits', int)
"""Number of digits rendered after the decimal point"""
