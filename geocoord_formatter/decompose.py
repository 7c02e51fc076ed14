"""
Decomposition of decimal degrees into degrees, minutes and seconds.

The fractional-digit budget of a FormatConfig is counted beyond integer
degrees. Integer minutes use two of those digits and integer seconds two
more; whatever is left is the precision of the smallest unit. Rounding that
unit can overflow to 60, in which case the overflow carries into the next
larger unit (seconds into minutes first, then minutes into degrees).
"""

import math
import numbers
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum

from geocoord_formatter.config import CoordinateUnit, FormatConfig
from geocoord_formatter.rendering import FLOAT_INTEGER_DIGITS
from geocoord_formatter.types import ArcMinutes, ArcSeconds, Degrees, FractionDigits

# Integer minutes and integer seconds each take two digits of the budget
INTEGER_COMPONENT_DIGITS = 2
SEXAGESIMAL_BASE = 60


class Axis(Enum):
    """Which hemisphere letters apply to a formatted value."""

    UNDEFINED = "undefined"
    """Plain number, never suffixed."""

    LATITUDAL = "latitudal"
    """North/South."""

    LONGITUDAL = "longitudal"
    """East/West."""


@dataclass(frozen=True)
class DecomposedCoordinate:
    """Sexagesimal components of one coordinate value.

    Attributes:
        degrees: Degree component. Negative (or -0.0) only when the sign must
            be printed because hemisphere suffixes are disabled. Holds the full
            decimal value when the smallest unit is DEGREES.
        minutes: Minutes magnitude, 0 when not printed.
        seconds: Seconds magnitude, 0 when not printed.
    """

    degrees: Degrees
    minutes: ArcMinutes = ArcMinutes(0.0)
    seconds: ArcSeconds = ArcSeconds(0.0)

    @property
    def total_degrees(self) -> float:
        """Magnitude of the value expressed back in decimal degrees."""
        return abs(self.degrees) + self.minutes / 60.0 + self.seconds / 3600.0


def remaining_fraction_digits(config: FormatConfig) -> int:
    """Digits left for the smallest unit after integer minutes/seconds.

    The result can be negative when the budget is smaller than the digits
    consumed by larger units.
    """
    digits = config.fractional_digits
    if config.smallest_unit in (CoordinateUnit.MINUTES, CoordinateUnit.SECONDS):
        digits -= INTEGER_COMPONENT_DIGITS
    if config.smallest_unit is CoordinateUnit.SECONDS:
        digits -= INTEGER_COMPONENT_DIGITS
    return digits


def smallest_unit_precision(config: FormatConfig) -> FractionDigits:
    """Fractional digits printed for the smallest unit, never negative."""
    return FractionDigits(max(remaining_fraction_digits(config), 0))


def round_half_away_from_zero(number: float, fractional_digits: int) -> float:
    """Round to the given number of fractional digits, ties away from zero.

    Examples:
        >>> round_half_away_from_zero(2.5, 0)
        3.0
        >>> round_half_away_from_zero(-0.125, 2)
        -0.13
    """
    with localcontext() as ctx:
        ctx.prec = FLOAT_INTEGER_DIGITS + max(fractional_digits, 0)
        rounded = Decimal(repr(float(number))).quantize(
            Decimal(1).scaleb(-fractional_digits), rounding=ROUND_HALF_UP
        )
    return math.copysign(float(rounded), number)


def decompose(value: float, config: FormatConfig) -> DecomposedCoordinate:
    """Split a finite decimal degree value into sexagesimal components.

    Args:
        value: Decimal degrees, any sign and magnitude.
        config: Formatting options; smallest_unit, fractional_digits and
            uses_hemisphere_suffixes are used.

    Returns:
        DecomposedCoordinate with the smallest unit already rounded and
        any overflow carried into larger units.
    """
    signed = not config.uses_hemisphere_suffixes and value < 0
    precision = smallest_unit_precision(config)

    if config.smallest_unit is CoordinateUnit.DEGREES:
        # Rendering rounds the degrees; only the sign is decided here
        if value == 0:
            return DecomposedCoordinate(Degrees(0.0))
        return DecomposedCoordinate(Degrees(value if signed else abs(value)))

    if isinstance(value, numbers.Integral):
        # Integers may exceed the float range; they have no fractional part
        fraction, degrees = 0.0, abs(int(value))
    else:
        fraction, degrees = math.modf(abs(value))
    minutes = fraction * SEXAGESIMAL_BASE
    seconds = 0.0

    if config.smallest_unit is CoordinateUnit.MINUTES:
        minutes = round_half_away_from_zero(minutes, precision)
    else:
        fraction, minutes = math.modf(minutes)
        seconds = round_half_away_from_zero(fraction * SEXAGESIMAL_BASE, precision)
        if seconds >= SEXAGESIMAL_BASE:
            seconds -= SEXAGESIMAL_BASE
            minutes += 1

    if minutes >= SEXAGESIMAL_BASE:
        minutes -= SEXAGESIMAL_BASE
        degrees += 1

    if signed:
        # -0.0 keeps the sign visible for values within one degree of zero
        degrees = -degrees

    return DecomposedCoordinate(Degrees(degrees), ArcMinutes(minutes), ArcSeconds(seconds))
