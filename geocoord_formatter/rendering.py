"""
Locale-aware rendering of coordinate components.

Numbers are printed with a fixed count of fractional digits, no grouping
separators and at least one integer digit. Decimal symbols come from the
Babel locale data; the minus sign is always the configured glyph.
"""

import math
import numbers
from decimal import ROUND_HALF_UP, Decimal, localcontext
from functools import lru_cache

from babel import Locale
from babel.numbers import format_decimal

FLOAT_INTEGER_DIGITS = 310


@lru_cache(maxsize=32)
def parse_locale(tag: str) -> Locale:
    """Parse a locale tag such as "de_DE" or "pt-BR" (cached).

    Raises:
        babel.UnknownLocaleError: If no locale data exists for the tag
        ValueError: If the tag is malformed
    """
    return Locale.parse(tag, sep='-' if '-' in tag else '_')


def decimal_pattern(fraction_digits: int) -> str:
    """Build a CLDR number pattern with exactly ``fraction_digits`` decimals."""
    if fraction_digits <= 0:
        return '0'
    return '0.' + '0' * fraction_digits


def render_number(value: float, fraction_digits: int, locale: str, minus_sign: str) -> str:
    """Render a finite number for display.

    Args:
        value: Number to render. Negative zero is printed with a minus sign.
            Integers are rendered exactly, whatever their size.
        fraction_digits: Exact count of fractional digits (clamped at 0).
        locale: Locale tag providing the decimal separator.
        minus_sign: Glyph printed in front of negative values.

    Returns:
        Rendered number, e.g. "−12.50"
    """
    fraction_digits = max(fraction_digits, 0)
    if isinstance(value, numbers.Integral):
        negative = value < 0
        exact = Decimal(abs(int(value)))
    else:
        negative = math.copysign(1.0, value) < 0
        exact = Decimal(repr(float(abs(value))))
    with localcontext() as ctx:
        # Wide enough for every integer digit plus the requested fraction
        ctx.prec = max(FLOAT_INTEGER_DIGITS, exact.adjusted() + 1) + fraction_digits
        magnitude = exact.quantize(
            Decimal(1).scaleb(-fraction_digits), rounding=ROUND_HALF_UP
        )
        text = format_decimal(
            magnitude,
            format=decimal_pattern(fraction_digits),
            locale=parse_locale(locale),
        )
    if negative:
        return minus_sign + text
    return text
