"""Exact money arithmetic.

Decimal helpers used by both analyses. Nothing in here touches binary
floating point: floats are routed through ``str`` before conversion so a
literal like ``321.2`` becomes ``Decimal("321.2")``.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[Decimal, int, float, str]

MONTHS_PER_YEAR = Decimal(12)


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal without picking up float representation noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def quantum(places: int) -> Decimal:
    """Smallest step for a given number of decimal places (2 -> 0.01, 0 -> 1)."""
    return Decimal(1).scaleb(-places)


def round_half_away_from_zero(value: Number, places: int = 2) -> Decimal:
    """Round to ``places`` decimals, ties going away from zero.

    ``decimal.ROUND_HALF_UP`` is exactly this mode: 2.5 -> 3 and -2.5 -> -3,
    unlike the built-in ``round`` which rounds half to even.
    """
    return to_decimal(value).quantize(quantum(places), rounding=ROUND_HALF_UP)


def floor_to(value: Number, places: int = 0) -> Decimal:
    """Truncate toward negative infinity at ``places`` decimals."""
    return to_decimal(value).quantize(quantum(places), rounding=ROUND_FLOOR)


def cents_to_dollars(cents: int) -> Decimal:
    """Express an integer amount of cents as an exact dollar Decimal."""
    return Decimal(cents).scaleb(-2)


def annualize(monthly: Number) -> Decimal:
    """Yearly amount of a monthly charge."""
    return to_decimal(monthly) * MONTHS_PER_YEAR
