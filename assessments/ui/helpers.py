"""Console formatting helpers.

Pure string formatting for money and percentages. Grouping uses Python's
format-spec thousands separator, so output does not depend on the locale.
"""

from __future__ import annotations

from decimal import Decimal

from assessments.core.money import Number, cents_to_dollars, round_half_away_from_zero, to_decimal


def format_currency(cents: int) -> str:
    """Format an amount of cents as dollars.

    Args:
        cents: Signed amount in cents

    Returns:
        Formatted string like "$1,048,374.00" or "-$12.50"
    """
    cents = int(cents)
    sign = "-" if cents < 0 else ""
    return f"{sign}${cents_to_dollars(abs(cents)):,.2f}"


def format_dollars(cents: int) -> str:
    """Whole dollars of an amount of cents, grouped, without sign or symbol."""
    return f"{abs(int(cents)) // 100:,}"


def format_amount(value: Number) -> str:
    """Format a Decimal with thousands separators and two decimals.

    Example: 1234567.8 -> "1,234,567.80"
    """
    return f"{round_half_away_from_zero(value, 2):,.2f}"


def format_plain(value: Number, decimals: int = 2) -> str:
    """Fixed decimals, no grouping."""
    return f"{round_half_away_from_zero(value, decimals):.{decimals}f}"


def format_pct(value: Decimal, decimals: int = 3) -> str:
    """Format a number as percentage.

    Args:
        value: Value to format (as percentage, not ratio)
        decimals: Number of decimal places

    Returns:
        Formatted string like "0.012%"
    """
    return f"{round_half_away_from_zero(to_decimal(value), decimals):.{decimals}f}%"
