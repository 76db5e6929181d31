"""Rounding policies for projected monthly fees.

Each policy is applied to its own series only: a rounded value is grown and
re-rounded from the previous *rounded* value, never re-derived from the exact
series ("carried over" / worst case).
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from assessments.core.money import Number, floor_to, round_half_away_from_zero


class RoundingPolicy(str, Enum):
    """How a monthly fee is settled after each yearly increase."""

    EXACT = "exact"
    ROUNDED = "rounded"
    FLOORED = "floored"

    def apply(self, value: Number) -> Decimal:
        """Settle ``value`` under this policy."""
        if self is RoundingPolicy.EXACT:
            return round_half_away_from_zero(value, 2)
        if self is RoundingPolicy.ROUNDED:
            return round_half_away_from_zero(value, 0)
        return floor_to(value, 0)

    def grow(self, previous: Decimal, multiplier: Decimal) -> Decimal:
        """Next year's value from the previous value of the same policy."""
        return self.apply(previous * multiplier)


def settle_all(value: Number) -> dict[RoundingPolicy, Decimal]:
    """Apply every policy to the same starting value, independently."""
    return {policy: policy.apply(value) for policy in RoundingPolicy}
