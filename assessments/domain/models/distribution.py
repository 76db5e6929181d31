"""Unit distribution data models.

A distribution is one way of splitting the unit pool across the three unit
types. Amounts are integer cents throughout.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from assessments.core.exceptions import InvalidParameterError


class DistributionParams(BaseModel):
    """Inputs of the distribution search.

    Rates are annual fees per unit in cents, in the same order as ``unit_labels``.
    """

    total_units: int = Field(..., ge=0, description="Units in the pool")
    min_per_type: int = Field(default=0, ge=0, description="Minimum units of each type")
    annual_rates_cents: tuple[int, int, int] = Field(..., description="Annual fee per unit, per type (cents)")
    target_total_cents: int = Field(..., gt=0, description="Budget to match (cents)")
    num_results: int = Field(default=10, ge=1, description="How many candidates to report")
    unit_labels: tuple[str, str, str] = Field(default=("1BR", "2BR", "3BR"), description="Unit type names")

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def _check_rates(self) -> DistributionParams:
        if len(set(self.unit_labels)) != len(self.unit_labels):
            raise InvalidParameterError("unit_labels", list(self.unit_labels), "unit labels must be unique")
        for label, rate in zip(self.unit_labels, self.annual_rates_cents):
            if rate < 0:
                raise InvalidParameterError(f"annual_rates_cents[{label}]", rate, "must be non-negative")
        return self


@dataclass(frozen=True)
class UnitTypeCount:
    """Counts of each unit type (x, y, z)."""

    x: int
    y: int
    z: int

    @property
    def total(self) -> int:
        return self.x + self.y + self.z

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def fee_total(self, rates: tuple[int, int, int]) -> int:
        """Annual fees of this distribution, in cents."""
        return self.x * rates[0] + self.y * rates[1] + self.z * rates[2]


@dataclass(frozen=True)
class DistributionCandidate:
    """A feasible distribution with its fee total and distance to the target."""

    counts: UnitTypeCount
    fee_total_cents: int
    difference_cents: int

    @property
    def abs_difference(self) -> int:
        return abs(self.difference_cents)

    def error_pct(self, target_total_cents: int) -> Decimal:
        """Difference as a percentage of the target (unrounded)."""
        return Decimal(self.difference_cents) / Decimal(target_total_cents) * 100
