"""Fee projection data models.

Monthly fees are Decimals. Parameters are validated pydantic models; the
records produced by a projection run are plain frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

import pandas as pd
from pydantic import BaseModel, Field, computed_field, model_validator

from assessments.core.exceptions import InvalidParameterError


class UnitTypeSpec(BaseModel):
    """One unit type: how many units there are and what they pay monthly."""

    name: str = Field(..., min_length=1, description="Unit type label, e.g. 1BR")
    count: int = Field(..., ge=0, description="Number of units of this type")
    starting_rate: Decimal = Field(..., ge=0, description="Current monthly fee per unit")

    model_config = {
        "frozen": True,
    }


class ProjectionParams(BaseModel):
    """Inputs of the fee projection."""

    unit_types: tuple[UnitTypeSpec, ...] = Field(..., description="Unit types, in report order")
    growth_multiplier: Decimal = Field(default=Decimal("1.10"), gt=0, description="Yearly fee multiplier")
    years: int = Field(default=10, ge=0, description="Projection horizon in years")

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def _check_unit_types(self) -> ProjectionParams:
        if not self.unit_types:
            raise InvalidParameterError("unit_types", self.unit_types, "at least one unit type is required")
        names = [u.name for u in self.unit_types]
        if len(set(names)) != len(names):
            raise InvalidParameterError("unit_types", names, "unit type names must be unique")
        return self

    @computed_field
    @property
    def total_units(self) -> int:
        return sum(u.count for u in self.unit_types)


class PublishedBudget(BaseModel):
    """Annual budget figures as published, with and without rounding."""

    year: int
    without_rounding: Decimal
    with_rounding: Decimal

    model_config = {
        "frozen": True,
    }

    @computed_field
    @property
    def difference(self) -> Decimal:
        return self.with_rounding - self.without_rounding


@dataclass(frozen=True)
class YearRecord:
    """Monthly fee of one unit type for one year, under each rounding policy."""

    year: int
    exact: Decimal
    rounded: Decimal
    floored: Decimal

    def to_dict(self) -> dict[str, object]:
        return {
            "Year": self.year,
            "Exact": self.exact,
            "Rounded": self.rounded,
            "Floored": self.floored,
        }


@dataclass
class ProjectionSeries:
    """Year 0..N records of one unit type."""

    unit: UnitTypeSpec
    records: list[YearRecord] = field(default_factory=list)

    @property
    def final_year(self) -> int:
        return len(self.records) - 1

    def at(self, year: int) -> YearRecord:
        return self.records[year]

    def to_frame(self) -> pd.DataFrame:
        """Series as a DataFrame indexed by year."""
        frame = pd.DataFrame([r.to_dict() for r in self.records], columns=["Year", "Exact", "Rounded", "Floored"])
        return frame.set_index("Year")


@dataclass(frozen=True)
class AnnualBreakdown:
    """Year-0 monthly and yearly totals of one unit type, exact vs rounded."""

    unit_name: str
    count: int
    exact_rate: Decimal
    rounded_rate: Decimal
    exact_monthly: Decimal
    rounded_monthly: Decimal
    exact_yearly: Decimal
    rounded_yearly: Decimal


@dataclass
class ProjectionResult:
    """Everything a projection run produces."""

    params: ProjectionParams
    series: dict[str, ProjectionSeries]
    breakdowns: list[AnnualBreakdown]
    total_without_rounding: Decimal
    total_with_rounding: Decimal

    @property
    def difference(self) -> Decimal:
        """Total with rounding minus total without rounding."""
        return self.total_with_rounding - self.total_without_rounding

    @property
    def unit_names(self) -> list[str]:
        return list(self.series)
