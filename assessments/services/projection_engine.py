"""Fee projection engine.

Compounds each unit type's monthly fee year over year under three rounding
policies and totals the year-0 assessments with and without rounding.
"""

from __future__ import annotations

from decimal import Decimal

from assessments.core.logging import get_logger
from assessments.core.money import annualize
from assessments.domain.calculator.rounding import RoundingPolicy, settle_all
from assessments.domain.models.projection import (
    AnnualBreakdown,
    ProjectionParams,
    ProjectionResult,
    ProjectionSeries,
    UnitTypeSpec,
    YearRecord,
)

log = get_logger(__name__)


def initial_record(starting_rate: Decimal) -> YearRecord:
    """Year 0: each policy applied to the starting rate on its own."""
    settled = settle_all(starting_rate)
    return YearRecord(
        year=0,
        exact=settled[RoundingPolicy.EXACT],
        rounded=settled[RoundingPolicy.ROUNDED],
        floored=settled[RoundingPolicy.FLOORED],
    )


def next_record(previous: YearRecord, multiplier: Decimal) -> YearRecord:
    """Grow every policy's value from its own previous value."""
    return YearRecord(
        year=previous.year + 1,
        exact=RoundingPolicy.EXACT.grow(previous.exact, multiplier),
        rounded=RoundingPolicy.ROUNDED.grow(previous.rounded, multiplier),
        floored=RoundingPolicy.FLOORED.grow(previous.floored, multiplier),
    )


def project_unit(unit: UnitTypeSpec, multiplier: Decimal, years: int) -> ProjectionSeries:
    """Build the year 0..``years`` series of one unit type."""
    series = ProjectionSeries(unit=unit, records=[initial_record(unit.starting_rate)])
    for _ in range(years):
        series.records.append(next_record(series.records[-1], multiplier))
    return series


def year0_breakdown(unit: UnitTypeSpec, record: YearRecord) -> AnnualBreakdown:
    """Monthly and yearly totals of one unit type for the baseline year."""
    count = Decimal(unit.count)
    exact_monthly = count * record.exact
    rounded_monthly = count * record.rounded
    return AnnualBreakdown(
        unit_name=unit.name,
        count=unit.count,
        exact_rate=record.exact,
        rounded_rate=record.rounded,
        exact_monthly=exact_monthly,
        rounded_monthly=rounded_monthly,
        exact_yearly=annualize(exact_monthly),
        rounded_yearly=annualize(rounded_monthly),
    )


class ProjectionEngine:
    """Runs the multi-year fee projection for every unit type."""

    def __init__(self, params: ProjectionParams):
        self.params = params

    def run(self) -> ProjectionResult:
        p = self.params
        log.info("projection_started",
                 unit_types=len(p.unit_types),
                 years=p.years,
                 growth_multiplier=str(p.growth_multiplier))

        series: dict[str, ProjectionSeries] = {}
        breakdowns: list[AnnualBreakdown] = []
        total_without_rounding = Decimal(0)
        total_with_rounding = Decimal(0)

        for unit in p.unit_types:
            unit_series = project_unit(unit, p.growth_multiplier, p.years)
            series[unit.name] = unit_series

            # Only the baseline year feeds the totals; later years are
            # reported per unit but never re-aggregated.
            breakdown = year0_breakdown(unit, unit_series.at(0))
            breakdowns.append(breakdown)
            total_without_rounding += breakdown.exact_yearly
            total_with_rounding += breakdown.rounded_yearly

        result = ProjectionResult(
            params=p,
            series=series,
            breakdowns=breakdowns,
            total_without_rounding=total_without_rounding,
            total_with_rounding=total_with_rounding,
        )
        log.info("projection_completed",
                 total_without_rounding=str(total_without_rounding),
                 total_with_rounding=str(total_with_rounding),
                 difference=str(result.difference))
        return result
