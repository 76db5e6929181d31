"""Data models for assessments."""

from .distribution import DistributionCandidate, DistributionParams, UnitTypeCount
from .projection import (
    AnnualBreakdown,
    ProjectionParams,
    ProjectionResult,
    ProjectionSeries,
    PublishedBudget,
    UnitTypeSpec,
    YearRecord,
)

__all__ = [
    "DistributionParams",
    "UnitTypeCount",
    "DistributionCandidate",
    "UnitTypeSpec",
    "ProjectionParams",
    "PublishedBudget",
    "YearRecord",
    "ProjectionSeries",
    "AnnualBreakdown",
    "ProjectionResult",
]
