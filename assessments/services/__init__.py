"""Analysis services."""

from .distribution_search import DistributionEnumerator, DistributionSearch
from .projection_engine import ProjectionEngine

__all__ = [
    "DistributionEnumerator",
    "DistributionSearch",
    "ProjectionEngine",
]
