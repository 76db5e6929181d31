"""Core exceptions, settings, logging and money arithmetic."""

from .exceptions import (
    AssessmentError,
    InvalidParameterError,
    NoDistributionsFoundError,
    SearchError,
)
from .money import (
    annualize,
    cents_to_dollars,
    floor_to,
    round_half_away_from_zero,
    to_decimal,
)

__all__ = [
    "round_half_away_from_zero",
    "floor_to",
    "to_decimal",
    "cents_to_dollars",
    "annualize",
    # Exceptions
    "AssessmentError",
    "InvalidParameterError",
    "SearchError",
    "NoDistributionsFoundError",
]
