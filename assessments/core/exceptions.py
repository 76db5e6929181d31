"""Custom exceptions for assessments.

Domain-specific exception types for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any


class AssessmentError(Exception):
    """Base exception for all assessments errors."""
    pass


# --- Parameter Errors ---

class InvalidParameterError(AssessmentError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Search Errors ---

class SearchError(AssessmentError):
    """General distribution search error."""
    pass


class NoDistributionsFoundError(SearchError):
    """No unit distribution meets the target under the minimum-per-type rule."""

    def __init__(self, target_cents: int, total_units: int, min_per_type: int):
        self.target_cents = target_cents
        self.total_units = total_units
        self.min_per_type = min_per_type
        super().__init__(
            f"No distribution of {total_units} units (min {min_per_type} per type) "
            f"reaches {target_cents} cents"
        )
