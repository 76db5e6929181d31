"""Domain calculators."""

from .rounding import RoundingPolicy, settle_all

__all__ = [
    "RoundingPolicy",
    "settle_all",
]
