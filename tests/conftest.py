"""Pytest fixtures for assessments tests."""

import os
import sys
from decimal import Decimal

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from assessments.domain.models import DistributionParams, ProjectionParams, PublishedBudget, UnitTypeSpec  # noqa: E402


@pytest.fixture
def small_distribution_params():
    """Reduced-scale search: 12 units, at least 2 of each type."""
    return DistributionParams(
        total_units=12,
        min_per_type=2,
        annual_rates_cents=(100_00, 250_00, 400_00),
        target_total_cents=2_900_00,
        num_results=5,
    )


@pytest.fixture
def scenario_distribution_params():
    """Reference scenario of the 228-unit association."""
    return DistributionParams(
        total_units=228,
        min_per_type=40,
        annual_rates_cents=(385440, 480936, 576576),
        target_total_cents=104837400,
        num_results=10,
    )


@pytest.fixture
def scenario_projection_params():
    """Three unit types, 76 units each, 10% per year for 10 years."""
    return ProjectionParams(
        unit_types=(
            UnitTypeSpec(name="1BR", count=76, starting_rate=Decimal("321.20")),
            UnitTypeSpec(name="2BR", count=76, starting_rate=Decimal("400.78")),
            UnitTypeSpec(name="3BR", count=76, starting_rate=Decimal("480.48")),
        ),
        growth_multiplier=Decimal("1.10"),
        years=10,
    )


@pytest.fixture
def sample_budget():
    return PublishedBudget(year=2026, without_rounding=Decimal("1048374"), with_rounding=Decimal("1050672"))
