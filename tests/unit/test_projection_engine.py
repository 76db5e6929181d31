"""Unit tests for assessments.services.projection_engine module."""

from decimal import Decimal

import pytest

from assessments.domain.models import ProjectionParams, UnitTypeSpec, YearRecord
from assessments.services.projection_engine import (
    ProjectionEngine,
    initial_record,
    next_record,
    project_unit,
    year0_breakdown,
)

GROWTH = Decimal("1.10")


class TestInitialRecord:
    """Tests for initial_record."""

    def test_policies_applied_independently(self):
        r = initial_record(Decimal("400.78"))
        assert r.year == 0
        assert r.exact == Decimal("400.78")
        assert r.rounded == Decimal("401")
        assert r.floored == Decimal("400")

    def test_midpoint_rounds_away_from_zero(self):
        r = initial_record(Decimal("2.5"))
        assert r.rounded == Decimal("3")
        assert r.floored == Decimal("2")
        assert r.exact == Decimal("2.50")


class TestNextRecord:
    """Tests for next_record."""

    def test_year_one_from_321_20(self):
        r = next_record(initial_record(Decimal("321.20")), GROWTH)
        assert r.year == 1
        assert r.exact == Decimal("353.32")
        assert r.rounded == Decimal("353")
        assert r.floored == Decimal("353")

    def test_carry_forward_not_rederived(self):
        """Each policy grows its own previous value."""
        previous = YearRecord(year=2, exact=Decimal("388.65"), rounded=Decimal("388"), floored=Decimal("388"))
        r = next_record(previous, GROWTH)
        assert r.exact == Decimal("427.52")
        assert r.rounded == Decimal("427")
        assert r.floored == Decimal("426")


class TestProjectUnit:
    """Tests for project_unit."""

    @pytest.fixture
    def series(self):
        unit = UnitTypeSpec(name="1BR", count=76, starting_rate=Decimal("321.20"))
        return project_unit(unit, GROWTH, 10)

    def test_covers_years_zero_to_n(self, series):
        assert [r.year for r in series.records] == list(range(11))
        assert series.final_year == 10

    def test_known_years(self, series):
        assert series.at(2).exact == Decimal("388.65")
        assert series.at(2).rounded == Decimal("388")
        assert series.at(3).rounded == Decimal("427")
        assert series.at(4).floored == Decimal("468")

    def test_rounding_error_compounds(self, series):
        """Year 3 rounded fresh from the exact series would give 428."""
        assert series.at(3).rounded != series.at(3).exact.quantize(Decimal("1"))

    def test_rounded_and_floored_are_integers(self, series):
        for r in series.records:
            assert r.rounded == r.rounded.to_integral_value()
            assert r.floored == r.floored.to_integral_value()
            assert r.floored <= r.rounded

    def test_zero_years(self):
        unit = UnitTypeSpec(name="1BR", count=1, starting_rate=Decimal("10"))
        assert len(project_unit(unit, GROWTH, 0).records) == 1


class TestYear0Breakdown:
    """Tests for year0_breakdown."""

    def test_monthly_and_yearly(self):
        unit = UnitTypeSpec(name="1BR", count=76, starting_rate=Decimal("321.20"))
        b = year0_breakdown(unit, initial_record(unit.starting_rate))
        assert b.exact_monthly == Decimal("24411.20")
        assert b.exact_yearly == Decimal("292934.40")
        assert b.rounded_monthly == Decimal("24396")
        assert b.rounded_yearly == Decimal("292752")


class TestProjectionEngine:
    """Tests for ProjectionEngine."""

    def test_totals(self, scenario_projection_params):
        result = ProjectionEngine(scenario_projection_params).run()
        assert result.total_without_rounding == Decimal("1096643.52")
        assert result.total_with_rounding == Decimal("1096224")
        assert result.difference == Decimal("-419.52")

    def test_only_baseline_year_aggregated(self, scenario_projection_params):
        """Totals match year 0 regardless of the horizon."""
        short = scenario_projection_params.model_copy(update={"years": 1})
        assert ProjectionEngine(short).run().total_without_rounding == \
            ProjectionEngine(scenario_projection_params).run().total_without_rounding

    def test_series_per_unit_type(self, scenario_projection_params):
        result = ProjectionEngine(scenario_projection_params).run()
        assert result.unit_names == ["1BR", "2BR", "3BR"]
        two = result.series["2BR"].at(1)
        assert (two.exact, two.rounded, two.floored) == (Decimal("440.86"), Decimal("441"), Decimal("440"))
        three = result.series["3BR"].at(1)
        assert (three.exact, three.rounded, three.floored) == (Decimal("528.53"), Decimal("528"), Decimal("528"))

    def test_breakdowns_in_unit_order(self, scenario_projection_params):
        result = ProjectionEngine(scenario_projection_params).run()
        assert [b.unit_name for b in result.breakdowns] == ["1BR", "2BR", "3BR"]

    def test_deterministic(self, scenario_projection_params):
        a = ProjectionEngine(scenario_projection_params).run()
        b = ProjectionEngine(scenario_projection_params).run()
        assert a.series["1BR"].records == b.series["1BR"].records

    def test_single_unit_type(self):
        params = ProjectionParams(
            unit_types=(UnitTypeSpec(name="Studio", count=10, starting_rate=Decimal("99.995")),),
            years=2,
        )
        result = ProjectionEngine(params).run()
        assert result.series["Studio"].at(0).exact == Decimal("100.00")
        assert result.total_without_rounding == Decimal("12000.00")
        assert result.total_with_rounding == Decimal("12000")
