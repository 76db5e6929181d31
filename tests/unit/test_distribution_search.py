"""Unit tests for assessments.services.distribution_search module."""

import pytest

from assessments.core.exceptions import NoDistributionsFoundError
from assessments.domain.models import DistributionParams, UnitTypeCount
from assessments.services.distribution_search import (
    DistributionEnumerator,
    DistributionSearch,
    candidates_to_frame,
)


class TestDistributionEnumerator:
    """Tests for DistributionEnumerator."""

    def test_all_splits_respect_constraints(self):
        for counts in DistributionEnumerator(12, 2):
            assert counts.total == 12
            assert min(counts.as_tuple()) >= 2

    def test_count(self):
        """12 units, min 2: same as splitting 6 free units into 3 parts, C(8, 2)."""
        assert DistributionEnumerator(12, 2).count() == 28

    def test_order_is_lexicographic(self):
        splits = [c.as_tuple() for c in DistributionEnumerator(7, 2)]
        assert splits == [(2, 2, 3), (2, 3, 2), (3, 2, 2)]

    def test_infeasible_minimum_yields_nothing(self):
        assert list(DistributionEnumerator(12, 5)) == []

    def test_zero_minimum_includes_empty_types(self):
        splits = list(DistributionEnumerator(1, 0))
        assert UnitTypeCount(0, 0, 1) in splits
        assert UnitTypeCount(1, 0, 0) in splits
        assert len(splits) == 3


class TestDistributionSearch:
    """Tests for DistributionSearch."""

    def test_fee_totals_exact(self, small_distribution_params):
        rates = small_distribution_params.annual_rates_cents
        for c in DistributionSearch(small_distribution_params).find_candidates():
            x, y, z = c.counts.as_tuple()
            assert c.fee_total_cents == x * rates[0] + y * rates[1] + z * rates[2]

    def test_shortfalls_excluded(self, small_distribution_params):
        target = small_distribution_params.target_total_cents
        for c in DistributionSearch(small_distribution_params).find_candidates():
            assert c.fee_total_cents >= target
            assert c.difference_cents == c.fee_total_cents - target

    def test_sorted_by_difference(self, small_distribution_params):
        diffs = [c.difference_cents for c in DistributionSearch(small_distribution_params).search()]
        assert diffs == sorted(diffs)
        assert all(d >= 0 for d in diffs)

    def test_exact_match_ranked_first(self):
        """2*100 + 2*250 + 8*400 = 3900 reached exactly."""
        params = DistributionParams(
            total_units=12, min_per_type=2, annual_rates_cents=(100, 250, 400), target_total_cents=3900,
        )
        top = DistributionSearch(params).search()[0]
        assert top.counts == UnitTypeCount(2, 2, 8)
        assert top.difference_cents == 0

    def test_ties_keep_enumeration_order(self):
        """Equal rates make every split tie; order stays (x, y) ascending."""
        params = DistributionParams(
            total_units=7, min_per_type=2, annual_rates_cents=(100, 100, 100), target_total_cents=700,
        )
        result = [c.counts.as_tuple() for c in DistributionSearch(params).search()]
        assert result == [(2, 2, 3), (2, 3, 2), (3, 2, 2)]

    def test_limited_to_num_results(self, small_distribution_params):
        assert len(DistributionSearch(small_distribution_params).search()) == 5

    def test_fewer_candidates_than_requested(self):
        params = DistributionParams(
            total_units=6, min_per_type=2, annual_rates_cents=(1, 2, 3), target_total_cents=1, num_results=10,
        )
        result = DistributionSearch(params).search()
        assert len(result) == 1
        assert result[0].counts == UnitTypeCount(2, 2, 2)

    def test_no_candidates_raises(self):
        params = DistributionParams(
            total_units=12, min_per_type=2, annual_rates_cents=(1, 1, 1), target_total_cents=1_000_000,
        )
        with pytest.raises(NoDistributionsFoundError) as exc:
            DistributionSearch(params).search()
        assert exc.value.target_cents == 1_000_000

    def test_find_candidates_empty_without_raising(self):
        params = DistributionParams(
            total_units=12, min_per_type=5, annual_rates_cents=(1, 1, 1), target_total_cents=1,
        )
        assert DistributionSearch(params).find_candidates() == []


class TestCandidatesToFrame:
    """Tests for candidates_to_frame."""

    def test_columns_and_ranks(self, small_distribution_params):
        candidates = DistributionSearch(small_distribution_params).search()
        frame = candidates_to_frame(candidates, small_distribution_params)
        assert list(frame.columns) == ["Rank", "1BR", "2BR", "3BR", "Total Annual", "Difference", "Error %"]
        assert list(frame["Rank"]) == [1, 2, 3, 4, 5]
        assert frame.loc[0, "Difference"] == candidates[0].difference_cents

    def test_empty(self, small_distribution_params):
        frame = candidates_to_frame([], small_distribution_params)
        assert frame.empty
        assert "Error %" in frame.columns
