"""Distribution search service.

Finds the unit-type splits whose annual fees land closest to, but not below,
a target budget. Provides enumeration, filtering and ranking.
"""

from __future__ import annotations

from collections.abc import Iterator

import pandas as pd

from assessments.core.exceptions import NoDistributionsFoundError
from assessments.core.logging import get_logger
from assessments.domain.models.distribution import DistributionCandidate, DistributionParams, UnitTypeCount

log = get_logger(__name__)


class DistributionEnumerator:
    """Generates every (x, y, z) split of the pool using bounded ranges."""

    def __init__(self, total_units: int, min_per_type: int):
        self.total_units = total_units
        self.min_per_type = min_per_type

    def __iter__(self) -> Iterator[UnitTypeCount]:
        """Yield splits in (x, y) ascending order.

        The range bounds already leave room for the other types' minimum, so
        the only check left is on the derived z.
        """
        total, lo = self.total_units, self.min_per_type
        for x in range(lo, total - lo + 1):
            for y in range(lo, total - x - lo + 1):
                z = total - x - y
                if z >= lo:
                    yield UnitTypeCount(x, y, z)

    def count(self) -> int:
        return sum(1 for _ in self)


class DistributionSearch:
    """Service for finding the distributions closest to a target budget."""

    def __init__(self, params: DistributionParams):
        self.params = params
        self.enumerator = DistributionEnumerator(params.total_units, params.min_per_type)

    def find_candidates(self) -> list[DistributionCandidate]:
        """All distributions meeting or exceeding the target, ranked by closeness.

        Ties keep enumeration order since ``sorted`` is stable.
        """
        rates = self.params.annual_rates_cents
        target = self.params.target_total_cents

        candidates = []
        visited = 0
        for counts in self.enumerator:
            visited += 1
            fee_total = counts.fee_total(rates)
            # Only shortfalls are excluded; surpluses of any size stay in.
            if fee_total < target:
                continue
            candidates.append(DistributionCandidate(counts, fee_total, fee_total - target))

        log.debug("candidates_enumerated", visited=visited, kept=len(candidates))
        return sorted(candidates, key=lambda c: c.abs_difference)

    def search(self) -> list[DistributionCandidate]:
        """Top ``num_results`` candidates.

        Raises:
            NoDistributionsFoundError: If no distribution reaches the target.
        """
        p = self.params
        log.info("distribution_search_started",
                 total_units=p.total_units,
                 min_per_type=p.min_per_type,
                 target_cents=p.target_total_cents)

        top = self.find_candidates()[:p.num_results]
        if not top:
            log.info("no_distributions_found", target_cents=p.target_total_cents)
            raise NoDistributionsFoundError(p.target_total_cents, p.total_units, p.min_per_type)

        log.info("distribution_search_completed",
                 returned=len(top),
                 best_difference_cents=top[0].difference_cents)
        return top


def candidates_to_frame(candidates: list[DistributionCandidate], params: DistributionParams) -> pd.DataFrame:
    """Ranked candidates as a DataFrame, one row per rank (1-based)."""
    x_label, y_label, z_label = params.unit_labels
    rows = [
        {
            "Rank": rank,
            x_label: c.counts.x,
            y_label: c.counts.y,
            z_label: c.counts.z,
            "Total Annual": c.fee_total_cents,
            "Difference": c.difference_cents,
            "Error %": c.error_pct(params.target_total_cents),
        }
        for rank, c in enumerate(candidates, start=1)
    ]
    columns = ["Rank", x_label, y_label, z_label, "Total Annual", "Difference", "Error %"]
    return pd.DataFrame(rows, columns=columns)
