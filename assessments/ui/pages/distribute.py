"""Distribution search report.

Run with: python -m assessments.ui.pages.distribute
"""

from __future__ import annotations

import sys

from assessments.domain.models.distribution import DistributionCandidate, DistributionParams
from assessments.services.distribution_search import candidates_to_frame
from assessments.ui.components.table import Align, render_table
from assessments.ui.helpers import format_currency, format_dollars, format_pct


def render_distribution_report(candidates: list[DistributionCandidate], params: DistributionParams) -> str:
    """Header line and ranked table for the top candidates."""
    header = (
        f"Top {params.num_results} unit distributions closest to target "
        f"(${format_dollars(params.target_total_cents)}):"
    )

    frame = candidates_to_frame(candidates, params)
    frame["Total Annual"] = frame["Total Annual"].map(format_currency)
    frame["Difference"] = frame["Difference"].map(format_currency)
    frame["Error %"] = frame["Error %"].map(format_pct)

    return "\n".join([header, "", render_table(frame, align=Align.CENTER)])


if __name__ == "__main__":
    from assessments.ui.app_controller import distribute_main

    sys.exit(distribute_main())
