"""Application controller - orchestrates services and console output.

Each ``*_main`` function is a console entry point: it runs one analysis on the
reference scenario, prints the report and returns the process exit status.
"""

from __future__ import annotations

import sys
from typing import TextIO

from assessments.config import BUDGET_2026, DEFAULT_DISTRIBUTION, DEFAULT_PROJECTION
from assessments.core.exceptions import NoDistributionsFoundError
from assessments.core.logging import get_logger
from assessments.core.settings import get_settings
from assessments.domain.models import DistributionParams, ProjectionParams, PublishedBudget
from assessments.services.distribution_search import DistributionSearch
from assessments.services.projection_engine import ProjectionEngine
from assessments.ui.pages.distribute import render_distribution_report
from assessments.ui.pages.projection import render_projection_report

log = get_logger(__name__)


def use_color(stream: TextIO) -> bool:
    """Colors only when enabled in settings and writing to a terminal."""
    isatty = getattr(stream, "isatty", None)
    return get_settings().color_output and bool(isatty and isatty())


def run_distribution(
    params: DistributionParams = DEFAULT_DISTRIBUTION,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Search distributions and print the ranked report.

    Returns:
        0 on success, 1 when no distribution reaches the target
    """
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        candidates = DistributionSearch(params).search()
    except NoDistributionsFoundError as e:
        log.info("distribution_search_failed", error=str(e))
        print("No solutions found.", file=err)
        return 1

    print(render_distribution_report(candidates, params), file=out)
    return 0


def run_projection_report(
    params: ProjectionParams = DEFAULT_PROJECTION,
    budget: PublishedBudget = BUDGET_2026,
    out: TextIO | None = None,
) -> int:
    """Project fees and print the report."""
    out = out or sys.stdout
    result = ProjectionEngine(params).run()
    print(render_projection_report(result, budget, color=use_color(out)), file=out)
    return 0


def distribute_main() -> int:
    """Entry point of ``assessments-distribute``."""
    return run_distribution()


def project_main() -> int:
    """Entry point of ``assessments-project``."""
    return run_projection_report()
