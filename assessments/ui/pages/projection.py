"""Fee projection report.

Run with: python -m assessments.ui.pages.projection
"""

from __future__ import annotations

import sys
from decimal import Decimal

import pandas as pd

from assessments.domain.models.projection import ProjectionResult, PublishedBudget
from assessments.ui.components.table import Align, Color, render_table
from assessments.ui.helpers import format_amount, format_plain

SEPARATOR = "=" * 27


def _right_aligned(labels: list[str], values: list[str]) -> list[str]:
    width = max(len(v) for v in values)
    return [f"{label} {value:>{width}}" for label, value in zip(labels, values)]


def budget_lines(budget: PublishedBudget) -> list[str]:
    """Published budget figures and the difference rounding made."""
    lines = [f"{budget.year}: UNIT assessment figures:", "Table Assumptions:"]
    lines += _right_aligned(
        ["  - without rounding:", "  -    with rounding:", "  -       DIFFERENCE:"],
        [str(budget.without_rounding), str(budget.with_rounding), str(budget.difference)],
    )
    return lines


def breakdown_lines(result: ProjectionResult) -> list[str]:
    """Year-0 monthly and yearly computation of each unit type, both regimes."""
    lines = []
    for b in result.breakdowns:
        lines.append(
            f"without rounding: {b.unit_name}: {b.count} * {format_plain(b.exact_rate)} = "
            f"{format_plain(b.exact_monthly)} * 12 months = {format_plain(b.exact_yearly)}"
        )
        lines.append(
            f"   with rounding: {b.unit_name}: {b.count} * {format_plain(b.rounded_rate)} = "
            f"{format_plain(b.rounded_monthly)} * 12 months = {format_plain(b.rounded_yearly)}"
        )
    return lines


def totals_lines(result: ProjectionResult) -> list[str]:
    """Grand totals with and without rounding, right aligned on one column."""
    return _right_aligned(
        ["Total without rounding: ", "   Total with rounding: ", "            DIFFERENCE: "],
        [
            format_amount(result.total_without_rounding),
            format_amount(result.total_with_rounding),
            format_amount(result.difference),
        ],
    )


def growth_pct(multiplier: Decimal) -> str:
    """1.10 -> "10"."""
    return f"{((multiplier - 1) * 100).normalize():f}"


def projection_frame(result: ProjectionResult) -> pd.DataFrame:
    """Years 1..N side by side for every unit type, formatted to 2 decimals."""
    blocks = []
    for name, series in result.series.items():
        frame = series.to_frame().loc[1:]
        blocks.append(pd.DataFrame({
            "Yr": frame.index,
            name: frame["Exact"].map(format_plain),
            f"{name} ROUND": frame["Rounded"].map(format_plain),
            f"{name} DOWN": frame["Floored"].map(format_plain),
        }, index=frame.index))
    return pd.concat(blocks, axis=1).reset_index(drop=True)


def render_projection_report(result: ProjectionResult, budget: PublishedBudget, color: bool = False) -> str:
    """Full projection report: assumptions, year-0 breakdown, totals, table."""
    lines = budget_lines(budget)
    lines.append("Assumption: Same # of each type of unit (because we can't find these numbers).")
    lines += breakdown_lines(result)
    lines += totals_lines(result)
    lines += [
        SEPARATOR,
        "Table Assumptions:",
        f"  - Each unit type increases by {growth_pct(result.params.growth_multiplier)}% each year.",
        '  - Rounded values are "carried over" to the next year (worst case scenario).',
        "  - (in other words, INCREASES GO DOWN THE COLUMNS, NOT ACROSS)",
    ]

    styles = {}
    if color:
        for offset in range(0, 4 * len(result.unit_names), 4):
            styles[offset + 2] = Color.YELLOW.paint
            styles[offset + 3] = Color.PURPLE.paint

    lines.append(render_table(projection_frame(result), align=Align.RIGHT, styles=styles))
    return "\n".join(lines)


if __name__ == "__main__":
    from assessments.ui.app_controller import project_main

    sys.exit(project_main())
