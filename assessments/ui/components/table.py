"""Box-drawn console tables.

Renders a DataFrame of already formatted cells with rounded corners. Cells may
carry ANSI color codes; widths are measured on the visible text only.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum

import pandas as pd

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

# Rounded style: corners, junctions, lines
TOP = ("╭", "┬", "╮")
MIDDLE = ("├", "┼", "┤")
BOTTOM = ("╰", "┴", "╯")
HORIZONTAL = "─"
VERTICAL = "│"


class Color(str, Enum):
    """ANSI foreground colors used to tell rounding policies apart."""

    YELLOW = "33"
    PURPLE = "35"

    def paint(self, text: str) -> str:
        return f"\x1b[{self.value}m{text}\x1b[39m"


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def visible_width(text: str) -> int:
    """Length of ``text`` once color codes are stripped."""
    return len(ANSI_ESCAPE.sub("", text))


def _pad(text: str, width: int, align: Align) -> str:
    gap = width - visible_width(text)
    if align is Align.LEFT:
        return text + " " * gap
    if align is Align.RIGHT:
        return " " * gap + text
    left = gap // 2
    return " " * left + text + " " * (gap - left)


def _rule(widths: list[int], parts: tuple[str, str, str]) -> str:
    left, junction, right = parts
    return left + junction.join(HORIZONTAL * (w + 2) for w in widths) + right


def _row(cells: list[str], widths: list[int], align: Align) -> str:
    padded = (f" {_pad(c, w, align)} " for c, w in zip(cells, widths))
    return VERTICAL + VERTICAL.join(padded) + VERTICAL


def render_table(
    frame: pd.DataFrame,
    align: Align = Align.CENTER,
    styles: dict[int, Callable[[str], str]] | None = None,
) -> str:
    """Render ``frame`` as a rounded box table.

    Columns are addressed by position so duplicate headers are allowed.

    Args:
        frame: Cells to render; values are converted with ``str``
        align: Alignment applied to every cell, header included
        styles: Optional per-column-position transform applied to body cells

    Returns:
        The table as a single string, without trailing newline
    """
    styles = styles or {}
    headers = [str(c) for c in frame.columns]
    body = [
        [styles[i](str(v)) if i in styles else str(v) for i, v in enumerate(row)]
        for row in frame.itertuples(index=False, name=None)
    ]

    widths = [visible_width(h) for h in headers]
    for row in body:
        widths = [max(w, visible_width(c)) for w, c in zip(widths, row)]

    lines = [_rule(widths, TOP), _row(headers, widths, align)]
    if body:
        lines.append(_rule(widths, MIDDLE))
        lines.extend(_row(row, widths, align) for row in body)
    lines.append(_rule(widths, BOTTOM))
    return "\n".join(lines)
