"""Angle distribution: per-seat angles for one row.

Rows are centered on 90 degrees (straight up from the chamber center) and laid
out left to right, so angles decrease from ``90 + span/2`` to ``90 - span/2``.
Every row winds the same way, which keeps left-section seats radially aligned.
"""
import numpy as np

from chamber.rows import RowSpec


def row_start_angle(row: RowSpec) -> float:
    """Angle of the leftmost edge of the row."""
    return 90.0 + row.span / 2


def section_spans(row: RowSpec) -> list[float]:
    """Angular span of the (left, center, right) sections, degrees.

    Empty rows get all-zero spans.
    """
    if row.allocation == "weight":
        shares = row.weights
    else:
        shares = row.sections
    total = sum(shares)
    if total <= 0:
        return [0.0, 0.0, 0.0]
    usable = row.usable_span
    return [usable * s / total for s in shares]


def section_starts(row: RowSpec) -> list[float]:
    """Leftmost angle of each section, walking left -> aisle -> center -> aisle -> right."""
    spans = section_spans(row)
    a = row_start_angle(row)
    starts = []
    for k, span in enumerate(spans):
        starts.append(a)
        a -= span
        if k < 2:
            a -= row.aisles[k]
    return starts


def seat_angles(start: float, span: float, n: int) -> list[float]:
    """Angles of n seats spread over a section beginning at start.

    Seats sit on both section edges; a lone seat sits at the section midpoint.
    """
    if n <= 0:
        return []
    if n == 1:
        return [start - span / 2]
    return np.linspace(start, start - span, n).tolist()


def section_angles(row: RowSpec) -> list[list[float]]:
    """Seat angles for each of the row's three sections, in visiting order."""
    return [seat_angles(start, span, n)
            for start, span, n in zip(section_starts(row), section_spans(row), row.sections)]
