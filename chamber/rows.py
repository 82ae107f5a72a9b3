"""Row/section configuration: the RowSpec type and its validation.

A row is one concentric arc split into left, center and right sections with an
aisle gap between neighbouring sections. The angular span of each section is
allocated by the row's explicit policy:

* ``"count"``  -- proportional to the section's seat count
* ``"weight"`` -- proportional to the row's fixed ``weights``
"""
from typing import Literal, NamedTuple

from shared.geometry import GeometryError

Allocation = Literal["count", "weight"]
ALLOCATIONS = ("count", "weight")

SECTION_NAMES = ("left", "center", "right")


class LayoutConfigError(GeometryError):
    """Raised for a row table that cannot be laid out."""


class RowSpec(NamedTuple):
    """One concentric arc of seats."""
    radius: float
    sections: tuple[int, int, int]         # (left, center, right) seat counts
    span: float = 180.0                    # total angular span, degrees
    aisles: tuple[float, float] = (0.0, 0.0)  # (left, right) aisle widths, degrees
    allocation: Allocation = "count"
    weights: tuple[float, float, float] | None = None

    @property
    def capacity(self) -> int:
        return sum(self.sections)

    @property
    def usable_span(self) -> float:
        """Span left for seats once both aisles are taken out."""
        return self.span - self.aisles[0] - self.aisles[1]


def single_arc_row(radius: float, seats: int, span: float = 180.0) -> RowSpec:
    """Row with one center section and no aisles."""
    return RowSpec(radius=radius, sections=(0, seats, 0), span=span)


def validate_row(row: RowSpec, index: int = 0) -> None:
    """Raise LayoutConfigError if *row* breaks a RowSpec invariant."""
    where = f"row {index}"
    if len(row.sections) != 3:
        raise LayoutConfigError(f"{where}: expected 3 section counts, got {len(row.sections)}")
    if len(row.aisles) != 2:
        raise LayoutConfigError(f"{where}: expected 2 aisle widths, got {len(row.aisles)}")
    if row.radius <= 0:
        raise LayoutConfigError(f"{where}: radius must be positive, got {row.radius}")
    if any(n < 0 for n in row.sections):
        raise LayoutConfigError(f"{where}: negative seat count in {row.sections}")
    if any(a < 0 for a in row.aisles):
        raise LayoutConfigError(f"{where}: negative aisle width in {row.aisles}")
    if not 0 < row.span < 360:
        raise LayoutConfigError(f"{where}: span must be in (0, 360), got {row.span}")
    if row.allocation not in ALLOCATIONS:
        raise LayoutConfigError(f"{where}: unknown allocation {row.allocation!r}")
    if row.allocation == "weight":
        if row.weights is None or len(row.weights) != 3:
            raise LayoutConfigError(f"{where}: weight allocation needs 3 weights")
        if any(w < 0 for w in row.weights) or sum(row.weights) <= 0:
            raise LayoutConfigError(f"{where}: weights must be non-negative with a positive sum")
        for n, w, name in zip(row.sections, row.weights, SECTION_NAMES):
            if n > 0 and w <= 0:
                raise LayoutConfigError(f"{where}: {name} section has seats but zero weight")
    elif row.weights is not None:
        raise LayoutConfigError(f"{where}: weights given but allocation is {row.allocation!r}")
    if max(row.sections) >= 2 and row.usable_span <= 0:
        raise LayoutConfigError(
            f"{where}: no usable span: span={row.span}, aisles={row.aisles}")
    # Edge seats of neighbouring sections sit exactly one aisle apart; a lone
    # seat sits mid-section, clear of the edge while the usable span is positive
    occupied = [k for k, n in enumerate(row.sections) if n > 0]
    for a, b in zip(occupied, occupied[1:]):
        edge_to_edge = min(row.sections[a], row.sections[b]) >= 2 or row.usable_span <= 0
        if edge_to_edge and sum(row.aisles[a:b]) <= 0:
            raise LayoutConfigError(
                f"{where}: {SECTION_NAMES[a]} and {SECTION_NAMES[b]} sections need an aisle between them")


def validate_rows(rows) -> None:
    """Validate every row, and that radii grow strictly outward."""
    prev = 0.0
    for i, row in enumerate(rows):
        validate_row(row, i)
        if row.radius <= prev:
            raise LayoutConfigError(
                f"row {i}: radius {row.radius} not outside previous row ({prev})")
        prev = row.radius


def total_capacity(rows) -> int:
    """Number of representative seats across all rows."""
    return sum(row.capacity for row in rows)
