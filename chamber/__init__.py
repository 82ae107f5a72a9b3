"""Council chamber seating engine: hemicycle layout, party filter, SVG chart."""

from .rows import RowSpec, LayoutConfigError, single_arc_row, validate_rows, total_capacity
from .angles import section_spans, section_angles, seat_angles
from .members import Role, Member, RosterError, parse_role, member_role, member_from_record, load_roster, sample_roster
from .layout import (
    SeatKind, SpecialSlot, CursorSlot, PlacedSeat, SpecialSeat, ChamberLayout,
    iter_slots, compute_layout, chamber_bounds,
)
from .party import filter_seats, filter_seats_by, filter_layout, party_counts, party_color
