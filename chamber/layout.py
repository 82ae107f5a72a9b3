"""Chamber seating layout: turn an ordered roster into placed seats.

The chamber is enumerated as a sequence of slots. A slot is either

* a ``SpecialSlot`` -- a fixed position reserved for one role (the dais,
  the clerk's table), filled by looking the role up in the roster, or
* a ``CursorSlot`` -- one seat of the row/section grid, filled from the
  representative roster by a cursor that advances once per slot.

``compute_layout`` walks the slots in order and applies one assignment step to
each, producing a ``PlacedSeat``, a ``SpecialSeat``, or nothing (empty slot).
The whole computation is pure: same roster order and configuration, same output.
"""
import logging
from enum import Enum
from typing import Iterator, NamedTuple

from shared.types import Point, BBox
from shared.geometry import polar_to_xy, facing_rotation, square_bbox
from chamber.rows import RowSpec, validate_rows, total_capacity
from chamber.angles import section_angles
from chamber.members import Member, Role, member_role
from chamber.constants import (
    CHAMBER_ROWS, CHAMBER_CENTER,
    DAIS_POSITION, SECRETARY_POSITION, SPECIAL_ROTATION,
)

logger = logging.getLogger(__name__)


class SeatKind(Enum):
    SPECIAL = "special"
    CURSOR = "cursor"


class SpecialSlot(NamedTuple):
    """Fixed seat reserved for a role."""
    role: Role
    position: Point
    rotation: float = SPECIAL_ROTATION
    kind: SeatKind = SeatKind.SPECIAL


class CursorSlot(NamedTuple):
    """One seat of the row/section grid."""
    row_index: int
    section_index: int
    seat_index_in_row: int
    seat_number: int     # 1-based, chamber-wide, in visiting order
    angle: float         # degrees
    radius: float
    kind: SeatKind = SeatKind.CURSOR


Slot = SpecialSlot | CursorSlot


class PlacedSeat(NamedTuple):
    """Representative seat with its occupant."""
    x: float
    y: float
    rotation_degrees: float
    row_index: int
    section_index: int
    seat_index_in_row: int
    seat_number: int
    member: Member


class SpecialSeat(NamedTuple):
    """Seat at a fixed position outside the grid."""
    x: float
    y: float
    rotation_degrees: float
    member: Member


class ChamberLayout(NamedTuple):
    """Result of one layout pass."""
    seats: list[PlacedSeat]
    specials: list[SpecialSeat]
    capacity: int               # representative slots in the row table
    dropped: list[Member]       # representatives beyond capacity, roster order
    empty_slots: int            # grid slots left without a member


DEFAULT_SPECIAL_SLOTS = (
    SpecialSlot(Role.HEAD_OF_BODY, DAIS_POSITION),
    SpecialSlot(Role.SECRETARY, SECRETARY_POSITION),
)

# ============================================================
# Slot enumeration
# ============================================================

def row_slots(row: RowSpec, row_index: int, first_number: int) -> list[CursorSlot]:
    """Grid slots of one row, left section first, seat numbers from first_number."""
    slots = []
    k = 0
    for section_index, angles in enumerate(section_angles(row)):
        for angle in angles:
            slots.append(CursorSlot(row_index, section_index, k,
                                    first_number + k, angle, row.radius))
            k += 1
    return slots


def iter_slots(rows, specials=DEFAULT_SPECIAL_SLOTS) -> Iterator[Slot]:
    """Every slot of the chamber: special slots, then rows -> sections -> seats."""
    yield from specials
    number = 1
    for row_index, row in enumerate(rows):
        slots = row_slots(row, row_index, number)
        number += len(slots)
        yield from slots

# ============================================================
# Assignment
# ============================================================

def is_representative(member: Member) -> bool:
    return member_role(member) is Role.REPRESENTATIVE


def representatives(roster) -> list[Member]:
    """Members who take grid seats, in roster order."""
    return [m for m in roster if is_representative(m)]


def find_by_role(roster, role: Role) -> Member | None:
    """First member holding *role*, or None."""
    for m in roster:
        if member_role(m) is role:
            return m
    return None


def place_special(slot: SpecialSlot, roster) -> SpecialSeat | None:
    """Special seat for the slot's role, or None if nobody holds it."""
    member = find_by_role(roster, slot.role)
    if member is None:
        logger.warning("No %s in roster; seat left off the chart", slot.role.value)
        return None
    return SpecialSeat(slot.position[0], slot.position[1], slot.rotation, member)


def place_cursor(slot: CursorSlot, reps: list[Member], cursor: int,
                 center: Point) -> tuple[PlacedSeat | None, int]:
    """Fill a grid slot from reps[cursor]. Returns (seat or None, next cursor).

    The cursor advances by one whether or not a member was available.
    """
    if cursor >= len(reps):
        return None, cursor + 1
    x, y = polar_to_xy(center, slot.radius, slot.angle)
    seat = PlacedSeat(x, y, facing_rotation(slot.angle),
                      slot.row_index, slot.section_index, slot.seat_index_in_row,
                      slot.seat_number, reps[cursor])
    return seat, cursor + 1


def compute_layout(roster, rows=CHAMBER_ROWS, center: Point = CHAMBER_CENTER,
                   specials=DEFAULT_SPECIAL_SLOTS) -> ChamberLayout:
    """Lay out *roster* on the chamber described by *rows*.

    Raises LayoutConfigError for a malformed row table. Roster problems never
    raise: short rosters leave empty slots, long rosters drop the overflow,
    missing special roles leave their seat out.
    """
    rows = tuple(rows)
    validate_rows(rows)
    reps = representatives(roster)
    seats: list[PlacedSeat] = []
    placed_specials: list[SpecialSeat] = []
    cursor = 0
    visited = 0
    for slot in iter_slots(rows, specials):
        if slot.kind is SeatKind.SPECIAL:
            special = place_special(slot, roster)
            if special is not None:
                placed_specials.append(special)
            continue
        visited += 1
        seat, cursor = place_cursor(slot, reps, cursor, center)
        if seat is not None:
            seats.append(seat)

    capacity = total_capacity(rows)
    dropped = reps[capacity:]
    empty = visited - len(seats)
    logger.debug("Layout: %d slots, %d seated, %d empty", visited, len(seats), empty)
    if dropped:
        logger.info("%d representatives exceed chamber capacity %d", len(dropped), capacity)
    return ChamberLayout(seats, placed_specials, capacity, dropped, empty)


def chamber_bounds(rows=CHAMBER_ROWS, center: Point = CHAMBER_CENTER) -> BBox:
    """Box every grid seat falls in: center +/- the outermost radius."""
    max_r = max((row.radius for row in rows), default=0.0)
    return square_bbox(center, max_r)
