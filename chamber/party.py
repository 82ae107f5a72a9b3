"""Party filter, party names and colors.

Filtering only ever removes seats: coordinates and rotations of the seats it
keeps are the ones computed by the layout, untouched.
"""
from typing import Callable

from chamber.layout import PlacedSeat, ChamberLayout
from chamber.constants import PARTY_COLORS, DEFAULT_PARTY_COLOR

ALL_PARTIES = "all"

_ALIASES = {"democratic": "democrat"}


def party_key(party) -> str:
    """Normalized party name: case-folded, trimmed, aliases merged."""
    key = " ".join(str(party or "").split()).casefold()
    return _ALIASES.get(key, key)


def party_color(party) -> str:
    return PARTY_COLORS.get(party_key(party), DEFAULT_PARTY_COLOR)


def filter_seats_by(seats, predicate: Callable[[str], bool]) -> list[PlacedSeat]:
    """Seats whose member's party satisfies predicate, in layout order."""
    return [s for s in seats if predicate(s.member.party)]


def filter_seats(seats, party=ALL_PARTIES) -> list[PlacedSeat]:
    """Seats held by *party*; None or "all" keeps every seat."""
    if party is None or party_key(party) == ALL_PARTIES:
        return list(seats)
    wanted = party_key(party)
    return filter_seats_by(seats, lambda p: party_key(p) == wanted)


def filter_layout(layout: ChamberLayout, party=ALL_PARTIES) -> ChamberLayout:
    """Layout with grid seats filtered by party. Special seats always stay."""
    return layout._replace(seats=filter_seats(layout.seats, party))


def party_counts(seats) -> dict[str, int]:
    """Seat count per normalized party, most seats first (ties by name)."""
    counts: dict[str, int] = {}
    for s in seats:
        key = party_key(s.member.party)
        counts[key] = counts.get(key, 0) + 1
    return dict(sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])))
