"""Generate the council chamber seating chart SVG.

Lays out a roster with chamber.layout, filters by party, and draws the
hemicycle: row guide arcs, dais, clerk's table, numbered party-colored seats
and a legend.
"""
import os, argparse, logging
from typing import Callable, NamedTuple
from xml.sax.saxutils import escape

from shared.geometry import arc_points, fmt_deg
from shared.svg import make_svg_transform, fmt_points, W, H
from chamber.rows import RowSpec
from chamber.angles import row_start_angle
from chamber.members import Member, Role, member_role, load_roster_or_sample
from chamber.layout import (
    ChamberLayout, PlacedSeat, SpecialSeat, compute_layout,
)
from chamber.party import ALL_PARTIES, filter_seats, party_counts, party_color, party_key
from chamber.constants import (
    CHAMBER_ROWS, CHAMBER_CENTER,
    SEAT_RADIUS, DAIS_WIDTH, DAIS_HEIGHT, SECRETARY_RX, SECRETARY_RY,
)

# ============================================================
# SVG Helpers
# ============================================================

def seat_glyph(out, seat: PlacedSeat, to_svg):
    """Seat circle with its desk edge turned toward the dais, and the seat number."""
    x, y = to_svg(seat.x, seat.y)
    r = SEAT_RADIUS
    color = party_color(seat.member.party)
    out.append(f'<g transform="translate({x:.1f},{y:.1f})" data-member-id="{seat.member.id}">')
    out.append(f'  <title>{escape(seat.member.name)}</title>')
    out.append(f'  <g transform="rotate({seat.rotation_degrees:.2f})">')
    out.append(f'    <rect x="{-r*0.7:.1f}" y="{r*0.8:.1f}" width="{r*1.4:.1f}" height="{r*0.35:.1f}" fill="#9CA3AF"/>')
    out.append('  </g>')
    out.append(f'  <circle cx="0" cy="0" r="{r:.1f}" fill="{color}" stroke="#fff" stroke-width="2"/>')
    out.append(f'  <text x="0" y="0" text-anchor="middle" dominant-baseline="middle" font-family="Arial"'
               f' font-size="9" font-weight="bold" fill="white">{seat.seat_number}</text>')
    out.append('</g>')

def dais_glyph(out, seat: SpecialSeat, to_svg):
    """Head-of-body dais: rectangle with role and name."""
    x, y = to_svg(seat.x, seat.y)
    out.append(f'<g transform="translate({x:.1f},{y:.1f})" data-member-id="{seat.member.id}">')
    out.append(f'  <rect x="{-DAIS_WIDTH/2:.1f}" y="{-DAIS_HEIGHT/2:.1f}" width="{DAIS_WIDTH:.1f}" height="{DAIS_HEIGHT:.1f}"'
               f' fill="#C8102E" stroke="#991023" stroke-width="3" rx="4"/>')
    out.append('  <text x="0" y="-5" text-anchor="middle" font-family="Arial" font-size="14"'
               ' font-weight="bold" fill="white">Mayor</text>')
    out.append('  <text x="0" y="12" text-anchor="middle" font-family="Arial" font-size="11"'
               f' fill="white">{escape(seat.member.name)}</text>')
    out.append('</g>')

def secretary_glyph(out, seat: SpecialSeat, to_svg):
    """Clerk's table: ellipse with role label."""
    x, y = to_svg(seat.x, seat.y)
    out.append(f'<g transform="translate({x:.1f},{y:.1f})" data-member-id="{seat.member.id}">')
    out.append(f'  <title>{escape(seat.member.name)}</title>')
    out.append(f'  <ellipse cx="0" cy="0" rx="{SECRETARY_RX:.1f}" ry="{SECRETARY_RY:.1f}"'
               ' fill="#10B981" stroke="#059669" stroke-width="2"/>')
    out.append('  <text x="0" y="0" text-anchor="middle" dominant-baseline="middle" font-family="Arial"'
               ' font-size="12" font-weight="bold" fill="white">City Clerk</text>')
    out.append('</g>')

def row_guide(out, row: RowSpec, center, to_svg):
    """Faint arc under a row of seats."""
    start = row_start_angle(row)
    poly = arc_points(center, row.radius, start, start - row.span, 40)
    out.append(f'<polyline points="{fmt_points(poly, to_svg)}" fill="none" stroke="#E5E7EB" stroke-width="1"/>')

def legend(out, counts: dict[str, int], x: float, y: float):
    """Party color key with seat counts, left to right."""
    for i, (party, n) in enumerate(counts.items()):
        cx = x + i * 130
        label = party.title() if party else "Unaffiliated"
        out.append(f'<circle cx="{cx:.1f}" cy="{y:.1f}" r="8" fill="{party_color(party)}"/>')
        out.append(f'<text x="{cx+15:.1f}" y="{y:.1f}" font-family="Arial" font-size="11" fill="#374151"'
                   f' dominant-baseline="middle">{escape(label)} ({n})</text>')

# ============================================================
# Geometry computation
# ============================================================

class ChamberData(NamedTuple):
    layout: ChamberLayout
    seats: list[PlacedSeat]       # after the party filter
    counts: dict[str, int]        # per party, over the filtered seats
    party: str
    rows: tuple
    center: tuple[float, float]
    to_svg: Callable[[float, float], tuple[float, float]]
    title: str


def build_chamber_data(roster: list[Member], rows=CHAMBER_ROWS, center=CHAMBER_CENTER,
                       party=ALL_PARTIES) -> ChamberData:
    """Compute everything the chart needs for *roster*."""
    layout = compute_layout(roster, rows, center)
    seats = filter_seats(layout.seats, party)
    title = "COUNCIL CHAMBER SEATING CHART"
    if party is not None and party_key(party) != ALL_PARTIES:
        title += f" ({party_key(party).upper()})"
    return ChamberData(
        layout=layout, seats=seats, counts=party_counts(seats),
        party=party, rows=tuple(rows), center=center,
        to_svg=make_svg_transform(), title=title,
    )

# ============================================================
# SVG rendering
# ============================================================

def render_chamber_svg(data: ChamberData) -> str:
    """Render the complete chamber chart. Returns SVG string."""
    to_svg = data.to_svg
    out = []
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{W}" height="{H}" viewBox="0 0 {W} {H}">')
    out.append(f'<rect width="{W}" height="{H}" fill="#F9FAFB"/>')
    out.append(f'<text x="{W/2:.1f}" y="30" text-anchor="middle" font-family="Arial" font-size="16"'
               f' font-weight="bold" letter-spacing="2" fill="#111827">{escape(data.title)}</text>')

    for row in data.rows:
        row_guide(out, row, data.center, to_svg)

    for special in data.layout.specials:
        if member_role(special.member) is Role.HEAD_OF_BODY:
            dais_glyph(out, special, to_svg)
        else:
            secretary_glyph(out, special, to_svg)

    for seat in data.seats:
        seat_glyph(out, seat, to_svg)

    legend(out, data.counts, 50, H - 30)
    out.append('</svg>')
    return "\n".join(out)

# ============================================================
# Main entry point
# ============================================================

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate the council chamber seating chart SVG")
    parser.add_argument("roster", nargs="?", default=None,
                        help="Roster JSON file (default: built-in sample roster)")
    parser.add_argument("--party", default=ALL_PARTIES,
                        help='Show only seats of this party (default: "all")')
    parser.add_argument("-o", "--output", default=None,
                        help="Output SVG path (default: chamber.svg beside this script)")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    data = build_chamber_data(load_roster_or_sample(args.roster), party=args.party)
    svg_path = args.output or os.path.join(os.path.dirname(os.path.abspath(__file__)), "chamber.svg")
    with open(svg_path, "w") as f:
        f.write(render_chamber_svg(data))

    lay = data.layout
    print(f"Chamber chart written to {svg_path}")
    for i, row in enumerate(data.rows):
        start = row_start_angle(row)
        print(f"Row {i}: r={row.radius:.0f}  {fmt_deg(start)} .. {fmt_deg(start - row.span)}"
              f"  sections {row.sections}")
    print(f"Seats placed:  {len(lay.seats)} of {lay.capacity}")
    print(f"Empty seats:   {lay.empty_slots}")
    print(f"Dropped:       {len(lay.dropped)}")
    print(f"Shown ({data.party}): {len(data.seats)}")
    for p, n in data.counts.items():
        print(f"  {p or '-':<12s} {n:3d}")
