"""Named constants for the council chamber chart.

Coordinates are logical canvas units (800 x 600, y down). Angles in degrees.
"""
from chamber.rows import RowSpec

# Chamber geometry
CHAMBER_CENTER = (400.0, 450.0)   # focus of every seat arc

# Rows, innermost first: radius, (left, center, right) seats, span, aisles
CHAMBER_ROWS = (
    RowSpec(radius=120.0, sections=(3, 4, 3), span=150.0, aisles=(14.0, 14.0), allocation="count"),
    RowSpec(radius=180.0, sections=(4, 4, 4), span=160.0, aisles=(10.0, 10.0), allocation="count"),
    RowSpec(radius=240.0, sections=(4, 5, 4), span=164.0, aisles=(8.0, 8.0), allocation="count"),
    RowSpec(radius=300.0, sections=(5, 5, 5), span=170.0, aisles=(6.0, 6.0), allocation="count"),
)

# Fixed (left, center, right) share of usable span for the "weight" policy
FIXED_SECTION_WEIGHTS = (0.28, 0.44, 0.28)

# Special seats: fixed positions, off the row grid
DAIS_POSITION = (400.0, 520.0)       # head of body, front of chamber
SECRETARY_POSITION = (400.0, 380.0)  # clerk's table, between dais and row 0
SPECIAL_ROTATION = 180.0             # both face the floor

# Glyphs
SEAT_RADIUS = 12.0
DAIS_WIDTH = 160.0
DAIS_HEIGHT = 50.0
SECRETARY_RX = 50.0
SECRETARY_RY = 30.0

# Party colors
PARTY_COLORS = {
    "democrat": "#3B82F6",
    "republican": "#EF4444",
    "independent": "#10B981",
}
DEFAULT_PARTY_COLOR = "#6B7280"
