"""Pure geometry functions for arc layouts on a screen canvas.

Angles are in degrees, measured counter-clockwise from the +x axis as seen on
screen. The canvas y axis grows downward, so projection subtracts the sine term.
"""
import math
from .types import Point, BBox

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Polar Projection
# ============================================================
def polar_to_xy(center: Point, r: float, theta: float) -> Point:
    """Canvas point at radius r and angle theta (degrees) around center."""
    rad = theta * math.pi / 180
    return (center[0] + r*math.cos(rad), center[1] - r*math.sin(rad))

def facing_rotation(theta: float) -> float:
    """Glyph rotation (degrees, SVG sense) that turns a marker at angle theta toward center.

    A glyph drawn unrotated faces +y (down the canvas), which is correct at
    theta = 90. SVG rotation is clockwise on screen, hence the sign flip.
    """
    return -(theta - 90)

def arc_points(center: Point, r: float, start: float, end: float, n: int = 60) -> list[Point]:
    """n+1 canvas points along an arc from angle start to end (degrees)."""
    if n < 1:
        raise GeometryError(f"Arc needs at least one segment: n={n}")
    return [polar_to_xy(center, r, start + (end-start)*i/n) for i in range(n+1)]

# ============================================================
# Bounding Boxes
# ============================================================
def square_bbox(center: Point, half: float) -> BBox:
    """Square box of half-width *half* centered on center."""
    return BBox(center[0]-half, center[1]-half, center[0]+half, center[1]+half)

def bbox_contains(box: BBox, p: Point, tol: float = 1e-9) -> bool:
    """True if p lies inside box, boundary included (with tolerance)."""
    return (box.xmin - tol <= p[0] <= box.xmax + tol
            and box.ymin - tol <= p[1] <= box.ymax + tol)

# ============================================================
# Formatting Helpers
# ============================================================
def fmt_deg(theta: float) -> str:
    """Format an angle in degrees, e.g. '124.29°'."""
    return f"{theta:.2f}°"
