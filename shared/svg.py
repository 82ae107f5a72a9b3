"""SVG transform factory and page constants."""
from typing import Callable
from .types import Point

# Logical chamber canvas. All layout coordinates are expressed in this space.
W, H = 800, 600


def make_svg_transform(scale: float = 1.0, dx: float = 0.0, dy: float = 0.0) -> Callable[[float, float], tuple[float, float]]:
    """Create to_svg closure mapping logical canvas coordinates onto the page."""
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (dx + x * scale, dy + y * scale)
    return to_svg


def fmt_points(points: list[Point], to_svg: Callable[[float, float], tuple[float, float]]) -> str:
    """SVG points attribute for a polyline or polygon."""
    return " ".join(f"{to_svg(*p)[0]:.1f},{to_svg(*p)[1]:.1f}" for p in points)
