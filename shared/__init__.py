"""Shared types, geometry, and SVG utilities."""

from .types import Point, BBox
from .geometry import (
    GeometryError,
    polar_to_xy, facing_rotation, arc_points,
    bbox_contains, square_bbox,
    fmt_deg,
)
from .svg import make_svg_transform, fmt_points, W, H
