"""Shared type definitions for the chamber seating project."""
from typing import NamedTuple

Point = tuple[float, float]

class BBox(NamedTuple):
    """Axis-aligned box in canvas coordinates (y grows downward)."""
    xmin: float; ymin: float; xmax: float; ymax: float
