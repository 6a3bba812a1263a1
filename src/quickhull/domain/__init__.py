"""Domain models for quickhull.

This module contains the value types shared by the hull algorithms. All
models are immutable (frozen dataclasses) and independent of any UI or
file format.

Key classes:
- Point: A 2D point with integer or floating coordinates
- Orientation: Side of a directed line a point lies on
- Line: Oriented segment with precomputed line equation
"""

from quickhull.domain.line import Line
from quickhull.domain.point import Orientation, Point

__all__: list[str] = [
    # Enums
    "Orientation",
    # Core types
    "Point",
    "Line",
]
