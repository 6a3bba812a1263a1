"""Core algorithms for quickhull.

This module contains:

- Geometry helpers (extreme points, cross product, signed area, convexity)
- Quick hull (divide-and-conquer)
- Gift wrapping (iterative)
- Closest pair (divide-and-conquer)
- PointSet, the cached container tying them together

Key functions:
- quick_hull: Hull by recursive farthest-point splitting
- gift_wrap: Hull by walking around the boundary
- closest_pair: Nearest two points in O(n log n)
- signed_area: Calculate polygon area using shoelace formula

Key classes:
- PointSet: Point collection with cached hulls
"""

from quickhull.core.closest_pair import closest_pair, pair_distance
from quickhull.core.geometry import (
    convex_polygon_contains,
    cross,
    find_extremes,
    is_convex,
    same_vertices,
    signed_area,
)
from quickhull.core.gift_wrap import gift_wrap
from quickhull.core.point_set import PointSet
from quickhull.core.quick_hull import quick_hull

__all__ = [
    # Container
    "PointSet",
    # Hull algorithms
    "closest_pair",
    "convex_polygon_contains",
    "cross",
    "find_extremes",
    "gift_wrap",
    "is_convex",
    "pair_distance",
    "quick_hull",
    "same_vertices",
    "signed_area",
]
