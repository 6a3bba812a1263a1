"""Geometric helpers shared by the hull algorithms.

This module provides:
- Extreme point search (divide-and-conquer min/max reduction)
- Standard y-up cross product
- Signed polygon area (shoelace formula)
- Convexity and containment checks for hull polygons

All functions are pure and stateless. Unlike Line, the helpers here use the
ordinary y-up convention: positive cross products and areas mean
counter-clockwise.
"""

from collections.abc import Sequence

from quickhull.domain import Point


def find_extremes(points: Sequence[Point]) -> tuple[Point, Point]:
    """Find the leftmost and rightmost points.

    Points are compared by x, then by y, so both results are hull
    vertices even when several points share the extreme x coordinate.

    Args:
        points: Non-empty sequence of points

    Returns:
        Tuple of (leftmost, rightmost); the same point twice for a
        single-point input

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot find extremes of an empty point sequence")
    return _find_extremes(points, 0, len(points) - 1)


def _find_extremes(points: Sequence[Point], start: int, end: int) -> tuple[Point, Point]:
    # base case: one point
    if start == end:
        return points[start], points[start]

    # base case: two points
    if start == end - 1:
        if points[start] < points[end]:
            return points[start], points[end]
        return points[end], points[start]

    mid = (start + end) // 2
    first_left, first_right = _find_extremes(points, start, mid)
    second_left, second_right = _find_extremes(points, mid + 1, end)

    left = first_left if first_left < second_left else second_left
    right = second_right if first_right < second_right else first_right
    return left, right


def cross(o: Point, a: Point, b: Point) -> float:
    """Cross product of segments oa and ob.

    Positive when o -> a -> b turns counter-clockwise.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def signed_area(polygon: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        polygon: Points forming the polygon boundary, not closed

    Returns:
        Signed area. Returns 0.0 for degenerate polygons.

    Examples:
        >>> square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        >>> signed_area(square)
        1.0
        >>> signed_area(square[::-1])
        -1.0
    """
    n = len(polygon)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i].x * polygon[j].y
        area -= polygon[j].x * polygon[i].y

    return area / 2.0


def is_convex(polygon: Sequence[Point]) -> bool:
    """Check that a polygon is strictly convex and counter-clockwise.

    Every turn along the boundary must be a strict left turn, so a polygon
    with collinear consecutive vertices is rejected. Polygons with fewer
    than three vertices are trivially convex.
    """
    n = len(polygon)
    if n < 3:
        return True

    for i in range(n):
        if cross(polygon[i], polygon[(i + 1) % n], polygon[(i + 2) % n]) <= 0:
            return False
    return True


def convex_polygon_contains(polygon: Sequence[Point], point: Point) -> bool:
    """Test whether a point lies inside or on a counter-clockwise convex polygon.

    Args:
        polygon: Convex polygon in counter-clockwise order
        point: The point to test

    Returns:
        True if point is inside or on the boundary, False otherwise
    """
    n = len(polygon)
    if n == 0:
        return False
    if n == 1:
        return polygon[0] == point
    if n == 2:
        a, b = polygon
        if cross(a, b, point) != 0:
            return False
        return (
            min(a.x, b.x) <= point.x <= max(a.x, b.x)
            and min(a.y, b.y) <= point.y <= max(a.y, b.y)
        )

    for i in range(n):
        if cross(polygon[i], polygon[(i + 1) % n], point) < 0:
            return False
    return True


def same_vertices(first: Sequence[Point], second: Sequence[Point]) -> bool:
    """Check that two hulls have the same vertex set, ignoring order."""
    return len(first) == len(second) and set(first) == set(second)
