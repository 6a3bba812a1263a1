"""Iterative convex hull by gift wrapping.

Starting from the rightmost point, the walk repeatedly selects the next
hull vertex by scanning every point against the edge from the current
vertex to a provisional candidate. Any point on the LEFT of that edge
(see Line) replaces the candidate, so the surviving candidate has every
other point on its counter-clockwise side. Collinear points only replace
the candidate when they are farther away, which keeps intermediate
collinear points off the hull.

The walk stops as soon as it reaches a vertex it has already emitted.
Running time is O(n*h) for h hull vertices.
"""

import logging
from collections.abc import Sequence

from quickhull.core.geometry import find_extremes
from quickhull.domain import Line, Point

logger = logging.getLogger(__name__)


def gift_wrap(points: Sequence[Point]) -> list[Point]:
    """Compute the convex hull of a set of distinct points.

    Args:
        points: Distinct input points, in any order

    Returns:
        Hull vertices in counter-clockwise order (y-up frame), starting at
        the rightmost point, without repeating the first vertex
    """
    if not points:
        return []

    _, start = find_extremes(points)
    hull = [start]
    if len(points) < 2:
        return hull

    emitted = {start}
    current = start
    while True:
        candidate = next_vertex(current, points)
        if candidate in emitted:
            break
        hull.append(candidate)
        emitted.add(candidate)
        current = candidate

    logger.debug("Gift wrapping from %s found %d vertices", start, len(hull))
    return hull


def next_vertex(current: Point, points: Sequence[Point]) -> Point:
    """Select the hull vertex that follows ``current``.

    Args:
        current: A hull vertex
        points: All input points, containing at least one other point

    Returns:
        The next hull vertex in counter-clockwise order
    """
    candidate = points[1] if current == points[0] else points[0]
    edge = Line(current, candidate)

    for point in points:
        if point == current or point == candidate:
            continue
        side = edge.plug_in(point)
        if side > 0 or (side == 0 and _is_farther(current, point, candidate)):
            candidate = point
            edge = Line(current, candidate)

    return candidate


def _is_farther(origin: Point, point: Point, other: Point) -> bool:
    return Line(origin, point).distance_squared() > Line(origin, other).distance_squared()
