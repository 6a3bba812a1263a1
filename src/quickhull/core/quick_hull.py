"""Divide-and-conquer convex hull (quick hull).

The hull is built from two chains. The line from the leftmost to the
rightmost point splits the input in two; each side is traced by the same
recursive routine, which repeatedly picks the point farthest from the
current edge and recurses on the two new edges. Points that end up on or
behind an edge are interior and dropped.

Each recursive call works on a freshly partitioned list of candidates, so
no list is mutated while it is being iterated.

Expected running time is O(n log n); adversarial inputs degrade to O(n^2).
"""

import logging
from collections.abc import Sequence

from quickhull.core.geometry import find_extremes
from quickhull.domain import Line, Point

logger = logging.getLogger(__name__)


def quick_hull(points: Sequence[Point]) -> list[Point]:
    """Compute the convex hull of a set of distinct points.

    Args:
        points: Distinct input points, in any order

    Returns:
        Hull vertices in counter-clockwise order (y-up frame), starting at
        the leftmost point, without repeating the first vertex. Empty for
        no points, a single point for one, and the two extremes for
        collinear input.
    """
    if not points:
        return []

    left, right = find_extremes(points)
    if left == right:
        return [left]

    baseline = Line(left, right)
    first_side: list[Point] = []
    second_side: list[Point] = []
    for point in points:
        if point == left or point == right:
            continue
        det = baseline.determinant(point)
        if det > 0:
            first_side.append(point)
        elif det < 0:
            second_side.append(point)
        # points on the baseline are interior to the hull

    logger.debug(
        "Quick hull baseline %s: %d points on one side, %d on the other",
        baseline,
        len(first_side),
        len(second_side),
    )

    # reversing the baseline makes the second side LEFT of it
    first_chain = hull_chain(baseline, first_side)
    second_chain = hull_chain(baseline.reversed(), second_side)

    # each chain ends where the other begins
    return first_chain[:-1] + second_chain[:-1]


def hull_chain(line: Line, candidates: Sequence[Point]) -> list[Point]:
    """Trace the hull between the endpoints of ``line``.

    Only candidates LEFT of the line can be hull vertices of this chain;
    the caller is responsible for passing just those.

    Args:
        line: Edge whose endpoints bound the chain
        candidates: Points strictly LEFT of ``line``

    Returns:
        Chain from ``line.first`` to ``line.second`` inclusive, with the
        hull vertices in between in order
    """
    if not candidates:
        return [line.first, line.second]

    farthest = find_farthest(line, candidates)
    near_line = Line(line.first, farthest)
    far_line = Line(farthest, line.second)

    near_chain = hull_chain(near_line, points_left_of(near_line, candidates))
    far_chain = hull_chain(far_line, points_left_of(far_line, candidates))

    return near_chain + far_chain[1:]


def points_left_of(line: Line, points: Sequence[Point]) -> list[Point]:
    """Return the points strictly LEFT of ``line``, preserving order."""
    return [point for point in points if line.is_left(point)]


def find_farthest(line: Line, points: Sequence[Point]) -> Point:
    """Return the point farthest from ``line``.

    Distance is compared via the absolute determinant, which is
    proportional to the distance for a fixed line. Equally far points lie
    on one line parallel to ``line``; of those, the one reaching farthest
    in the ``first -> second`` direction wins. That point is an end of the
    hull edge they share, so it is always a true hull vertex.

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot find the farthest point of an empty sequence")

    farthest = points[0]
    max_area = abs(line.determinant(farthest))
    max_reach = _reach(line, farthest)
    for point in points[1:]:
        area = abs(line.determinant(point))
        if area < max_area:
            continue
        reach = _reach(line, point)
        if area > max_area or reach > max_reach:
            max_area = area
            max_reach = reach
            farthest = point
    return farthest


def _reach(line: Line, point: Point) -> float:
    """Projection of ``point`` onto the direction of ``line``, unscaled."""
    dx = line.second.x - line.first.x
    dy = line.second.y - line.first.y
    return (point.x - line.first.x) * dx + (point.y - line.first.y) * dy
