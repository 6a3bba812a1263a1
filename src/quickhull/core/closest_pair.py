"""Closest pair of points by divide and conquer.

Points are sorted by x once, the set is split at the median, and the best
pair across the split is found by scanning a y-sorted strip around the
dividing line. The recursion returns its points merged by y so each level
does linear work, for O(n log n) overall.

Distances are compared squared, so integer inputs are compared exactly.
"""

import heapq
import math
from collections.abc import Sequence

from quickhull.domain import Point

# below this size a pairwise scan is cheaper than splitting
_BRUTE_FORCE_SIZE = 3


def closest_pair(points: Sequence[Point]) -> tuple[Point, Point] | tuple[()]:
    """Find the two distinct points nearest to each other.

    Args:
        points: Distinct input points

    Returns:
        The closest pair, or an empty tuple when fewer than two points
        are given
    """
    if len(points) < 2:
        return ()

    by_x = sorted(points)
    _, pair, _ = _closest(by_x)
    return pair


def pair_distance(pair: tuple[Point, Point]) -> float:
    """Euclidean distance between the two points of a pair."""
    first, second = pair
    return math.hypot(first.x - second.x, first.y - second.y)


def _distance_squared(first: Point, second: Point) -> float:
    dx = first.x - second.x
    dy = first.y - second.y
    return dx * dx + dy * dy


def _by_y(point: Point) -> tuple[float, float]:
    return (point.y, point.x)


def _closest(by_x: list[Point]) -> tuple[float, tuple[Point, Point], list[Point]]:
    """Return (squared distance, pair, points sorted by y) for an x-sorted run."""
    n = len(by_x)
    if n <= _BRUTE_FORCE_SIZE:
        best = math.inf
        pair = (by_x[0], by_x[1])
        for i in range(n):
            for j in range(i + 1, n):
                dist = _distance_squared(by_x[i], by_x[j])
                if dist < best:
                    best = dist
                    pair = (by_x[i], by_x[j])
        return best, pair, sorted(by_x, key=_by_y)

    mid = n // 2
    mid_x = by_x[mid].x
    left_best, left_pair, left_by_y = _closest(by_x[:mid])
    right_best, right_pair, right_by_y = _closest(by_x[mid:])

    if right_best < left_best:
        best, pair = right_best, right_pair
    else:
        best, pair = left_best, left_pair

    by_y = list(heapq.merge(left_by_y, right_by_y, key=_by_y))

    strip = [point for point in by_y if (point.x - mid_x) ** 2 < best]
    for i, point in enumerate(strip):
        for other in strip[i + 1:]:
            if (other.y - point.y) ** 2 >= best:
                break
            dist = _distance_squared(point, other)
            if dist < best:
                best = dist
                pair = (point, other)

    return best, pair, by_y
