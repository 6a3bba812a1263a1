"""Point collection with cached convex hulls.

PointSet owns an insertion-ordered collection of distinct points and keeps
two hull polygons for it, one from quick hull and one from gift wrapping,
together with the closest pair. All three derived results share a single
staleness flag: any real mutation sets it, and the first query that sees
it set recomputes everything before answering.

Recomputation is synchronous and happens inside the query call. The class
is not thread-safe; callers sharing an instance must synchronize
externally.
"""

import time
from collections.abc import Iterable, Iterator

from quickhull.config import HullConfig
from quickhull.core.closest_pair import closest_pair
from quickhull.core.geometry import same_vertices
from quickhull.core.gift_wrap import gift_wrap
from quickhull.core.quick_hull import quick_hull
from quickhull.domain import Point
from quickhull.exceptions import HullMismatchError, PointIndexError
from quickhull.utils import HullLogger, HullStats


class PointSet:
    """A set of points and its convex hull.

    Example:
        points = PointSet()
        points.add_point(Point(0, 0))
        points.add_point((4, 0))
        points.add_point((2, 4))
        hull = points.get_quick_hull()  # [(0,0), (4,0), (2,4)]
    """

    def __init__(
        self,
        config: HullConfig | None = None,
        hull_logger: HullLogger | None = None,
    ) -> None:
        """Initialize an empty point set.

        Args:
            config: Hull settings; defaults to HullConfig()
            hull_logger: Logger receiving recompute events; a default one
                writing through stdlib logging is created if None
        """
        self.config = config if config is not None else HullConfig()
        self.hull_logger = hull_logger if hull_logger is not None else HullLogger()
        self._points: list[Point] = []
        self._members: set[Point] = set()
        self._quick_hull: list[Point] = []
        self._hull: list[Point] = []
        self._closest: tuple[Point, Point] | tuple[()] = ()
        # an empty set has an empty, valid hull
        self._stale = False

    def add_point(self, point: Point | tuple[float, float]) -> bool:
        """Add a single point to the collection.

        Adding a point equal to one already present does nothing.

        Args:
            point: A Point or an (x, y) pair

        Returns:
            True if the point was new and has been added
        """
        point = Point.coerce(point)
        if point in self._members:
            return False

        self._points.append(point)
        self._members.add(point)
        self._stale = True
        self.hull_logger.log_point_added(point.x, point.y, len(self._points))
        return True

    def add_points(self, points: Iterable[Point | tuple[float, float]]) -> int:
        """Add several points, skipping duplicates.

        Returns:
            Number of points actually added
        """
        return sum(1 for point in points if self.add_point(point))

    def clear(self) -> None:
        """Remove all points from the collection."""
        removed = len(self._points)
        self._points.clear()
        self._members.clear()
        self._quick_hull = []
        self._hull = []
        self._closest = ()
        self._stale = False
        self.hull_logger.log_cleared(removed)

    def get_point(self, index: int) -> Point:
        """Return the point at ``index`` in insertion order.

        Args:
            index: A number between 0 and the number of points

        Returns:
            The indexed point

        Raises:
            PointIndexError: If index is outside [0, count)
        """
        if 0 <= index < len(self._points):
            return self._points[index]
        raise PointIndexError(index, len(self._points))

    def get_points(self) -> list[Point]:
        """Return a copy of all points in insertion order."""
        return list(self._points)

    @property
    def count(self) -> int:
        """Number of points in the collection."""
        return len(self._points)

    @property
    def is_stale(self) -> bool:
        """True when the cached hulls do not reflect the current points."""
        return self._stale

    @property
    def stats(self) -> HullStats:
        """Recompute statistics collected by the hull logger."""
        return self.hull_logger.stats

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(list(self._points))

    def __contains__(self, point: object) -> bool:
        return point in self._members

    def get_hull(self) -> list[Point]:
        """Return the convex hull computed by gift wrapping.

        Returns:
            Hull vertices in counter-clockwise order, first vertex not repeated
        """
        self._refresh()
        return list(self._hull)

    def get_quick_hull(self) -> list[Point]:
        """Return the convex hull computed by quick hull.

        Returns:
            Hull vertices in counter-clockwise order, first vertex not repeated
        """
        self._refresh()
        return list(self._quick_hull)

    def get_closest_points(self) -> tuple[Point, Point] | tuple[()]:
        """Return the two points nearest to each other.

        Returns:
            The closest pair, or an empty tuple with fewer than two points
        """
        self._refresh()
        return self._closest

    def convex_hull_to_string(self) -> str:
        """Return the quick hull vertices as text, one per line."""
        self._refresh()
        lines = ["Convex Hull:\n"]
        for point in self._quick_hull:
            lines.append(f"\t({point.x},{point.y})\n")
        return "".join(lines)

    def __str__(self) -> str:
        lines = ["Points:\n"]
        for i, point in enumerate(self._points):
            lines.append(f" Point {i}: ({point.x},{point.y})\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"PointSet(count={len(self._points)}, stale={self._stale})"

    def _refresh(self) -> None:
        if self._stale:
            self._recalculate()

    def _recalculate(self) -> None:
        """Recompute both hulls and the closest pair, then clear the flag.

        Raises:
            HullMismatchError: If verification is enabled and the two hull
                algorithms return different vertex sets
        """
        start = time.perf_counter()
        self._hull = gift_wrap(self._points)
        self._quick_hull = quick_hull(self._points)
        self._closest = closest_pair(self._points)
        self._stale = False
        duration_ms = (time.perf_counter() - start) * 1000

        self.hull_logger.log_recompute(
            point_count=len(self._points),
            quick_hull_vertices=len(self._quick_hull),
            gift_wrap_vertices=len(self._hull),
            duration_ms=duration_ms,
        )

        if self.config.verify_agreement and not same_vertices(self._quick_hull, self._hull):
            self.hull_logger.log_mismatch(len(self._quick_hull), len(self._hull))
            raise HullMismatchError(list(self._quick_hull), list(self._hull))
