"""Oriented line segment primitive.

Line is the single geometric predicate every hull algorithm is built on.
It precomputes the implicit line equation ``a*x + b*y = c`` and the cross
products of its endpoints so that orientation queries cost a handful of
multiplications.

Sign convention: all signed quantities are measured in a display frame
whose y axis grows downward. A positive determinant means the point lies
to the left of ``first -> second`` as it appears on screen, which is to
the right of the segment in the usual y-up Cartesian frame.
"""

import math
from dataclasses import dataclass, field

from quickhull.domain.point import Orientation, Point


@dataclass(frozen=True, slots=True)
class Line:
    """The directed segment from ``first`` to ``second``.

    Degenerate lines (``first == second``) are not rejected, but every
    orientation query on them reports COLLINEAR.

    Attributes:
        first: Start point of the segment
        second: End point of the segment
        a: Coefficient of x in the line equation
        b: Coefficient of y in the line equation
        c: Constant term of the line equation
    """

    first: Point
    second: Point
    a: float = field(init=False, repr=False)
    b: float = field(init=False, repr=False)
    c: float = field(init=False, repr=False)
    _x1y2: float = field(init=False, repr=False, compare=False)
    _x2y1: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        p1, p2 = self.first, self.second
        object.__setattr__(self, "a", p2.y - p1.y)
        object.__setattr__(self, "b", p1.x - p2.x)
        object.__setattr__(self, "c", p1.x * p2.y - p1.y * p2.x)
        object.__setattr__(self, "_x1y2", p1.x * p2.y)
        object.__setattr__(self, "_x2y1", p2.x * p1.y)

    def plug_in(self, point: Point) -> float:
        """Evaluate the line equation at ``point``.

        Returns ``a*x + b*y - c``. Zero means the point is collinear with
        the segment; the sign follows the same convention as
        :meth:`determinant`.
        """
        return self.a * point.x + self.b * point.y - self.c

    def distance(self) -> float:
        """Return the length of the segment."""
        return math.sqrt(self.distance_squared())

    def distance_squared(self) -> float:
        """Return the squared length of the segment."""
        dx = self.first.x - self.second.x
        dy = self.first.y - self.second.y
        return dx * dx + dy * dy

    def determinant(self, point: Point) -> float:
        """Return twice the signed area of the triangle (first, second, point).

        The raw determinant is negated so that the sign reads correctly in
        a frame with a downward y axis.

        Args:
            point: Third vertex of the triangle

        Returns:
            Signed doubled area; positive when ``point`` is LEFT

        Examples:
            >>> Line(Point(4, 7), Point(12, 10)).determinant(Point(5, 10))
            -21
        """
        p1, p2 = self.first, self.second
        x3y1 = point.x * p1.y
        x2y3 = p2.x * point.y
        x3y2 = point.x * p2.y
        x1y3 = p1.x * point.y
        return -(self._x1y2 + x3y1 + x2y3 - x3y2 - self._x2y1 - x1y3)

    def triangle_area(self, point: Point) -> float:
        """Return the unsigned area of the triangle (first, second, point)."""
        return abs(self.determinant(point)) / 2.0

    def orientation(self, point: Point) -> Orientation:
        """Classify ``point`` against this directed line.

        Args:
            point: Point to classify

        Returns:
            Orientation.LEFT, Orientation.RIGHT or Orientation.COLLINEAR
        """
        det = self.determinant(point)
        if det > 0:
            return Orientation.LEFT
        if det < 0:
            return Orientation.RIGHT
        return Orientation.COLLINEAR

    def compare(self, point: Point) -> int:
        """Numeric form of :meth:`orientation`: +1, -1 or 0."""
        return self.orientation(point).value

    def is_left(self, point: Point) -> bool:
        """Check whether ``point`` lies strictly LEFT of the line.

        Points on the line are not LEFT.
        """
        return self.determinant(point) > 0

    def reversed(self) -> "Line":
        """Return the line from ``second`` to ``first``.

        Reversing a line flips the orientation of every point not on it.
        """
        return Line(self.second, self.first)

    def __str__(self) -> str:
        return f"line between {self.first} and {self.second}"
