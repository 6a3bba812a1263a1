"""Tests for domain models to verify they work correctly."""

import math

import pytest

from quickhull.core.geometry import cross
from quickhull.domain import Line, Orientation, Point


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100, 200)
        assert p.x == 100
        assert p.y == 200

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(3, -7)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_equality_is_coordinate_wise(self) -> None:
        """Test that equal coordinates make equal, hash-equal points."""
        assert Point(1, 2) == Point(1, 2)
        assert Point(1, 2) == Point(1.0, 2.0)
        assert Point(1, 2) != Point(2, 1)
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2

    def test_ordering_is_lexicographic(self) -> None:
        """Test that points order by x, then y."""
        assert Point(0, 5) < Point(1, 0)
        assert Point(0, 1) < Point(0, 5)
        assert max([Point(3, 2), Point(3, 7), Point(0, 9)]) == Point(3, 7)

    def test_coerce(self) -> None:
        """Test building points from pairs."""
        p = Point(1, 2)
        assert Point.coerce(p) is p
        assert Point.coerce((1, 2)) == p

    def test_str(self) -> None:
        """Test textual form."""
        assert str(Point(5, 10)) == "(5,10)"


class TestLine:
    """Tests for Line class."""

    def test_line_equation(self) -> None:
        """Test that both endpoints satisfy a*x + b*y = c."""
        line = Line(Point(4, 7), Point(12, 10))
        assert (line.a, line.b, line.c) == (3, -8, -44)
        for p in (line.first, line.second):
            assert line.a * p.x + line.b * p.y == line.c

    def test_reference_determinant(self) -> None:
        """Test the determinant pinned for (5,10) against (4,7)->(12,10)."""
        line = Line(Point(4, 7), Point(12, 10))
        assert line.determinant(Point(5, 10)) == -21

    def test_plug_in_matches_determinant(self) -> None:
        """Test that plug_in uses the same sign convention as determinant."""
        line = Line(Point(4, 7), Point(12, 10))
        for p in (Point(5, 10), Point(6, 2), Point(20, 13), Point(-3, 0)):
            assert line.plug_in(p) == line.determinant(p)

    def test_plug_in_zero_on_line(self) -> None:
        """Test that points on the line evaluate to zero."""
        line = Line(Point(0, 0), Point(2, 2))
        assert line.plug_in(Point(5, 5)) == 0
        assert line.plug_in(Point(-1, -1)) == 0

    def test_orientation(self) -> None:
        """Test LEFT/RIGHT/COLLINEAR classification."""
        line = Line(Point(0, 0), Point(10, 0))
        assert line.orientation(Point(5, -5)) == Orientation.LEFT
        assert line.orientation(Point(5, 5)) == Orientation.RIGHT
        assert line.orientation(Point(20, 0)) == Orientation.COLLINEAR

    def test_left_is_clockwise_in_y_up_frame(self) -> None:
        """Test that LEFT matches a negative y-up cross product."""
        first, second = Point(1, 2), Point(7, 5)
        line = Line(first, second)
        for point in [Point(3, 0), Point(3, 9), Point(13, 8), Point(-4, 4)]:
            assert line.is_left(point) == (cross(first, second, point) < 0)

    def test_compare(self) -> None:
        """Test numeric orientation."""
        line = Line(Point(0, 0), Point(10, 0))
        assert line.compare(Point(5, -5)) == 1
        assert line.compare(Point(5, 5)) == -1
        assert line.compare(Point(3, 0)) == 0

    def test_is_left(self) -> None:
        """Test the strict LEFT predicate."""
        line = Line(Point(0, 0), Point(10, 0))
        assert line.is_left(Point(5, -1))
        assert not line.is_left(Point(5, 1))
        assert not line.is_left(Point(5, 0))

    def test_reversed_flips_orientation(self) -> None:
        """Test that reversing a line flips every non-collinear orientation."""
        line = Line(Point(4, 7), Point(12, 10))
        reverse = line.reversed()
        assert reverse.first == line.second
        assert reverse.second == line.first
        for p in (Point(5, 10), Point(6, 2)):
            assert reverse.determinant(p) == -line.determinant(p)
        assert reverse.orientation(Point(20, 13)) == Orientation.COLLINEAR

    def test_reversed_returns_new_line(self) -> None:
        """Test that reversing leaves the original untouched."""
        line = Line(Point(0, 0), Point(1, 1))
        line.reversed()
        assert line.first == Point(0, 0)
        assert line.second == Point(1, 1)

    def test_line_immutable(self) -> None:
        """Test that line is immutable."""
        line = Line(Point(0, 0), Point(1, 1))
        with pytest.raises(AttributeError):
            line.first = Point(2, 2)  # type: ignore

    def test_distance(self) -> None:
        """Test endpoint distance."""
        line = Line(Point(0, 0), Point(3, 4))
        assert line.distance_squared() == 25
        assert math.isclose(line.distance(), 5.0)

    def test_triangle_area(self) -> None:
        """Test unsigned triangle area."""
        line = Line(Point(0, 0), Point(4, 0))
        assert line.triangle_area(Point(0, 3)) == 6.0
        assert line.triangle_area(Point(0, -3)) == 6.0

    def test_large_integer_coordinates(self) -> None:
        """Test that large integer coordinates keep exact results."""
        big = 10**12
        line = Line(Point(0, 0), Point(big, big + 1))
        assert line.determinant(Point(big + 1, big + 2)) == -(big * (big + 2) - (big + 1) ** 2)

    def test_degenerate_line_is_collinear(self) -> None:
        """Test that a zero-length line reports collinear for any point."""
        line = Line(Point(2, 2), Point(2, 2))
        assert line.orientation(Point(7, -3)) == Orientation.COLLINEAR

    def test_str(self) -> None:
        """Test textual form."""
        assert str(Line(Point(1, 2), Point(3, 4))) == "line between (1,2) and (3,4)"
