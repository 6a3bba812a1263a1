"""Core value types for planar points.

This module defines the fundamental types shared by every hull algorithm:
- Point: An immutable 2D point with integer or floating coordinates
- Orientation: Enum for the side of a directed line a point lies on
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Orientation(Enum):
    """Side of a directed line on which a point lies.

    Sides are reported in the display frame used by Line, where the
    y axis grows downward. LEFT therefore means "left of p1->p2 as drawn
    on screen". In the usual y-up frame of core.geometry.cross, LEFT is
    the clockwise side: a point is LEFT exactly when
    cross(p1, p2, point) < 0.
    """

    LEFT = 1
    RIGHT = -1
    COLLINEAR = 0


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. Ordering is
    lexicographic on (x, y), which is the tie-break used when searching
    for extreme points.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])

    @classmethod
    def coerce(cls, value: "Point | tuple[float, float]") -> "Point":
        """Accept either a Point or an (x, y) pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
