"""Point file reader.

A point file holds one point per line as two numbers separated by a comma
and/or whitespace, e.g. ``12,40`` or ``12 40``. Blank lines and anything
after ``#`` are ignored. Values that parse as integers stay integers.
"""

import re
from collections.abc import Iterator
from pathlib import Path

from quickhull.domain import Point
from quickhull.exceptions import PointFileError, PointFormatError

_SEPARATOR = re.compile(r"[,\s]+")


class PointReader:
    """Loads points from a text file.

    Example:
        reader = PointReader(Path("points.txt"))
        reader.load()
        for point in reader.iter_points():
            print(point)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the point reader.

        Args:
            path: Path to the point file
        """
        self._path = path
        self._points: list[Point] | None = None

    def load(self) -> None:
        """Read and parse the point file.

        Raises:
            PointFileError: If the file does not exist or cannot be read
            PointFormatError: If a line is not a valid point
        """
        if not self._path.exists():
            raise PointFileError(str(self._path), "file not found")

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PointFileError(str(self._path), str(e)) from e

        points: list[Point] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            point = self._parse_line(line, line_number)
            if point is not None:
                points.append(point)
        self._points = points

    @property
    def points(self) -> list[Point]:
        """Return the loaded points in file order.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._points is None:
            raise RuntimeError("Points not loaded. Call load() first.")
        return list(self._points)

    @property
    def point_count(self) -> int:
        """Return the number of points read, duplicates included."""
        return len(self.points)

    def iter_points(self) -> Iterator[Point]:
        """Iterate over the loaded points in file order."""
        yield from self.points

    def _parse_line(self, line: str, line_number: int) -> Point | None:
        content = line.split("#", 1)[0].strip()
        if not content:
            return None

        fields = _SEPARATOR.split(content)
        if len(fields) != 2:
            raise PointFormatError(str(self._path), line_number, line)

        try:
            x, y = (_parse_number(value) for value in fields)
        except ValueError as e:
            raise PointFormatError(str(self._path), line_number, line) from e
        return Point(x, y)


def _parse_number(value: str) -> float:
    try:
        return int(value)
    except ValueError:
        return float(value)


def read_points(path: Path) -> list[Point]:
    """Read all points from a point file.

    Args:
        path: Path to the point file

    Returns:
        Points in file order, duplicates included
    """
    reader = PointReader(path)
    reader.load()
    return reader.points
