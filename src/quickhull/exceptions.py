"""Exception hierarchy for QuickHull."""

from typing import Any


class QuickHullError(Exception):
    """Base exception for all QuickHull errors."""

    pass


class PointIndexError(QuickHullError, IndexError):
    """Point index outside the collection."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Point index {index} out of range for {count} points")


class PointInputError(QuickHullError):
    """Errors related to reading points from a file."""

    pass


class PointFileError(PointInputError):
    """Error opening or reading a point file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read points from '{path}': {reason}")


class PointFormatError(PointInputError):
    """A line in a point file could not be parsed."""

    def __init__(self, path: str, line_number: int, line: str) -> None:
        self.path = path
        self.line_number = line_number
        self.line = line
        super().__init__(f"Invalid point on line {line_number} of '{path}': {line!r}")


class HullError(QuickHullError):
    """Errors in hull computation."""

    pass


class HullMismatchError(HullError):
    """Quick hull and gift wrapping produced different vertex sets."""

    def __init__(self, quick: list[Any], brute: list[Any]) -> None:
        self.quick = quick
        self.brute = brute
        super().__init__(
            f"Hull algorithms disagree: quick hull has {len(quick)} vertices, "
            f"gift wrapping has {len(brute)}"
        )
