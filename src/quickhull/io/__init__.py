"""Point file I/O for quickhull.

This module reads points from plain text files so the engine can be driven
from the command line.

Key classes:
- PointReader: Load points from a text file
"""

from quickhull.io.reader import PointReader, read_points

__all__ = [
    "PointReader",
    "read_points",
]
