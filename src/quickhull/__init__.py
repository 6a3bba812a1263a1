"""QuickHull - Planar convex hulls by divide-and-conquer and gift wrapping.

QuickHull computes the convex hull of a finite set of 2-D points with two
independent algorithms and keeps both results cached on a point set that
recomputes them whenever its points change.

Example:
    $ quickhull hull points.txt --algorithm both

This will print the hull vertices in counter-clockwise order and report
whether the quick hull and gift wrapping results agree.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
