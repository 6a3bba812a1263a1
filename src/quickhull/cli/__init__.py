"""Command-line interface for quickhull.

This module provides the CLI using Typer with rich output, standing in
for an interactive front end:

- ``hull``: print the convex hull of a point file
- ``closest``: print the closest pair of a point file
"""

from quickhull.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
