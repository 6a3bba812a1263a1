"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from quickhull.domain import Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]QuickHull[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_points_info(path: str, read: int, unique: int) -> None:
    """Print point file information.

    Args:
        path: Path to the point file
        read: Number of points read from the file
        unique: Number of distinct points kept
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    duplicates = read - unique
    console.print(f"  {unique:,} points {SYM_DOT} {duplicates:,} duplicates skipped")


def print_hull(title: str, hull: list[Point]) -> None:
    """Print hull vertices as a table.

    Args:
        title: Table title (algorithm name)
        hull: Hull vertices in order
    """
    table = Table(title=title, title_justify="left", show_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for i, point in enumerate(hull):
        table.add_row(str(i), str(point.x), str(point.y))
    console.print(table)


def print_hull_summary(vertices: int, area: float, duration_ms: float) -> None:
    """Print hull summary line.

    Args:
        vertices: Number of hull vertices
        area: Enclosed area of the hull
        duration_ms: Time spent recomputing, in milliseconds
    """
    console.print(
        f"\n[bold green]{SYM_OK} Hull[/bold green] {vertices} vertices {SYM_DOT} "
        f"area {area:g} {SYM_DOT} {duration_ms:.2f}ms"
    )


def print_agreement(agree: bool) -> None:
    """Print whether the two hull algorithms agree."""
    if agree:
        console.print(f"  [green]{SYM_OK} quick hull and gift wrapping agree[/green]")
    else:
        console.print(f"  [bold red]{SYM_ERR} quick hull and gift wrapping disagree[/bold red]")


def print_closest(pair: tuple[Point, Point], distance: float) -> None:
    """Print the closest pair of points."""
    first, second = pair
    console.print(
        f"\n[bold green]{SYM_OK} Closest points[/bold green] {first} {SYM_DOT} {second}"
    )
    console.print(f"  distance {distance:g}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
