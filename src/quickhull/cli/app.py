"""CLI application entry point for quickhull.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from quickhull import __version__
from quickhull.cli.output import (
    console,
    print_agreement,
    print_closest,
    print_error,
    print_header,
    print_hull,
    print_hull_summary,
    print_points_info,
    print_step,
)
from quickhull.config import HullAlgorithm, HullConfig, LoggingConfig, QuickHullSettings
from quickhull.core import PointSet, pair_distance, same_vertices, signed_area
from quickhull.exceptions import PointInputError, QuickHullError
from quickhull.io import PointReader
from quickhull.utils import HullLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="quickhull",
    help="Compute planar convex hulls with quick hull and gift wrapping.",
    add_completion=False,
    no_args_is_help=True,
)

# Exit code when the two hull algorithms disagree
EXIT_MISMATCH = 2


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]QuickHull[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compute planar convex hulls with quick hull and gift wrapping."""


@app.command()
def hull(
    points_file: Annotated[
        Path,
        typer.Argument(
            help="Text file with one 'x,y' or 'x y' point per line",
            show_default=False,
        ),
    ],
    algorithm: Annotated[
        str,
        typer.Option(
            "--algorithm",
            "-a",
            help="Hull algorithm to report (quick|brute|both)",
        ),
    ] = "quick",
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only the hull table",
        ),
    ] = False,
) -> None:
    """Compute the convex hull of the points in a file.

    Example:
        quickhull hull points.txt --algorithm both

    With --algorithm both, both hulls are printed and the command exits with
    code 2 if their vertex sets differ.
    """
    try:
        chosen = HullAlgorithm(algorithm.lower())
    except ValueError:
        print_error(
            f"Invalid algorithm: {algorithm}",
            details="Valid values: quick, brute, both",
        )
        raise typer.Exit(code=1)

    settings = QuickHullSettings(
        hull=HullConfig(algorithm=chosen),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    try:
        point_set = _load_point_set(points_file, settings, quiet)

        if not quiet:
            print_step("Computing hull")

        quick = point_set.get_quick_hull()
        brute = point_set.get_hull()
        selected = settings.hull.algorithm
        reported = brute if selected == HullAlgorithm.BRUTE else quick

        if selected in (HullAlgorithm.QUICK, HullAlgorithm.BOTH):
            print_hull("Quick hull", quick)
        if selected in (HullAlgorithm.BRUTE, HullAlgorithm.BOTH):
            print_hull("Gift wrapping", brute)

        if not quiet:
            print_hull_summary(
                vertices=len(reported),
                area=abs(signed_area(reported)),
                duration_ms=point_set.stats.last_duration_ms,
            )

        if selected == HullAlgorithm.BOTH:
            agree = same_vertices(quick, brute)
            print_agreement(agree)
            if not agree:
                raise typer.Exit(code=EXIT_MISMATCH)

    except PointInputError as e:
        print_error(f"Could not read points: {e}")
        raise typer.Exit(code=1)
    except QuickHullError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def closest(
    points_file: Annotated[
        Path,
        typer.Argument(
            help="Text file with one 'x,y' or 'x y' point per line",
            show_default=False,
        ),
    ],
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Find the two points in a file that are nearest to each other."""
    settings = QuickHullSettings()

    try:
        point_set = _load_point_set(points_file, settings, quiet)
    except PointInputError as e:
        print_error(f"Could not read points: {e}")
        raise typer.Exit(code=1)

    pair = point_set.get_closest_points()
    if not pair:
        print_error(
            "Not enough points",
            details=f"Need at least 2 distinct points, found {point_set.count}.",
        )
        raise typer.Exit(code=1)

    print_closest(pair, pair_distance(pair))


def _load_point_set(points_file: Path, settings: QuickHullSettings, quiet: bool) -> PointSet:
    """Read a point file into a new PointSet.

    Args:
        points_file: Path to the point file
        settings: Application settings
        quiet: Suppress progress output

    Returns:
        PointSet holding the distinct points of the file
    """
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    hull_logger = HullLogger(logger)

    if not quiet:
        print_header(__version__)
        print_step("Loading points")

    reader = PointReader(points_file)
    reader.load()

    point_set = PointSet(config=settings.hull, hull_logger=hull_logger)
    point_set.add_points(reader.iter_points())

    if not quiet:
        print_points_info(str(points_file), reader.point_count, point_set.count)

    return point_set


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
