"""Logging utilities for QuickHull."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers added by configure_logging, replaced on the next call
_installed_handlers: list[logging.Handler] = []


@dataclass
class HullStats:
    """Statistics about hull recomputation on a point set."""

    recompute_count: int = 0
    clear_count: int = 0
    point_count: int = 0
    quick_hull_vertices: int = 0
    gift_wrap_vertices: int = 0
    last_duration_ms: float = 0.0
    total_duration_ms: float = 0.0

    @property
    def avg_duration_ms(self) -> float:
        """Average recompute time in milliseconds."""
        if self.recompute_count:
            return self.total_duration_ms / self.recompute_count
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and, optionally, a file.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output entirely

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("quickhull")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger(name: str = "quickhull") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger that writes through stdlib logging.

    Unlike ``structlog.get_logger``, this does not depend on
    :func:`configure_logging` having been called: events are rendered as
    key=value text and handed to the stdlib logger of the same name, so
    they stay silent until a handler is installed.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class HullLogger:
    """Logger for tracking hull recomputation on a point set."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._stats = HullStats()

    def log_point_added(self, x: float, y: float, count: int) -> None:
        """Log a point added to the collection."""
        self._logger.debug("Point added", x=x, y=y, count=count)

    def log_cleared(self, removed: int) -> None:
        """Log the collection being cleared."""
        self._logger.debug("Points cleared", removed=removed)
        self._stats.clear_count += 1

    def log_recompute(
        self,
        point_count: int,
        quick_hull_vertices: int,
        gift_wrap_vertices: int,
        duration_ms: float,
    ) -> None:
        """Log a completed hull recomputation."""
        self._logger.info(
            "Hull recomputed",
            points=point_count,
            quick_hull=quick_hull_vertices,
            gift_wrap=gift_wrap_vertices,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.recompute_count += 1
        self._stats.point_count = point_count
        self._stats.quick_hull_vertices = quick_hull_vertices
        self._stats.gift_wrap_vertices = gift_wrap_vertices
        self._stats.last_duration_ms = duration_ms
        self._stats.total_duration_ms += duration_ms

    def log_mismatch(self, quick_hull_vertices: int, gift_wrap_vertices: int) -> None:
        """Log disagreement between the two hull algorithms."""
        self._logger.error(
            "Hull algorithms disagree",
            quick_hull=quick_hull_vertices,
            gift_wrap=gift_wrap_vertices,
        )

    @property
    def stats(self) -> HullStats:
        """Get current hull statistics."""
        return self._stats
