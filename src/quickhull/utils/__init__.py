"""Utility functions for quickhull.

This module provides logging setup and the hull statistics logger.
"""

from quickhull.utils.logging import (
    HullLogger,
    HullStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "HullLogger",
    "HullStats",
    "configure_logging",
    "get_logger",
]
