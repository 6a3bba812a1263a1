"""Configuration management for quickhull.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- HullConfig: Hull algorithm selection and verification
- LoggingConfig: Logging settings
- QuickHullSettings: Main application settings
"""

from quickhull.config.settings import (
    HullAlgorithm,
    HullConfig,
    LoggingConfig,
    QuickHullSettings,
    get_default_settings,
)

__all__ = [
    "HullAlgorithm",
    "HullConfig",
    "LoggingConfig",
    "QuickHullSettings",
    "get_default_settings",
]
