"""Configuration settings for QuickHull."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class HullAlgorithm(str, Enum):
    """Which hull result to report."""

    QUICK = "quick"
    BRUTE = "brute"
    BOTH = "both"


class HullConfig(BaseModel):
    """Configuration for hull computation."""

    algorithm: HullAlgorithm = Field(
        default=HullAlgorithm.QUICK,
        description="Hull algorithm whose result is reported",
    )
    verify_agreement: bool = Field(
        default=False,
        description="Raise if quick hull and gift wrapping disagree after a recompute",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class QuickHullSettings(BaseModel):
    """Main application settings."""

    hull: HullConfig = Field(default_factory=HullConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> QuickHullSettings:
    """Get default application settings."""
    return QuickHullSettings()
