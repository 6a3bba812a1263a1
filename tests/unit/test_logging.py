"""Tests for logging setup and the hull logger."""

import logging
from unittest.mock import Mock

import pytest

from quickhull.utils import HullLogger, configure_logging
from quickhull.utils.logging import _installed_handlers


@pytest.fixture(autouse=True)
def reset_handlers():
    """Detach handlers installed by a test."""
    yield
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_only(self):
        """Test that no file handler is added without a log file."""
        configure_logging(console_level="INFO")
        assert len(_installed_handlers) == 1
        handler = _installed_handlers[0]
        assert not isinstance(handler, logging.FileHandler)
        assert handler.level == logging.INFO
        assert handler in logging.getLogger().handlers

    def test_quiet_with_file(self, tmp_path):
        """Test that quiet mode keeps only the file handler."""
        configure_logging(log_file=tmp_path / "hull.log", quiet=True)
        assert len(_installed_handlers) == 1
        assert isinstance(_installed_handlers[0], logging.FileHandler)

    def test_repeated_calls_replace_handlers(self, tmp_path):
        """Test that reconfiguring does not stack handlers."""
        configure_logging(log_file=tmp_path / "first.log")
        first = list(_installed_handlers)
        configure_logging(log_file=tmp_path / "second.log")

        root_handlers = logging.getLogger().handlers
        assert len(_installed_handlers) == 2
        for handler in first:
            assert handler not in root_handlers

    def test_events_reach_log_file(self, tmp_path):
        """Test that hull events are written to the log file."""
        log_file = tmp_path / "hull.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        HullLogger(logger).log_recompute(5, 4, 4, 1.5)
        assert "Hull recomputed" in log_file.read_text(encoding="utf-8")


class TestHullLogger:
    """Tests for HullLogger statistics."""

    def test_recompute_stats(self):
        """Test that recomputes accumulate statistics."""
        hull_logger = HullLogger(Mock())
        hull_logger.log_recompute(10, 4, 4, 2.0)
        hull_logger.log_recompute(12, 5, 5, 4.0)

        stats = hull_logger.stats
        assert stats.recompute_count == 2
        assert stats.point_count == 12
        assert stats.quick_hull_vertices == 5
        assert stats.last_duration_ms == 4.0
        assert stats.avg_duration_ms == 3.0

    def test_mismatch_logged_as_error(self):
        """Test that a disagreement is logged at error level."""
        logger = Mock()
        HullLogger(logger).log_mismatch(4, 3)
        logger.error.assert_called_once_with(
            "Hull algorithms disagree", quick_hull=4, gift_wrap=3
        )
