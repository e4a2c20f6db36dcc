"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "resume-insights"

    @pytest.mark.unit
    def test_setup_logging_writes_to_stream(self) -> None:
        """Messages at or above the configured level reach the stream."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        get_logger("test_setup").debug("parsed 3 sections")
        assert "parsed 3 sections" in stream.getvalue()
        assert "DEBUG" in stream.getvalue()

    @pytest.mark.unit
    def test_setup_logging_accepts_level_name(self) -> None:
        """Level names are resolved case-insensitively."""
        stream = StringIO()
        setup_logging(level="warning", stream=stream)
        logger = get_logger("test_level_name")
        logger.info("hidden")
        logger.warning("shown")
        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    @pytest.mark.unit
    def test_setup_logging_unknown_level_name(self) -> None:
        """Unknown level names fall back to INFO."""
        stream = StringIO()
        setup_logging(level="chatty", stream=stream)
        assert logging.getLogger().level == logging.INFO
