"""Tests for logging configuration."""

import pytest

import logging

import colorlog

from node_rewards.helpers.logging import get_logger, set_log_level


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_logger(self) -> None:
        """Test that get_logger returns a logger instance."""
        logger = get_logger("test_module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_module"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        """Test that getting logger with same name returns same instance."""
        logger1 = get_logger("test_same")
        logger2 = get_logger("test_same")

        assert logger1 is logger2
        assert len(logger1.handlers) == 1

    @pytest.mark.parametrize(
        ("level_name", "level"),
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_get_logger_levels(self, level_name: str, level: int) -> None:
        """Test logger and handler get the requested level."""
        logger = get_logger(f"test_level_{level_name}", log_level=level_name)

        assert logger.level == level
        assert logger.handlers[0].level == level

    def test_get_logger_invalid_level_raises(self) -> None:
        """Test that an unknown level raises ValueError."""
        with pytest.raises(ValueError, match="Invalid log level: VERBOSE"):
            get_logger("test_invalid_level", log_level="VERBOSE")

    def test_get_logger_invalid_handler_raises(self) -> None:
        """Test that an unknown handler raises ValueError."""
        with pytest.raises(ValueError, match="Invalid handler: file"):
            get_logger("test_invalid_handler", log_handler="file")

    def test_get_logger_stderr_handler(self) -> None:
        """Test that the stderr handler writes to stderr."""
        import sys

        logger = get_logger("test_stderr", log_handler="stderr")
        handler = logger.handlers[0]

        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_get_logger_with_color(self) -> None:
        """Test that colored output uses colorlog's formatter."""
        logger = get_logger("test_color", log_color=True)

        assert isinstance(logger.handlers[0].formatter, colorlog.ColoredFormatter)

    def test_get_logger_plain_formatter(self) -> None:
        """Test that plain output does not use colorlog."""
        logger = get_logger("test_plain")

        assert not isinstance(logger.handlers[0].formatter, colorlog.ColoredFormatter)


class TestSetLogLevel:
    """Tests for set_log_level function."""

    def test_updates_existing_loggers(self) -> None:
        """Test that all cached loggers and handlers change level."""
        logger = get_logger("test_set_level", log_level="INFO")

        set_log_level("DEBUG")
        try:
            assert logger.level == logging.DEBUG
            assert logger.handlers[0].level == logging.DEBUG
        finally:
            set_log_level("INFO")

    def test_invalid_level_raises(self) -> None:
        """Test that an unknown level raises ValueError."""
        with pytest.raises(ValueError, match="Invalid log level: LOUD"):
            set_log_level("LOUD")
