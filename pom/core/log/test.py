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
        logger = get_logger("pom.test")
        assert logger.name == "pom.test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "pom"

    @pytest.mark.unit
    def test_module_loggers_are_children_of_root_logger(self) -> None:
        """Module loggers propagate to the package logger."""
        package_logger = get_logger()
        assert get_logger("pom.styles").parent is package_logger

    @pytest.mark.unit
    def test_setup_logging_accepts_level_name(self) -> None:
        """Verify logging setup with a string level."""
        stream = StringIO()
        setup_logging(level="debug", stream=stream)
        logger = get_logger("pom.test_setup")

        # basicConfig is a no-op once the root logger has handlers, so only
        # the API contract is checked here.
        assert logger.level == logging.NOTSET
