"""
Unit tests for logging utilities.

Tests the logging configuration and utilities including
logger setup, levels and file output.
"""

import logging
import os
import tempfile

import pytest

from declgen.utils.logging import setup_logging, get_logger


@pytest.fixture(autouse=True)
def restore_logging():
    """Return the package logger to its import-time state after each test."""
    yield
    logger = logging.getLogger('declgen')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestPackageLogger:
    """Test the package logger before any setup."""

    def test_quiet_without_setup(self):
        """Test that the package logger only carries a NullHandler."""
        logger = logging.getLogger('declgen')
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)
        assert logger.propagate is True

    def test_records_reach_application_handlers(self, caplog):
        """Test that records propagate when the application configures logging."""
        with caplog.at_level(logging.INFO, logger='declgen'):
            get_logger("codegen").info("visible to the application")
        assert "visible to the application" in caplog.text


class TestLoggingSetup:
    """Test logging setup and configuration."""

    def test_setup_logging_default(self, monkeypatch):
        """Test default logging setup."""
        monkeypatch.delenv("DECLGEN_LOG_LEVEL", raising=False)
        setup_logging()

        logger = logging.getLogger('declgen')
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_setup_logging_debug_level(self):
        """Test logging setup with debug level."""
        setup_logging(level='DEBUG')

        logger = logging.getLogger('declgen')
        assert logger.level == logging.DEBUG

    def test_setup_logging_invalid_level(self):
        """Test logging setup with invalid level defaults to INFO."""
        setup_logging(level='INVALID')

        logger = logging.getLogger('declgen')
        assert logger.level == logging.INFO

    def test_setup_logging_from_environment(self, monkeypatch):
        """Test that the level is read from the environment."""
        monkeypatch.setenv("DECLGEN_LOG_LEVEL", "WARNING")
        setup_logging()

        logger = logging.getLogger('declgen')
        assert logger.level == logging.WARNING

    def test_setup_logging_with_file(self):
        """Test logging setup with file output."""
        with tempfile.NamedTemporaryFile(suffix='.log', delete=False) as f:
            log_file = f.name

        try:
            setup_logging(level='DEBUG', log_file=log_file)

            logger = logging.getLogger('declgen')
            assert len(logger.handlers) == 2
            assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)

            get_logger("file_test").debug("written to file")
            for handler in logger.handlers:
                handler.flush()

            with open(log_file) as f:
                assert "written to file" in f.read()
        finally:
            setup_logging()
            os.unlink(log_file)

    def test_setup_logging_replaces_handlers(self):
        """Test that repeated setup does not stack handlers."""
        setup_logging()
        setup_logging()

        assert len(logging.getLogger('declgen').handlers) == 1


class TestGetLogger:
    """Test logger naming."""

    def test_get_logger_prefixes_name(self):
        """Test that plain names are placed under the package logger."""
        assert get_logger("codegen").name == "declgen.codegen"

    def test_get_logger_module_name(self):
        """Test that module names are used as-is."""
        assert get_logger("declgen.codegen.type_spec").name == "declgen.codegen.type_spec"
        assert get_logger("declgen").name == "declgen"

    def test_child_logger_inherits_level(self):
        """Test that module loggers follow the package level."""
        setup_logging(level='ERROR')
        assert get_logger("inherit_test").getEffectiveLevel() == logging.ERROR
