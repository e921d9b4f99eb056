"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging
from pathlib import Path

import pytest

from samla.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    LOG_FILE_NAME,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


def _console_handler() -> logging.Handler:
    root_logger = logging.getLogger()
    handler = next(
        (h for h in root_logger.handlers if type(h) is logging.StreamHandler),
        None,
    )
    assert handler is not None
    return handler


def _file_handler():
    root_logger = logging.getLogger()
    return next(
        (h for h in root_logger.handlers if isinstance(h, logging.FileHandler)),
        None,
    )


class TestSetupLoggingLogLevels:
    """Test setup_logging with different log levels."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
            ("debug", logging.DEBUG),  # Test lowercase
            ("info", logging.INFO),
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level):
        """Test setup_logging configures correct log level."""
        setup_logging(log_level=log_level, enable_file=False)

        assert _console_handler().level == expected_level

    def test_setup_logging_root_logger_level_is_debug(self):
        """Test root logger is set to DEBUG to capture all levels."""
        setup_logging(log_level="WARNING", enable_file=False)

        assert logging.getLogger().level == logging.DEBUG


class TestSetupLoggingFormats:
    """Test setup_logging with different log formats."""

    @pytest.mark.parametrize(
        "log_format,expected_format",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
            ("unknown", DETAILED_FORMAT),
        ],
    )
    def test_setup_logging_with_different_formats(self, log_format, expected_format):
        """Test setup_logging configures correct format."""
        setup_logging(log_format=log_format, enable_file=False)

        assert _console_handler().formatter._fmt == expected_format

    def test_setup_logging_format_with_timestamp(self):
        """Test that formatter includes the date format."""
        setup_logging(log_format="detailed", enable_file=False)

        assert _console_handler().formatter.datefmt == "%Y-%m-%d %H:%M:%S"


class TestSetupLoggingFileHandling:
    """Test setup_logging file logging functionality."""

    def test_setup_logging_with_file_enabled(self, tmp_path: Path):
        """Test setup_logging creates a DEBUG file handler when enabled."""
        setup_logging(log_level="ERROR", enable_file=True, log_file_dir=str(tmp_path))

        file_handler = _file_handler()
        assert file_handler is not None
        assert file_handler.level == logging.DEBUG
        assert Path(file_handler.baseFilename) == tmp_path / LOG_FILE_NAME

        setup_logging(enable_file=False)

    def test_setup_logging_with_file_disabled(self):
        """Test setup_logging does not create file handler when disabled."""
        setup_logging(enable_file=False)

        assert _file_handler() is None

    def test_setup_logging_creates_log_directory(self, tmp_path: Path):
        """Test setup_logging creates the log directory if it doesn't exist."""
        log_dir = tmp_path / "new_logs"
        assert not log_dir.exists()

        setup_logging(enable_file=True, log_file_dir=str(log_dir))

        assert log_dir.is_dir()
        setup_logging(enable_file=False)


class TestSetupLoggingHandlerManagement:
    """Test setup_logging handler management."""

    def test_setup_logging_removes_existing_handlers(self):
        """Test repeated setup does not stack console handlers."""
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        root_logger = logging.getLogger()
        consoles = [h for h in root_logger.handlers if type(h) is logging.StreamHandler]
        assert len(consoles) == 1


class TestSetupLoggingModuleSpecificLevels:
    """Test module-specific log level configuration."""

    @pytest.mark.parametrize(
        "module_name,expected_level",
        [
            ("samla", logging.INFO),
            ("samla.i18n", logging.INFO),
            ("samla.models", logging.WARNING),
        ],
    )
    def test_module_specific_log_levels(self, module_name, expected_level):
        """Test module-specific log levels are configured correctly."""
        setup_logging(enable_file=False)

        assert logging.getLogger(module_name).level == expected_level

    def test_all_module_log_levels_configured(self):
        """Test all modules in MODULE_LOG_LEVELS are configured."""
        setup_logging(enable_file=False)

        for module_name, expected_level_str in MODULE_LOG_LEVELS.items():
            expected_level = getattr(logging, expected_level_str)
            assert logging.getLogger(module_name).level == expected_level

    def test_module_log_levels_only_cover_samla_loggers(self):
        """Test third-party loggers are left at their own levels."""
        assert all(name == "samla" or name.startswith("samla.") for name in MODULE_LOG_LEVELS)


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_returns_named_logger(self):
        logger = get_logger("samla.i18n.service")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "samla.i18n.service"

    def test_get_logger_same_name_returns_same_instance(self):
        assert get_logger("same_module") is get_logger("same_module")
