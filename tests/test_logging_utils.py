"""Tests for the logging utilities module."""

import logging
import time
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from doclocale.logging_utils import ConsoleFormatter, FileFormatter, setup_logging


def _record(name: str = "test", level: int = logging.INFO, msg: str = "Test", lineno: int = 1) -> logging.LogRecord:
    return logging.LogRecord(name=name, level=level, pathname="test.py", lineno=lineno, msg=msg, args=(), exc_info=None)


class TestFormatters(unittest.TestCase):
    """Test suite for ConsoleFormatter and FileFormatter."""

    def test_console_formatter_includes_version(self) -> None:
        """1. Console: Messages carry the application name, version and level."""
        formatter = ConsoleFormatter("1.0.0")
        assert formatter.datefmt == "%Y-%m-%dT%H:%M:%S"
        assert formatter.converter == time.gmtime

        formatted = formatter.format(_record(level=logging.WARNING, msg="Path not found"))
        assert "DocLocale - 1.0.0" in formatted
        assert "WARNING" in formatted
        assert formatted.endswith("Path not found")

    def test_format_time_with_microseconds(self) -> None:
        """2. Time Format: UTC with 6-digit microseconds and 'Z' suffix."""
        for formatter in (ConsoleFormatter("1.0.0"), FileFormatter()):
            record = _record()
            record.created = 1234567890.123456
            formatted_time = formatter.formatTime(record, formatter.datefmt)
            assert formatted_time == "2009-02-13T23:31:30.123456Z"

    def test_file_formatter_is_detailed(self) -> None:
        """3. File: Logger name, function and line number are included."""
        record = _record(name="doclocale.injection", level=logging.DEBUG, msg="Detailed log", lineno=123)
        record.funcName = "inject"
        formatted = FileFormatter().format(record)

        assert "doclocale.injection" in formatted
        assert "inject" in formatted
        assert "123" in formatted
        assert "DEBUG" in formatted
        assert "Detailed log" in formatted


class TestSetupLogging(unittest.TestCase):
    """Test suite for setup_logging function."""

    def tearDown(self) -> None:
        """Clean up logging state after each test."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.WARNING)

    def test_default_mode(self) -> None:
        """1. Default Mode: One INFO console handler, no debug file."""
        with patch("doclocale.logging_utils.FileHandler") as mock_file_handler:
            setup_logging("1.0.0", debug=False)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1
        handler = root_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.level == logging.INFO
        assert isinstance(handler.formatter, ConsoleFormatter)
        mock_file_handler.assert_not_called()

    def test_debug_mode(self) -> None:
        """2. Debug Mode: DEBUG level and a file handler under the project's log dir."""
        mock_log_dir = Path("/mock/project/.doclocale/logs")
        project_root = Path("/mock/project")

        with (
            patch("doclocale.logging_utils.paths.get_log_dir", return_value=mock_log_dir) as mock_get_log_dir,
            patch("doclocale.logging_utils.paths.ensure_dir_exists") as mock_ensure_dir,
            patch("doclocale.logging_utils.FileHandler") as mock_file_handler,
        ):
            mock_handler_instance = MagicMock()
            mock_handler_instance.level = logging.DEBUG
            mock_file_handler.return_value = mock_handler_instance

            setup_logging("1.0.0", debug=True, project_root=project_root)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        mock_get_log_dir.assert_called_once_with(project_root)
        mock_ensure_dir.assert_called_once_with(mock_log_dir)
        mock_file_handler.assert_called_once_with(mock_log_dir / "debug.log", mode="w", encoding="utf-8")
        console_handlers = [h for h in root_logger.handlers if isinstance(h, logging.StreamHandler)]
        assert console_handlers[0].level == logging.DEBUG

    def test_clears_existing_handlers(self) -> None:
        """3. Handler Cleanup: Clears existing handlers before setup."""
        root_logger = logging.getLogger()
        dummy_handler = logging.StreamHandler()
        root_logger.addHandler(dummy_handler)

        setup_logging("1.0.0", debug=False)

        assert dummy_handler not in root_logger.handlers
        assert len(root_logger.handlers) == 1

    def test_debug_file_failure_keeps_console(self) -> None:
        """4. File Handler Failure: Continues with console logging outside a project."""
        with patch("doclocale.logging_utils.paths.get_log_dir", side_effect=FileNotFoundError("no project")):
            setup_logging("1.0.0", debug=True)

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, ConsoleFormatter)
