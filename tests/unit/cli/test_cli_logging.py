"""Unit tests for CLI logging features.

Tests for --log-level, --log-file, --trace and --verbose handling.
"""

import argparse
import logging

import pytest

from textfind.cli import _setup_logging_level
from textfind.logging_utils import configure_logging


def _namespace(**overrides):
    values = {"trace": False, "verbose": False, "log_level": "WARNING", "log_file": None}
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigureLogging:
    """Test the logging configuration helper."""

    def test_sets_level_and_console_handler(self):
        """Test basic logging configuration."""
        root = configure_logging(logging.INFO)
        assert root is logging.getLogger()
        assert root.level == logging.INFO
        stream_handlers = [h for h in root.handlers if type(h) is logging.StreamHandler]
        assert len(stream_handlers) == 1

    def test_string_level(self):
        assert configure_logging("debug").level == logging.DEBUG

    def test_unknown_string_level_falls_back_to_info(self):
        assert configure_logging("chatty").level == logging.INFO

    def test_trace_format(self):
        """Test that trace mode includes timestamps and logger names."""
        root = configure_logging(logging.DEBUG, trace_mode=True)
        formatter = root.handlers[-1].formatter
        assert "%(asctime)s" in formatter._fmt
        assert "%(name)s" in formatter._fmt

    def test_log_file(self, tmp_path):
        """Test logging configuration with file output."""
        log_file = tmp_path / "textfind.log"
        root = configure_logging(logging.INFO, log_file=str(log_file))
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)

        logging.getLogger("textfind.test").info("hello from the test")
        for handler in root.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "Logging to file" in content
        assert "hello from the test" in content

    def test_unwritable_log_file_is_reported(self, tmp_path):
        """Test that a bad log path does not prevent console logging."""
        bad_path = tmp_path / "missing-dir" / "x.log"
        root = configure_logging(logging.INFO, log_file=str(bad_path))
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
        assert not bad_path.exists()


@pytest.mark.unit
@pytest.mark.cli
class TestSetupLoggingLevel:
    """Test mapping of command line flags to a log level."""

    @pytest.mark.parametrize(
        "overrides,expected",
        [
            ({}, logging.WARNING),
            ({"log_level": "ERROR"}, logging.ERROR),
            ({"verbose": True}, logging.DEBUG),
            ({"verbose": True, "log_level": "INFO"}, logging.INFO),
            ({"trace": True, "log_level": "ERROR"}, logging.DEBUG),
        ],
    )
    def test_levels(self, overrides, expected):
        _setup_logging_level(_namespace(**overrides))
        assert logging.getLogger().level == expected
