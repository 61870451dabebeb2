"""Pytest configuration and shared fixtures for the textfind test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import SAMPLE_SOURCE, write_text_file

from textfind.options.search import SearchModel
from textfind.search.service import FindService

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Remove console and file handlers installed by CLI logging configuration."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        # pytest's own capture handlers come and go per test phase; leave them alone
        for handler in list(root.handlers):
            if handler not in handlers and type(handler).__module__ == "logging":
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)


@pytest.fixture
def sample_source() -> str:
    """Provide a small source file used across search tests.

    Returns
    -------
    str
        Text with repeated identifiers, mixed case and several lines.

    """
    return SAMPLE_SOURCE


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Provide ``SAMPLE_SOURCE`` written to a temporary file."""
    return write_text_file(tmp_path / "sample.py", SAMPLE_SOURCE)


@pytest.fixture
def service() -> FindService:
    """Provide a find service with default settings."""
    return FindService()


@pytest.fixture
def replace_model() -> SearchModel:
    """Provide a literal replace-mode model."""
    return SearchModel(pattern="word", replacement="cat", is_replace=True)
