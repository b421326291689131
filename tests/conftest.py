"""Shared pytest fixtures for all tests."""

import logging

import pytest

from config import Config
from reporting import RecordingReporter
from services.base import Services


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "teller",
        log_level="DEBUG",
        log_dir=tmp_path / "teller" / "logs",
        log_to_file=False,
        reporter="none",
    )


@pytest.fixture
def reporter():
    """Create a reporter that records every notice.

    Returns:
        RecordingReporter: Empty recording reporter.
    """
    return RecordingReporter()


@pytest.fixture
def services(test_config, reporter):
    """Create a Services container wired to the recording reporter.

    Args:
        test_config: Test configuration fixture.
        reporter: Recording reporter fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, reporter=reporter)


@pytest.fixture(autouse=True)
def reset_logger():
    """Remove handlers added by setup_logging after each test."""
    yield
    logger = logging.getLogger("teller")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
