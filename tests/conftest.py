"""Pytest configuration and fixtures for git-safety-guard tests."""

import pytest

from git_safety_guard.observability import setup_structured_logging


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: Tests that spawn a hook subprocess")


@pytest.fixture(scope="session", autouse=True)
def structured_logging(tmp_path_factory):
    """Route structlog output to a file so it never mixes with CLI output."""
    log_file = tmp_path_factory.mktemp("logs") / "guard.log"
    setup_structured_logging(level="DEBUG", log_file=str(log_file))
    return log_file
