"""
Shared fixtures for the test suite.
"""

import logging

import pytest

from ticket_verifier.config import Settings
from ticket_verifier.models import PullRequestContext

ENV_VARS = [
    "BASE_URL",
    "API_URL",
    "API_KEY",
    "MESSAGE",
    "INPUT_MESSAGE",
    "GITHUB_TOKEN",
    "GITHUB_API_URL",
    "GITHUB_EVENT_PATH",
    "GITHUB_REPOSITORY",
    "GITHUB_ACTIONS",
    "RUNNER_DEBUG",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep tests independent of the CI environment they run in."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging configuration done by CLI invocations."""
    package_logger = logging.getLogger("ticket_verifier")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)


@pytest.fixture
def settings():
    """Fixture providing settings for a tracker at tracker.example.com."""
    return Settings(
        base_url="https://tracker.example.com",
        api_url="https://tracker.example.com",
        github_token="gh-token",
    )


@pytest.fixture
def pr_context():
    """Fixture providing a pull request context without a body."""
    return PullRequestContext(owner="acme", repo="widgets", number=5)
