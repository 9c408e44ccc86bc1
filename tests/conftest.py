"""
Test configuration and fixtures for the slime bot test suite.
"""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

TEST_TOKEN = "MTIzNDU2Nzg5MDEyMzQ1Njc4.GaBcDe.test-token-value-for-the-suite"


# Custom pytest markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow running",
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate every test from the caller's environment and any local .env file."""
    for name in ("DISCORD_TOKEN", "SLIME_ENVIRONMENT", "SLIME_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def discord_token(monkeypatch):
    """Put a token in the environment and return it."""
    monkeypatch.setenv("DISCORD_TOKEN", TEST_TOKEN)
    return TEST_TOKEN


@pytest.fixture
def restore_root_logger():
    """Undo any changes a test makes to the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _make_message(content: str, channel_id: int = 987654321):
    message = MagicMock()
    message.content = content
    message.channel.id = channel_id
    message.channel.send = AsyncMock()
    message.author.id = 123456789
    message.guild.id = 555666777
    return message


@pytest.fixture
def mock_discord_message():
    """Mock Discord message for testing."""
    return _make_message("!ping")


@pytest.fixture
def make_message():
    """Factory for mock Discord messages whose channel accepts sends."""
    return _make_message


@pytest.fixture
def mock_context():
    """Stand-in for the client passed to handlers as request context."""
    return MagicMock()
