"""Pytest configuration and fixtures for curly tests."""

import pytest

from curly import Environment


@pytest.fixture
def env():
    """Create a default (fail-silent) Environment."""
    return Environment()


@pytest.fixture
def env_strict():
    """Create an Environment that raises UndefinedError for missing variables."""
    return Environment(strict=True)


@pytest.fixture
def no_colors(monkeypatch):
    """Disable ANSI colors so error messages compare as plain text."""
    from curly.environment import terminal

    monkeypatch.setattr(terminal, "_USE_COLORS", False)
