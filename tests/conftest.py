"""Pytest configuration and shared fixtures for optional-value tests."""

import logging

import pytest


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fresh_config(monkeypatch):
    """Start from an unset configuration with no OPTIONAL_VALUE_* variables."""
    from optional_value._config import reset_config

    for name in (
        "OPTIONAL_VALUE_LOG_LEVEL",
        "OPTIONAL_VALUE_JSON_LOGS",
        "OPTIONAL_VALUE_STRICT_COERCION",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
