"""Shared fixtures."""

import os

import pytest
from loguru import logger

ENV_KEYS = ("PAGE_UTILS_LOG_DIR", "PAGE_UTILS_LOG_LEVEL")


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def clean_env(monkeypatch):
    """Make sure no package env config leaks into or out of a test.

    Values loaded from a .env file go straight into os.environ, so they are
    dropped again after the test.
    """
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    for key in ENV_KEYS:
        os.environ.pop(key, None)
