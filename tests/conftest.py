"""Shared pytest fixtures for all tests."""

import logging
from importlib import reload

import pytest


@pytest.fixture(autouse=True)
def reset_daylight_logger():
    """Undo setup_logging() so caplog sees records in every test."""
    yield
    logger = logging.getLogger("daylight")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def fresh_config():
    """Reload daylight.config; reload again afterwards to drop test overrides."""
    import daylight.config as config
    yield lambda: reload(config)
    reload(config)
