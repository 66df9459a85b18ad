"""Pytest configuration and fixtures for pinlock-common tests."""

import logging

import pytest

from pinlock_common.logger import ROOT_LOGGER_NAME


@pytest.fixture
def reset_pinlock_logging():
    """Restore the pinlock logger hierarchy after a test reconfigures it."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
