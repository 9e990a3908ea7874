"""
Pytest fixtures for plurale tests.
"""

import logging

import pytest

import plurale
from plurale.core import Inflector


@pytest.fixture
def inflector():
    """Fresh inflector with the default English rules."""
    return Inflector()


@pytest.fixture
def default_inflector():
    """Package level inflector, restored after the test."""
    yield plurale.inflector
    plurale.inflector.reset()


@pytest.fixture
def root_logger():
    """Root logger with its level restored after the test."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)
