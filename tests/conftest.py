"""Shared fixtures."""

import logging

import matplotlib
import pytest

matplotlib.use("Agg")

from schouten.core.cache import SieveCache
from schouten.core.engine import PrimeEngine


@pytest.fixture
def engine():
    """Fresh engine with its own cache."""
    return PrimeEngine(cache=SieveCache(maxsize=16))


@pytest.fixture
def uncached_engine():
    """Engine that recomputes every sieve."""
    return PrimeEngine(cache=SieveCache(maxsize=0))


@pytest.fixture(autouse=True)
def reset_cli_logger():
    """Drop handlers the CLI attaches so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("schouten")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
