"""Shared fixtures for tally tests."""

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_tally_logger() -> Iterator[None]:
    """Undo setup_logging so records propagate to caplog in every test."""
    yield
    logger = logging.getLogger("tally")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
