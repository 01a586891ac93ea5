"""Fixtures for CLI tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_archguard_logger():
    """Drop handlers the CLI installs so they don't outlive CliRunner's streams."""
    yield
    logger = logging.getLogger("archguard")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
