"""Configuration for unit tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """Capture debug records of the client for tests."""
    caplog.set_level(logging.DEBUG, logger="imagekit_metadata")
    yield
