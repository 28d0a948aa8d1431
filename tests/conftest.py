"""Shared pytest fixtures for the logline test suite."""

import io
import logging

import pytest

from logline.config import ENV_VARS
from logline.encoder import EncoderConfig
from logline.formatter import LineFormatter


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep LOGLINE_* settings from the outer shell out of the tests."""
    for env_name in ENV_VARS.values():
        monkeypatch.delenv(env_name, raising=False)


@pytest.fixture()
def capture_logger():
    """Logger wired to an in-memory stream through LineFormatter, no timestamps."""
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(LineFormatter(EncoderConfig(disable_timestamp=True)))

    log = logging.getLogger("tests.logline.capture")
    log.handlers = [handler]
    log.setLevel(logging.DEBUG)
    log.propagate = False
    yield log, stream
    log.handlers = []
