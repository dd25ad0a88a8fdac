"""
Shared test fixtures for the Recast client.
"""
import logging

import pytest
import structlog

from recast.config import Settings, get_settings
from recast.logs import LOGGER_NAME
from tests.fixtures.payloads import (  # noqa: F401
    greeting_body,
    travel_body,
    two_sentence_body,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep a developer's RECAST_* variables and cached settings out of tests."""
    for name in (
        "RECAST_TOKEN",
        "RECAST_LANGUAGE",
        "RECAST_API_URL",
        "RECAST_TIMEOUT",
        "RECAST_TRANSPORT",
        "RECAST_REPLAY_FILE",
        "RECAST_LOG_LEVEL",
        "RECAST_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    recast_logger = logging.getLogger(LOGGER_NAME)
    recast_logger.handlers = [logging.NullHandler()]
    recast_logger.setLevel(logging.NOTSET)
    recast_logger.propagate = True


@pytest.fixture
def settings() -> Settings:
    """Settings for a client talking to a fake API."""
    return Settings(
        _env_file=None,
        token="test-token",
        api_url="https://recast.test/v1/request",
        timeout=5.0,
    )
