"""Shared test configuration."""

from collections.abc import Iterator

import pytest

from steam_catalog.config import get_settings
from steam_catalog.logger import setup_logging


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Iterator[None]:
    """Send structured logs to stderr so stdout only carries command output."""
    setup_logging()
    yield
    get_settings.cache_clear()
