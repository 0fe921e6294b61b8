# tests/conftest.py

"""Shared pytest fixtures for all tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def no_search_delay() -> Generator[None, None, None]:
    """Zero the artificial ?delay=true pause so API tests run instantly."""
    with patch.object(Settings, "SEARCH_DELAY", 0.0):
        yield
