"""Shared pytest fixtures for assertmatch tests."""

import pytest

from assertmatch.config import reset_settings
from tests.models import Point


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Drop cached settings so env overrides made by a test are seen."""
    for name in ('ASSERTMATCH_STRING_LIMIT', 'ASSERTMATCH_VERBOSE', 'ASSERTMATCH_LOG_JSON'):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def point():
    return Point(1, 2)
