"""Shared fixtures for the injection test suite."""

import pytest

from injection import get_registry, get_settings


@pytest.fixture(autouse=True)
def clean_registry(monkeypatch: pytest.MonkeyPatch):
    """Give every test an empty process-wide registry and fresh settings."""
    monkeypatch.delenv("INJECTION_ABORT_ON_MISSING", raising=False)
    get_settings.cache_clear()
    get_registry().reset()
    yield
    get_registry().reset()
    get_settings.cache_clear()
