"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from bookie import StoreSettings, create_store


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep BOOKIE_* variables from the developer environment out of tests."""
    for var in ("BOOKIE_WARN_UNPROTECTED", "BOOKIE_FREEZE_SEQUENCES"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings():
    """Default store settings, independent of the environment."""
    return StoreSettings(_env_file=None)


@pytest.fixture
def store(settings):
    """Fresh store with no initial state."""
    return create_store(settings=settings)


@pytest.fixture
def counter(settings):
    """Fresh store holding the integer 0."""
    return create_store(0, settings=settings)
