"""
Pytest fixtures for demoshop-e2e tests.

This module provides common fixtures used across test modules.

Test selection:
    pytest              # offline tests only (pytest.ini deselects e2e)
    pytest -m e2e       # browser flows against the live shop
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from demoshop.config import get_settings  # noqa: E402
from fakes import FakePage  # noqa: E402

_ISOLATED_ENV_PREFIXES = ("E2E_",)
_ISOLATED_ENV_NAMES = ("PASSWORD",)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove suite configuration from the environment for one test."""
    for name in list(os.environ):
        if name.upper().startswith(_ISOLATED_ENV_PREFIXES) or name.upper() in _ISOLATED_ENV_NAMES:
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def fake_page() -> FakePage:
    """A scripted stand-in for a Playwright page."""
    return FakePage(url="https://shop.test/")
