"""Shared test fixtures and configuration for the swift-auth tests.

This module provides pytest fixtures used across test modules, mainly
credential sets. HTTP test doubles live in tests/fixtures/http.py.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from swift_auth.auth.providers.models import Credentials
from swift_auth.core.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()


@pytest.fixture
def credentials() -> Credentials:
    """Username / password credentials for a Keystone v3 endpoint."""
    return Credentials(
        auth_url="https://identity.example.com/v3",
        username="demo",
        api_key="secret",
        user_agent="swift-auth-tests/1.0",
    )


@pytest.fixture
def make_credentials() -> Callable[..., Credentials]:
    """Factory fixture for credential sets with overrides."""

    def _make(**overrides: Any) -> Credentials:
        values: dict[str, Any] = {
            "auth_url": "https://identity.example.com/v3",
            "user_agent": "swift-auth-tests/1.0",
        }
        values.update(overrides)
        return Credentials(**values)

    return _make
