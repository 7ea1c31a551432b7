"""Unit tests for client configuration.

Tests cover:
- Defaults
- Environment loading with nested sections
- Credential construction
- Caching
"""

from __future__ import annotations

import pytest

from swift_auth.core.config import DEFAULT_USER_AGENT, Settings, get_settings


pytestmark = pytest.mark.unit


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self) -> None:
        """Should have sensible defaults."""
        settings = Settings()

        assert settings.app.name == "swift-auth"
        assert settings.auth.version == 0
        assert settings.auth.timeout == 10.0
        assert settings.auth.user_agent == DEFAULT_USER_AGENT
        assert settings.logging.level == "INFO"
        assert settings.logging.format == "json"

    def test_nested_environment_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read nested sections through the double underscore."""
        monkeypatch.setenv("SWIFT_AUTH_AUTH__URL", "https://identity.example.com/v3")
        monkeypatch.setenv("SWIFT_AUTH_AUTH__VERSION", "3")
        monkeypatch.setenv("SWIFT_AUTH_AUTH__REGION", "RegionOne")
        monkeypatch.setenv("SWIFT_AUTH_LOGGING__LEVEL", "DEBUG")

        settings = Settings()

        assert settings.auth.url == "https://identity.example.com/v3"
        assert settings.auth.version == 3
        assert settings.auth.region == "RegionOne"
        assert settings.logging.level == "DEBUG"

    def test_secrets_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read secrets from top-level variables."""
        monkeypatch.setenv("SWIFT_AUTH_API_KEY", "env-secret")
        monkeypatch.setenv("SWIFT_AUTH_APPLICATION_CREDENTIAL_SECRET", "app-secret")

        settings = Settings()

        assert settings.API_KEY == "env-secret"
        assert settings.APPLICATION_CREDENTIAL_SECRET == "app-secret"

    def test_init_values_override_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should prefer explicit values over the environment."""
        monkeypatch.setenv("SWIFT_AUTH_API_KEY", "env-secret")

        settings = Settings(API_KEY="explicit")

        assert settings.API_KEY == "explicit"


class TestSettingsCredentials:
    """Tests for Settings.credentials()."""

    def test_maps_every_field(self) -> None:
        """Should copy auth fields and secrets into the credentials."""
        settings = Settings(
            auth={
                "url": "https://identity.example.com/v3",
                "username": "demo",
                "user_id": "uid",
                "tenant": "proj",
                "tenant_id": "pid",
                "tenant_domain": "pd",
                "tenant_domain_id": "pdid",
                "domain": "d",
                "domain_id": "did",
                "trust_id": "tr",
                "application_credential_id": "acid",
                "application_credential_name": "acname",
                "region": "RegionOne",
                "user_agent": "custom/1.0",
                "timeout": 2.5,
            },
            API_KEY="secret",
            APPLICATION_CREDENTIAL_SECRET="acsecret",
        )

        credentials = settings.credentials()

        assert credentials.auth_url == "https://identity.example.com/v3"
        assert credentials.username == "demo"
        assert credentials.user_id == "uid"
        assert credentials.api_key == "secret"
        assert credentials.tenant == "proj"
        assert credentials.tenant_id == "pid"
        assert credentials.tenant_domain == "pd"
        assert credentials.tenant_domain_id == "pdid"
        assert credentials.domain == "d"
        assert credentials.domain_id == "did"
        assert credentials.trust_id == "tr"
        assert credentials.application_credential_id == "acid"
        assert credentials.application_credential_name == "acname"
        assert credentials.application_credential_secret == "acsecret"
        assert credentials.region == "RegionOne"
        assert credentials.user_agent == "custom/1.0"
        assert credentials.timeout == 2.5


class TestGetSettings:
    """Tests for get_settings."""

    def test_returns_cached_instance(self) -> None:
        """Should return the same instance on repeated calls."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should pick up new environment values after a cache clear."""
        first = get_settings()
        monkeypatch.setenv("SWIFT_AUTH_AUTH__TIMEOUT", "30")
        get_settings.cache_clear()

        second = get_settings()

        assert second is not first
        assert second.auth.timeout == 30.0
