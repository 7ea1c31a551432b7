"""Client configuration using Pydantic Settings.

This module provides centralized configuration management with:
- Environment variable loading (prefix ``SWIFT_AUTH_``)
- Nested sections addressed with the ``__`` delimiter
- Secrets kept out of the nested sections
- Caching for performance

For example ``SWIFT_AUTH_AUTH__URL=https://identity.example.com/v3``
sets ``settings.auth.url`` and ``SWIFT_AUTH_API_KEY`` sets the secret.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


if TYPE_CHECKING:
    from swift_auth.auth.providers.models import Credentials


__version__ = "0.1.0"

DEFAULT_USER_AGENT = f"swift-auth/{__version__}"


# =============================================================================
# Nested Configuration Models
# =============================================================================


class AppSettings(BaseModel):
    """Library identity settings."""

    name: str = "swift-auth"
    version: str = __version__


class AuthSettings(BaseModel):
    """Identity endpoint and non-secret credential fields."""

    url: str = ""
    version: int = 0  # 0 infers the protocol from the URL
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    region: str = ""
    username: str = ""
    user_id: str = ""
    tenant: str = ""
    tenant_id: str = ""
    tenant_domain: str = ""
    tenant_domain_id: str = ""
    domain: str = ""
    domain_id: str = ""
    trust_id: str = ""
    application_credential_id: str = ""
    application_credential_name: str = ""


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Client settings loaded from the environment and an optional .env file.

    Priority (highest to lowest):
    1. Values passed to Settings()
    2. Environment variables
    3. .env file
    4. Default values in code
    """

    model_config = SettingsConfigDict(
        env_prefix="SWIFT_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    app: AppSettings = AppSettings()
    auth: AuthSettings = AuthSettings()
    logging: LoggingSettings = LoggingSettings()

    # =========================================================================
    # Secrets (environment only)
    # =========================================================================
    API_KEY: str = ""
    APPLICATION_CREDENTIAL_SECRET: str = ""

    def credentials(self) -> Credentials:
        """Build the credential set for one authentication attempt."""
        from swift_auth.auth.providers.models import Credentials

        auth = self.auth
        return Credentials(
            auth_url=auth.url,
            username=auth.username,
            user_id=auth.user_id,
            api_key=self.API_KEY,
            tenant=auth.tenant,
            tenant_id=auth.tenant_id,
            tenant_domain=auth.tenant_domain,
            tenant_domain_id=auth.tenant_domain_id,
            domain=auth.domain,
            domain_id=auth.domain_id,
            trust_id=auth.trust_id,
            application_credential_id=auth.application_credential_id,
            application_credential_name=auth.application_credential_name,
            application_credential_secret=self.APPLICATION_CREDENTIAL_SECRET,
            region=auth.region,
            user_agent=auth.user_agent,
            timeout=auth.timeout,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
