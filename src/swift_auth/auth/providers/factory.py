"""Authenticator factory.

This module selects the identity protocol implementation, either from an
explicit version or by inspecting the auth URL.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from swift_auth.auth.exceptions import ConfigError
from swift_auth.auth.providers.v1 import V1Authenticator
from swift_auth.auth.providers.v2 import API_KEY_MIN_LENGTH, V2Authenticator
from swift_auth.auth.providers.v3 import V3Authenticator
from swift_auth.core.config import get_settings
from swift_auth.observability.logging import get_logger


if TYPE_CHECKING:
    from swift_auth.auth.providers.models import Credentials
    from swift_auth.auth.providers.protocol import Authenticator
    from swift_auth.core.config import Settings

logger = get_logger(__name__)


def detect_auth_version(auth_url: str) -> int:
    """Infer the protocol version from the auth URL.

    Raises:
        ConfigError: If the URL names no known version.
    """
    if "v3" in auth_url:
        return 3
    if "v2" in auth_url:
        return 2
    if "v1" in auth_url:
        return 1
    msg = "can't find auth version in auth URL - set it explicitly"
    raise ConfigError(msg)


def create_authenticator(
    auth_url: str,
    api_key: str,
    auth_version: int = 0,
    timeout: float | None = None,
) -> Authenticator:
    """Create an authenticator for the given protocol version.

    Args:
        auth_url: Identity endpoint, used to infer the version when
            ``auth_version`` is 0.
        api_key: The secret, used only to seed the v2 encoding guess.
        auth_version: 1, 2 or 3; 0 infers it from ``auth_url``.
        timeout: Per-attempt deadline in seconds. If None, taken from settings.

    Returns:
        A fresh authenticator with empty state.

    Raises:
        ConfigError: If the version is undetectable or unsupported.
    """
    if timeout is None:
        timeout = get_settings().auth.timeout

    if auth_version == 0:
        auth_version = detect_auth_version(auth_url)
        logger.debug("Detected auth version from URL", version=auth_version)

    if auth_version == 1:
        return V1Authenticator(timeout=timeout)

    if auth_version == 2:
        # A guess only; the authenticator tries both encodings eventually
        return V2Authenticator(
            timeout=timeout,
            use_api_key=len(api_key) >= API_KEY_MIN_LENGTH,
        )

    if auth_version == 3:
        return V3Authenticator(timeout=timeout)

    msg = f"auth version {auth_version} not supported"
    raise ConfigError(msg)


def create_authenticator_from_settings(
    settings: Settings | None = None,
) -> tuple[Authenticator, Credentials]:
    """Create an authenticator and its credentials from configuration.

    Args:
        settings: Client settings. If None, loaded from the environment.

    Returns:
        The authenticator and the credential set to pass to ``request()``.

    Raises:
        ConfigError: If the version is undetectable or unsupported.
    """
    if settings is None:
        settings = get_settings()

    credentials = settings.credentials()
    authenticator = create_authenticator(
        auth_url=credentials.auth_url,
        api_key=credentials.api_key,
        auth_version=settings.auth.version,
        timeout=credentials.timeout,
    )
    logger.info(
        "Created authenticator",
        version=authenticator.version,
        auth_url=credentials.auth_url,
    )
    return authenticator, credentials
