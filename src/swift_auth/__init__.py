"""Client-side authentication for Swift object storage.

Negotiates tokens with v1 (header), Keystone v2 and Keystone v3 identity
services and exposes the storage URL, token, expiry and CDN URL through
one Authenticator interface.

Usage:
    from swift_auth import Credentials, RequestDriver, authenticate, create_authenticator

    credentials = Credentials(auth_url=url, username=user, api_key=key)
    authenticator = create_authenticator(url, key)
    async with RequestDriver() as driver:
        await authenticate(authenticator, credentials, driver)
    authenticator.storage_url(), authenticator.token()
"""

from swift_auth.auth.exceptions import (
    AuthTimeoutError,
    ConfigError,
    DecodeError,
    HttpStatusError,
    SwiftAuthError,
    TransportError,
)
from swift_auth.auth.providers import (
    Authenticator,
    Credentials,
    EndpointType,
    V1Authenticator,
    V2Authenticator,
    V3Authenticator,
    create_authenticator,
    create_authenticator_from_settings,
)
from swift_auth.auth.client.driver import RequestDriver, authenticate
from swift_auth.core.config import Settings, get_settings
from swift_auth.core.config.settings import __version__


__all__ = [
    "AuthTimeoutError",
    "Authenticator",
    "ConfigError",
    "Credentials",
    "DecodeError",
    "EndpointType",
    "HttpStatusError",
    "RequestDriver",
    "Settings",
    "SwiftAuthError",
    "TransportError",
    "V1Authenticator",
    "V2Authenticator",
    "V3Authenticator",
    "__version__",
    "authenticate",
    "create_authenticator",
    "create_authenticator_from_settings",
    "get_settings",
]
