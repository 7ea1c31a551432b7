"""Authentication providers package.

This package provides one authenticator per identity protocol, all
implementing the Authenticator protocol. The factory module picks the
right one from an explicit version or the shape of the auth URL.

Available authenticators:
- V1Authenticator: legacy header-based auth
- V2Authenticator: Keystone v2, probing password and API-key encodings
- V3Authenticator: Keystone v3 with project, domain or trust scoping

Usage:
    from swift_auth.auth.providers import create_authenticator

    authenticator = create_authenticator(auth_url, api_key)
    request = authenticator.request(credentials)
"""

from swift_auth.auth.providers.factory import (
    create_authenticator,
    create_authenticator_from_settings,
    detect_auth_version,
)
from swift_auth.auth.providers.models import Credentials, EndpointType
from swift_auth.auth.providers.protocol import Authenticator
from swift_auth.auth.providers.v1 import V1Authenticator
from swift_auth.auth.providers.v2 import ApiKeyProbe, V2Authenticator
from swift_auth.auth.providers.v3 import V3Authenticator


__all__ = [
    "ApiKeyProbe",
    "Authenticator",
    "Credentials",
    "EndpointType",
    "V1Authenticator",
    "V2Authenticator",
    "V3Authenticator",
    "create_authenticator",
    "create_authenticator_from_settings",
    "detect_auth_version",
]
