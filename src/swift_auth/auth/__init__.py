"""Authentication module.

This module provides:
- Authenticators for the v1, v2 and v3 identity protocols (providers/)
- Service catalog endpoint resolution (providers/catalog)
- The HTTP request driver (client/driver)
- Wire schemas for Keystone documents (schemas/)

Submodules are imported explicitly; only the error types are re-exported
here so the driver can import them without pulling in the providers.
"""

from swift_auth.auth.exceptions import (
    AuthTimeoutError,
    ConfigError,
    DecodeError,
    HttpStatusError,
    SwiftAuthError,
    TransportError,
)


__all__ = [
    "AuthTimeoutError",
    "ConfigError",
    "DecodeError",
    "HttpStatusError",
    "SwiftAuthError",
    "TransportError",
]
