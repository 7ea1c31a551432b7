"""Authentication exceptions.

This module defines the errors raised while negotiating a token with an
identity service. Retry drivers branch on these types:
- ConfigError is fatal and never retried
- TransportError may be retried with backoff
- HttpStatusError may be retried with adjusted authenticator state
- DecodeError is surfaced as-is
"""

from __future__ import annotations


class SwiftAuthError(Exception):
    """Base exception for authentication errors."""


class ConfigError(SwiftAuthError):
    """Raised when credentials or the auth version are unusable.

    Raised before any network I/O takes place.
    """


class TransportError(SwiftAuthError):
    """Raised when the identity service cannot be reached."""


class AuthTimeoutError(TransportError):
    """Raised when the request-scoped deadline expires."""


class HttpStatusError(SwiftAuthError):
    """Raised when the identity service answers with a non-2xx status.

    Attributes:
        status_code: The HTTP status code.
        reason: The HTTP reason phrase.
    """

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP Error: {status_code}: {reason}".rstrip(": "))


class DecodeError(SwiftAuthError):
    """Raised when a response body is not the expected JSON document."""
