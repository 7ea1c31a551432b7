"""Authenticator protocol definition.

This module defines the Authenticator protocol that every identity
protocol implementation satisfies. Callers obtain an authenticator from
the factory and never branch on the protocol version.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from datetime import datetime

    import httpx

    from swift_auth.auth.providers.models import Credentials, EndpointType


@runtime_checkable
class Authenticator(Protocol):
    """Protocol for identity protocol implementations.

    An authenticator owns mutable state (the last parsed response and, for
    v2, the credential-encoding probe). One instance serves one logical
    caller at a time; concurrent callers need separate instances.

    Example flow:
        request = authenticator.request(credentials)
        response = await driver.execute(request)
        await authenticator.response(response)
        token = authenticator.token()
    """

    timeout: float

    @property
    def version(self) -> int:
        """Return the auth protocol version (1, 2 or 3)."""
        ...

    def request(self, credentials: Credentials) -> httpx.Request:
        """Build the authentication request.

        No I/O happens here.

        Raises:
            ConfigError: If the credentials do not resolve to exactly one
                identity method.
        """
        ...

    async def response(self, response: httpx.Response) -> None:
        """Consume a 2xx response and replace the stored auth state.

        The response body is closed on every exit path. A failed call
        leaves the previously stored state untouched.

        Raises:
            DecodeError: If the body is not the expected document.
            TransportError: If the body cannot be read.
        """
        ...

    def token(self) -> str:
        """Return the auth token, or "" before authentication."""
        ...

    def storage_url(self, internal: bool = False) -> str:
        """Return the object-store URL, internal or public."""
        ...

    def storage_url_for_endpoint(self, endpoint_type: EndpointType) -> str:
        """Return the object-store URL for the given interface type."""
        ...

    def expires(self) -> datetime | None:
        """Return the token expiry, or None if unknown or unsupported."""
        ...

    def cdn_url(self) -> str:
        """Return the CDN management URL, or "" if unsupported."""
        ...
