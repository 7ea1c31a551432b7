"""Legacy v1 (header-based) authenticator.

The v1 protocol is a bare GET with ``X-Auth-User`` / ``X-Auth-Key``
headers. Everything the client needs comes back in response headers;
the body is ignored and there is no expiry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit, urlunsplit

import httpx

from swift_auth.auth.client.driver import drain_and_close
from swift_auth.auth.exceptions import ConfigError
from swift_auth.auth.providers.models import EndpointType
from swift_auth.observability.logging import get_logger


if TYPE_CHECKING:
    from datetime import datetime

    from swift_auth.auth.providers.models import Credentials

logger = get_logger(__name__)

# Rackspace service-net hosts are the public host with this prefix
SERVICE_NET_PREFIX = "snet-"


def service_net_url(storage_url: str) -> str:
    """Rewrite a storage URL to its service-net variant.

    Only the host is rewritten; an unparsable URL is returned unchanged.
    """
    try:
        parts = urlsplit(storage_url)
    except ValueError:
        return storage_url
    if not parts.netloc:
        return storage_url
    userinfo, at, host = parts.netloc.rpartition("@")
    netloc = f"{userinfo}{at}{SERVICE_NET_PREFIX}{host}"
    return urlunsplit(parts._replace(netloc=netloc))


class V1Authenticator:
    """Authenticates against a v1 (tempauth / Rackspace legacy) endpoint.

    Attributes:
        timeout: Per-attempt deadline in seconds, unless the credentials set one.
        headers: Headers of the last successful response.
    """

    def __init__(self, timeout: float = 10.0) -> None:
        self.timeout = timeout
        self.headers = httpx.Headers()

    @property
    def version(self) -> int:
        return 1

    def request(self, credentials: Credentials) -> httpx.Request:
        """Build the v1 GET request."""
        if not credentials.auth_url:
            msg = "auth URL is required"
            raise ConfigError(msg)

        deadline = credentials.deadline(self.timeout)
        return httpx.Request(
            "GET",
            credentials.auth_url,
            headers={
                "User-Agent": credentials.user_agent,
                "X-Auth-Key": credentials.api_key,
                "X-Auth-User": credentials.username,
            },
            extensions={"timeout": httpx.Timeout(deadline).as_dict()},
        )

    async def response(self, response: httpx.Response) -> None:
        """Store the response headers; the body is drained unread."""
        await drain_and_close(response)
        self.headers = response.headers
        logger.debug("Stored v1 auth headers", has_token="X-Auth-Token" in response.headers)

    def storage_url(self, internal: bool = False) -> str:
        storage_url = self.headers.get("X-Storage-Url", "")
        if internal and storage_url:
            return service_net_url(storage_url)
        return storage_url

    def storage_url_for_endpoint(self, endpoint_type: EndpointType) -> str:
        """Map the interface type onto the public or service-net URL."""
        return self.storage_url(internal=endpoint_type == EndpointType.INTERNAL)

    def token(self) -> str:
        return self.headers.get("X-Auth-Token", "")

    def expires(self) -> datetime | None:
        """v1 does not report an expiry."""
        return None

    def cdn_url(self) -> str:
        return self.headers.get("X-CDN-Management-Url", "")
