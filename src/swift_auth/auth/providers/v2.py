"""Keystone v2 authenticator.

The caller cannot know statically whether the secret it holds is a
password or a Rackspace API key, so the v2 authenticator probes both
encodings across successive attempts issued by an external retry driver.
The probe converges as soon as one response parses successfully.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx
import orjson

from swift_auth.auth.client.driver import read_json
from swift_auth.auth.exceptions import ConfigError
from swift_auth.auth.providers.catalog import (
    OBJECT_STORE,
    RACKSPACE_CDN,
    resolve_v2_endpoint,
)
from swift_auth.auth.providers.models import EndpointType, parse_rfc3339
from swift_auth.auth.schemas.v2 import (
    ApiKeyCredentials,
    PasswordCredentials,
    V2ApiKeyAuth,
    V2AuthRequest,
    V2AuthResponse,
    V2PasswordAuth,
)
from swift_auth.observability.logging import get_logger


if TYPE_CHECKING:
    from datetime import datetime

    from swift_auth.auth.providers.models import Credentials

logger = get_logger(__name__)

# Rackspace API keys are 32 hex characters; shorter secrets are likely passwords
API_KEY_MIN_LENGTH = 32


@dataclass
class ApiKeyProbe:
    """State machine choosing between password and API-key encodings.

    Attributes:
        use_api_key: Encoding for the next request.
        confirmed: Set once a response parsed; the encoding is then fixed.
        attempted: Set after the first request was built.
    """

    use_api_key: bool = False
    confirmed: bool = False
    attempted: bool = False

    def advance(self) -> bool:
        """Prepare for a new attempt and return the encoding to use.

        Every attempt after the first flips the encoding until one has
        been confirmed.
        """
        if self.attempted and not self.confirmed:
            self.use_api_key = not self.use_api_key
        self.attempted = True
        return self.use_api_key

    def confirm(self) -> None:
        self.confirmed = True


def tokens_url(auth_url: str) -> str:
    if not auth_url.endswith("/"):
        auth_url += "/"
    return auth_url + "tokens"


class V2Authenticator:
    """Authenticates against a Keystone v2 ``/tokens`` endpoint.

    Attributes:
        timeout: Per-attempt deadline in seconds, unless the credentials set one.
        region: Region used for catalog lookups, taken from the credentials.
        probe: Password / API-key encoding probe.
        auth: Last successfully parsed response, or None.
    """

    def __init__(self, timeout: float = 10.0, use_api_key: bool = False) -> None:
        """Initialize the v2 authenticator.

        Args:
            timeout: Per-attempt deadline in seconds.
            use_api_key: Initial guess for the credential encoding. It is
                only a guess; the probe flips it on failed attempts.
        """
        self.timeout = timeout
        self.region = ""
        self.probe = ApiKeyProbe(use_api_key=use_api_key)
        self.auth: V2AuthResponse | None = None

    @property
    def version(self) -> int:
        return 2

    def _build_body(self, credentials: Credentials, use_api_key: bool) -> V2AuthRequest:
        tenant_name = credentials.tenant or None
        tenant_id = credentials.tenant_id or None
        if use_api_key:
            return V2AuthRequest(
                auth=V2ApiKeyAuth(
                    api_key_credentials=ApiKeyCredentials(
                        username=credentials.username,
                        api_key=credentials.api_key,
                    ),
                    tenant_name=tenant_name,
                    tenant_id=tenant_id,
                )
            )
        return V2AuthRequest(
            auth=V2PasswordAuth(
                password_credentials=PasswordCredentials(
                    username=credentials.username,
                    password=credentials.api_key,
                ),
                tenant_name=tenant_name,
                tenant_id=tenant_id,
            )
        )

    def request(self, credentials: Credentials) -> httpx.Request:
        """Build the POST /tokens request for the next probe encoding."""
        if not credentials.auth_url:
            msg = "auth URL is required"
            raise ConfigError(msg)

        self.region = credentials.region
        use_api_key = self.probe.advance()
        logger.debug(
            "Building v2 auth request",
            encoding="api_key" if use_api_key else "password",
            confirmed=self.probe.confirmed,
        )

        body = self._build_body(credentials, use_api_key)
        deadline = credentials.deadline(self.timeout)
        return httpx.Request(
            "POST",
            tokens_url(credentials.auth_url),
            headers={
                "Content-Type": "application/json",
                "User-Agent": credentials.user_agent,
            },
            content=orjson.dumps(body.model_dump(by_alias=True, exclude_none=True)),
            extensions={"timeout": httpx.Timeout(deadline).as_dict()},
        )

    async def response(self, response: httpx.Response) -> None:
        """Parse the access document and lock in the working encoding."""
        auth = await read_json(response, V2AuthResponse)
        self.auth = auth
        self.probe.confirm()

    def endpoint_url(self, service_type: str, endpoint_type: EndpointType | str) -> str:
        """Find the URL of ``service_type`` for the configured region."""
        if self.auth is None:
            return ""
        return resolve_v2_endpoint(
            self.auth.access.service_catalog,
            service_type,
            endpoint_type,
            self.region,
        )

    def storage_url(self, internal: bool = False) -> str:
        endpoint_type = EndpointType.INTERNAL if internal else EndpointType.PUBLIC
        return self.storage_url_for_endpoint(endpoint_type)

    def storage_url_for_endpoint(self, endpoint_type: EndpointType) -> str:
        return self.endpoint_url(OBJECT_STORE, endpoint_type)

    def token(self) -> str:
        if self.auth is None:
            return ""
        return self.auth.access.token.id

    def expires(self) -> datetime | None:
        if self.auth is None:
            return None
        return parse_rfc3339(self.auth.access.token.expires)

    def cdn_url(self) -> str:
        return self.endpoint_url(RACKSPACE_CDN, EndpointType.PUBLIC)

    def default_region(self) -> str:
        """Return the user's Rackspace default region, if reported."""
        if self.auth is None:
            return ""
        return self.auth.access.user.default_region
