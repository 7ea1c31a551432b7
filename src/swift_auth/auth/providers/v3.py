"""Keystone v3 authenticator.

Builds scoped ``/auth/tokens`` requests with one of three identity
methods, chosen in this order:

1. application_credential: an id or name plus a secret
2. token: no user name or id, the api key is a pre-issued token
3. password: everything else

The issued token travels in the ``X-Subject-Token`` response header; the
body carries expiry, roles, project and the service catalog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import orjson

from swift_auth.auth.client.driver import read_json
from swift_auth.auth.exceptions import ConfigError
from swift_auth.auth.providers.catalog import OBJECT_STORE, resolve_v3_endpoint
from swift_auth.auth.providers.models import EndpointType, parse_rfc3339
from swift_auth.auth.schemas.v3 import (
    V3ApplicationCredentialMethod,
    V3Auth,
    V3AuthRequest,
    V3AuthResponse,
    V3Domain,
    V3Identity,
    V3PasswordMethod,
    V3Project,
    V3Scope,
    V3TokenMethod,
    V3Trust,
    V3User,
)
from swift_auth.observability.logging import get_logger


if TYPE_CHECKING:
    from datetime import datetime

    from swift_auth.auth.providers.models import Credentials

logger = get_logger(__name__)

METHOD_TOKEN = "token"
METHOD_PASSWORD = "password"
METHOD_APPLICATION_CREDENTIAL = "application_credential"

DEFAULT_DOMAIN = "Default"

SUBJECT_TOKEN_HEADER = "X-Subject-Token"


def _opt(value: str) -> str | None:
    """Map empty strings to None so they are left out of the JSON body."""
    return value or None


def auth_tokens_url(auth_url: str) -> str:
    if not auth_url.endswith("/"):
        auth_url += "/"
    return auth_url + "auth/tokens"


def uses_application_credential(credentials: Credentials) -> bool:
    return bool(
        (credentials.application_credential_id or credentials.application_credential_name)
        and credentials.application_credential_secret
    )


def _application_credential_user(credentials: Credentials) -> V3User:
    """Resolve the user reference embedded in an application credential.

    Raises:
        ConfigError: If neither a user id nor a user name with a domain
            reference is available.
    """
    if credentials.application_credential_id:
        # the id identifies the credential on its own
        return V3User()
    if credentials.user_id:
        return V3User(id=credentials.user_id)
    if not credentials.username:
        msg = "user id or name required for application credential auth"
        raise ConfigError(msg)
    if credentials.domain_id:
        return V3User(name=credentials.username, domain=V3Domain(id=credentials.domain_id))
    if credentials.domain:
        return V3User(name=credentials.username, domain=V3Domain(name=credentials.domain))
    msg = "domain id or name required for application credential auth"
    raise ConfigError(msg)


def build_identity(credentials: Credentials) -> V3Identity:
    """Build the identity block for the highest-precedence method."""
    if uses_application_credential(credentials):
        user = _application_credential_user(credentials)
        app_cred_id = credentials.application_credential_id
        return V3Identity(
            methods=[METHOD_APPLICATION_CREDENTIAL],
            application_credential=V3ApplicationCredentialMethod(
                id=_opt(app_cred_id),
                # id and name are mutually exclusive, the id wins
                name=None if app_cred_id else _opt(credentials.application_credential_name),
                secret=credentials.application_credential_secret,
                user=user,
            ),
        )

    if not credentials.username and not credentials.user_id:
        if not credentials.api_key:
            msg = "no identity method: set a user, a token or an application credential"
            raise ConfigError(msg)
        return V3Identity(
            methods=[METHOD_TOKEN],
            token=V3TokenMethod(id=credentials.api_key),
        )

    domain: V3Domain | None = None
    if credentials.domain:
        domain = V3Domain(name=credentials.domain)
    elif credentials.domain_id:
        domain = V3Domain(id=credentials.domain_id)

    return V3Identity(
        methods=[METHOD_PASSWORD],
        password=V3PasswordMethod(
            user=V3User(
                name=_opt(credentials.username),
                id=_opt(credentials.user_id),
                password=_opt(credentials.api_key),
                domain=domain,
            )
        ),
    )


def _project_domain(credentials: Credentials) -> V3Domain:
    if credentials.tenant_domain:
        return V3Domain(name=credentials.tenant_domain)
    if credentials.tenant_domain_id:
        return V3Domain(id=credentials.tenant_domain_id)
    if credentials.domain:
        return V3Domain(name=credentials.domain)
    if credentials.domain_id:
        return V3Domain(id=credentials.domain_id)
    return V3Domain(name=DEFAULT_DOMAIN)


def build_scope(credentials: Credentials) -> V3Scope | None:
    """Build the token scope, or None for an unscoped request."""
    if credentials.trust_id:
        return V3Scope(trust=V3Trust(id=credentials.trust_id))
    if credentials.tenant_id:
        return V3Scope(project=V3Project(id=credentials.tenant_id))
    if credentials.tenant:
        return V3Scope(
            project=V3Project(
                name=credentials.tenant,
                domain=_project_domain(credentials),
            )
        )
    return None


def build_auth_request(credentials: Credentials) -> V3AuthRequest:
    """Build the complete /auth/tokens document.

    Application credentials carry their own scope, so no scope is added
    for them.
    """
    identity = build_identity(credentials)
    scope = None
    if identity.methods[0] != METHOD_APPLICATION_CREDENTIAL:
        scope = build_scope(credentials)
    return V3AuthRequest(auth=V3Auth(identity=identity, scope=scope))


class V3Authenticator:
    """Authenticates against a Keystone v3 ``/auth/tokens`` endpoint.

    Attributes:
        timeout: Per-attempt deadline in seconds, unless the credentials set one.
        region: Region used for catalog lookups, taken from the credentials.
        auth: Last successfully parsed response body, or None.
        headers: Headers of the last successful response.
    """

    def __init__(self, timeout: float = 10.0) -> None:
        self.timeout = timeout
        self.region = ""
        self.auth: V3AuthResponse | None = None
        self.headers = httpx.Headers()

    @property
    def version(self) -> int:
        return 3

    def request(self, credentials: Credentials) -> httpx.Request:
        """Build the POST /auth/tokens request."""
        if not credentials.auth_url:
            msg = "auth URL is required"
            raise ConfigError(msg)

        self.region = credentials.region
        document = build_auth_request(credentials)
        deadline = credentials.deadline(self.timeout)
        logger.debug(
            "Building v3 auth request",
            methods=document.auth.identity.methods,
            scoped=document.auth.scope is not None,
        )

        return httpx.Request(
            "POST",
            auth_tokens_url(credentials.auth_url),
            headers={
                "Content-Type": "application/json",
                "User-Agent": credentials.user_agent,
            },
            content=orjson.dumps(document.model_dump(by_alias=True, exclude_none=True)),
            extensions={"timeout": httpx.Timeout(deadline).as_dict()},
        )

    async def response(self, response: httpx.Response) -> None:
        """Parse the token document and keep the response headers."""
        auth = await read_json(response, V3AuthResponse)
        self.auth = auth
        self.headers = response.headers

    def endpoint_url(self, service_type: str, endpoint_type: EndpointType | str) -> str:
        if self.auth is None:
            return ""
        return resolve_v3_endpoint(
            self.auth.token.catalog,
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
        return self.headers.get(SUBJECT_TOKEN_HEADER, "")

    def expires(self) -> datetime | None:
        if self.auth is None:
            return None
        return parse_rfc3339(self.auth.token.expires_at)

    def cdn_url(self) -> str:
        """v3 catalogs carry no CDN endpoint."""
        return ""
