"""Authentication models.

This module defines the caller-supplied credential set and the endpoint
interface types shared by every authenticator.
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from swift_auth.core.config import DEFAULT_USER_AGENT


_RFC3339_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})\Z"
)


class EndpointType(StrEnum):
    """Interface variant of a catalog endpoint."""

    PUBLIC = "public"
    INTERNAL = "internal"
    ADMIN = "admin"


class Credentials(BaseModel):
    """Connection credentials for one authentication attempt.

    Which fields are populated decides the identity method. For v3 the
    precedence is application credential, then token (no user given),
    then password. v1 and v2 only read username, api_key and the tenant
    fields.

    Attributes:
        auth_url: Identity endpoint, e.g. https://identity.example.com/v3.
        username: User name.
        user_id: User id (v3 only).
        api_key: Password, API key, or pre-issued token depending on method.
        tenant: Project/tenant name.
        tenant_id: Project/tenant id.
        tenant_domain: Domain name of the project (v3 only).
        tenant_domain_id: Domain id of the project (v3 only).
        domain: User domain name (v3 only).
        domain_id: User domain id (v3 only).
        trust_id: Trust to scope the token to (v3 only).
        application_credential_id: Application credential id (v3 only).
        application_credential_name: Application credential name (v3 only).
        application_credential_secret: Application credential secret (v3 only).
        region: Region used to pick catalog endpoints; empty accepts any.
        user_agent: User-Agent header sent to the identity service.
        timeout: Per-attempt deadline in seconds. None defers to the
            authenticator's own timeout.
    """

    auth_url: str = ""
    username: str = ""
    user_id: str = ""
    api_key: str = Field(default="", repr=False)
    tenant: str = ""
    tenant_id: str = ""
    tenant_domain: str = ""
    tenant_domain_id: str = ""
    domain: str = ""
    domain_id: str = ""
    trust_id: str = ""
    application_credential_id: str = ""
    application_credential_name: str = ""
    application_credential_secret: str = Field(default="", repr=False)
    region: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float | None = Field(default=None, gt=0)

    model_config = {"frozen": True}  # Read-only for the attempt

    def deadline(self, default: float) -> float:
        """Return the per-attempt deadline, falling back to ``default``."""
        return self.timeout if self.timeout is not None else default


def parse_rfc3339(value: str) -> datetime | None:
    """Parse an RFC 3339 timestamp such as ``2024-01-15T10:30:00Z``.

    Only the strict RFC 3339 shape is accepted: full seconds, optional
    fraction and a ``Z`` or ``+HH:MM`` zone. Wider ISO 8601 forms (basic
    format, missing seconds, ``+0000`` offsets) are rejected like zone-less
    and malformed values, returning None so callers can treat it as "no
    expiry known".
    """
    if not _RFC3339_RE.match(value):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None
