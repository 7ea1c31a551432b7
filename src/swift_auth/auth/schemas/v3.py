"""Keystone v3 wire models.

Request models are serialized with ``exclude_none`` so that unset blocks
(scope, domain, password vs token) are absent from the JSON body rather
than sent as null.

References:
    https://docs.openstack.org/api-ref/identity/v3/
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class V3Model(BaseModel):
    """Base for v3 documents: wire names as aliases, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# =============================================================================
# Request
# =============================================================================


class V3Domain(V3Model):
    id: str | None = None
    name: str | None = None


class V3User(V3Model):
    id: str | None = None
    name: str | None = None
    password: str | None = None
    domain: V3Domain | None = None


class V3PasswordMethod(V3Model):
    user: V3User


class V3TokenMethod(V3Model):
    id: str


class V3ApplicationCredentialMethod(V3Model):
    id: str | None = None
    name: str | None = None
    secret: str | None = None
    user: V3User | None = None


class V3Identity(V3Model):
    methods: list[str]
    password: V3PasswordMethod | None = None
    token: V3TokenMethod | None = None
    application_credential: V3ApplicationCredentialMethod | None = None


class V3Project(V3Model):
    id: str | None = None
    name: str | None = None
    domain: V3Domain | None = None


class V3Trust(V3Model):
    id: str


class V3Scope(V3Model):
    project: V3Project | None = None
    domain: V3Domain | None = None
    trust: V3Trust | None = Field(default=None, alias="OS-TRUST:trust")


class V3Auth(V3Model):
    identity: V3Identity
    scope: V3Scope | None = None


class V3AuthRequest(V3Model):
    """POST /auth/tokens body."""

    auth: V3Auth


# =============================================================================
# Response
# =============================================================================


class V3Links(V3Model):
    self_link: str = Field(default="", alias="self")


class V3NamedRef(V3Model):
    id: str = ""
    name: str = ""


class V3Role(V3NamedRef):
    links: V3Links = V3Links()


class V3ProjectRef(V3NamedRef):
    domain: V3NamedRef = V3NamedRef()


class V3UserDomainRef(V3NamedRef):
    links: V3Links = V3Links()


class V3UserRef(V3NamedRef):
    domain: V3UserDomainRef = V3UserDomainRef()


class V3Endpoint(V3Model):
    id: str = ""
    region: str = ""
    region_id: str = ""
    url: str = ""
    interface: str = ""


class V3CatalogEntry(V3Model):
    id: str = ""
    name: str = ""
    type: str = ""
    endpoints: list[V3Endpoint] = []


class V3Token(V3Model):
    expires_at: str = ""
    issued_at: str = ""
    methods: list[str] = []
    roles: list[V3Role] = []
    project: V3ProjectRef = V3ProjectRef()
    catalog: list[V3CatalogEntry] = []
    user: V3UserRef = V3UserRef()
    audit_ids: list[str] = []


class V3AuthResponse(V3Model):
    """Body of a successful POST /auth/tokens."""

    token: V3Token
