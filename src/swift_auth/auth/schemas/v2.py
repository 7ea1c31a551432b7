"""Keystone v2 wire models.

References:
    https://docs.openstack.org/api-ref/identity/v2/
    https://docs.rackspace.com/docs/cloud-identity/v2/
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class V2Model(BaseModel):
    """Base for v2 documents: wire names as aliases, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# =============================================================================
# Request
# =============================================================================


class PasswordCredentials(V2Model):
    username: str
    password: str


class ApiKeyCredentials(V2Model):
    username: str
    api_key: str = Field(alias="apiKey")


class V2PasswordAuth(V2Model):
    password_credentials: PasswordCredentials = Field(alias="passwordCredentials")
    tenant_name: str | None = Field(default=None, alias="tenantName")
    tenant_id: str | None = Field(default=None, alias="tenantId")


class V2ApiKeyAuth(V2Model):
    api_key_credentials: ApiKeyCredentials = Field(
        alias="RAX-KSKEY:apiKeyCredentials"
    )
    tenant_name: str | None = Field(default=None, alias="tenantName")
    tenant_id: str | None = Field(default=None, alias="tenantId")


class V2AuthRequest(V2Model):
    """POST /tokens body, either the password or the Rackspace API-key form."""

    auth: V2PasswordAuth | V2ApiKeyAuth


# =============================================================================
# Response
# =============================================================================


class V2Endpoint(V2Model):
    region: str = ""
    public_url: str = Field(default="", alias="publicURL")
    internal_url: str = Field(default="", alias="internalURL")
    admin_url: str = Field(default="", alias="adminURL")
    tenant_id: str = Field(default="", alias="tenantId")


class V2CatalogEntry(V2Model):
    type: str = ""
    name: str = ""
    endpoints: list[V2Endpoint] = []


class V2Tenant(V2Model):
    id: str = ""
    name: str = ""


class V2Token(V2Model):
    id: str = ""
    expires: str = ""
    tenant: V2Tenant = V2Tenant()


class V2Role(V2Model):
    id: str = ""
    name: str = ""
    description: str = ""
    tenant_id: str = Field(default="", alias="tenantId")


class V2User(V2Model):
    id: str = ""
    name: str = ""
    default_region: str = Field(default="", alias="RAX-AUTH:defaultRegion")
    roles: list[V2Role] = []


class V2Access(V2Model):
    token: V2Token = V2Token()
    service_catalog: list[V2CatalogEntry] = Field(
        default_factory=list, alias="serviceCatalog"
    )
    user: V2User = V2User()


class V2AuthResponse(V2Model):
    """Body of a successful POST /tokens."""

    access: V2Access
