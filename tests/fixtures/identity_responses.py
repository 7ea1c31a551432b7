"""Canned identity service responses for testing.

Shapes follow real Keystone v2 / Rackspace and Keystone v3 replies,
trimmed to the fields the authenticators read plus a few they ignore.
"""

from __future__ import annotations

from typing import Any


def create_v2_endpoint(
    region: str,
    host: str,
    tenant_id: str = "AUTH_tenant",
) -> dict[str, Any]:
    """Factory for one v2 catalog endpoint."""
    return {
        "region": region,
        "tenantId": tenant_id,
        "publicURL": f"https://{host}/v1/{tenant_id}",
        "internalURL": f"https://snet-{host}/v1/{tenant_id}",
        "adminURL": f"https://admin-{host}/v1/{tenant_id}",
        "versionId": "1",
    }


def create_v2_response(
    token_id: str = "v2-token",
    expires: str = "2030-01-15T10:30:00Z",
    service_catalog: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Factory for a v2 /tokens response body."""
    if service_catalog is None:
        service_catalog = [
            {
                "name": "cloudFiles",
                "type": "object-store",
                "endpoints": [create_v2_endpoint("DFW", "storage.dfw.example.com")],
            },
            {
                "name": "cloudFilesCDN",
                "type": "rax:object-cdn",
                "endpoints": [create_v2_endpoint("DFW", "cdn.dfw.example.com")],
            },
        ]
    return {
        "access": {
            "token": {
                "id": token_id,
                "expires": expires,
                "tenant": {"id": "tenant-1", "name": "demo"},
            },
            "serviceCatalog": service_catalog,
            "user": {
                "id": "user-1",
                "name": "demo",
                "RAX-AUTH:defaultRegion": "DFW",
                "roles": [
                    {
                        "id": "role-1",
                        "name": "object-store:default",
                        "description": "Object store access",
                        "tenantId": "tenant-1",
                    }
                ],
            },
        }
    }


def create_v3_endpoint(region: str, interface: str, url: str) -> dict[str, Any]:
    """Factory for one v3 catalog endpoint."""
    return {
        "id": f"{region}-{interface}",
        "region": region,
        "region_id": region,
        "interface": interface,
        "url": url,
    }


def create_v3_response(
    expires_at: str = "2030-01-15T10:30:00.000000Z",
    catalog: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Factory for a v3 /auth/tokens response body."""
    if catalog is None:
        catalog = [
            {
                "id": "svc-identity",
                "name": "keystone",
                "type": "identity",
                "endpoints": [
                    create_v3_endpoint(
                        "RegionOne", "public", "https://identity.example.com/v3"
                    ),
                ],
            },
            {
                "id": "svc-swift",
                "name": "swift",
                "type": "object-store",
                "endpoints": [
                    create_v3_endpoint(
                        "RegionOne", "public", "https://swift.example.com/v1/AUTH_p"
                    ),
                    create_v3_endpoint(
                        "RegionOne", "internal", "http://10.0.0.5:8080/v1/AUTH_p"
                    ),
                    create_v3_endpoint(
                        "RegionOne", "admin", "http://10.0.0.5:8080/v1"
                    ),
                ],
            },
        ]
    return {
        "token": {
            "methods": ["password"],
            "expires_at": expires_at,
            "issued_at": "2030-01-15T09:30:00.000000Z",
            "audit_ids": ["audit-1"],
            "roles": [{"id": "r1", "name": "member", "links": {"self": "x"}}],
            "project": {
                "id": "p1",
                "name": "demo",
                "domain": {"id": "default", "name": "Default"},
            },
            "user": {
                "id": "u1",
                "name": "demo",
                "domain": {"id": "default", "name": "Default"},
            },
            "catalog": catalog,
        }
    }
