"""Service catalog endpoint resolution.

Both Keystone versions return a catalog of services, each with a list of
region-tagged endpoints. v2 endpoints carry one URL per interface type,
v3 endpoints carry a single URL plus an ``interface`` tag.

Resolution scans the catalog in order and returns the first endpoint whose
service type, region (when one is configured) and interface all match.
An empty region accepts the first endpoint regardless of its region.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from swift_auth.auth.providers.models import EndpointType


if TYPE_CHECKING:
    from collections.abc import Iterable

    from swift_auth.auth.schemas.v2 import V2CatalogEntry, V2Endpoint
    from swift_auth.auth.schemas.v3 import V3CatalogEntry


OBJECT_STORE = "object-store"
RACKSPACE_CDN = "rax:object-cdn"


def _region_matches(region: str, endpoint_region: str) -> bool:
    return not region or region == endpoint_region


def _v2_interface_url(endpoint: V2Endpoint, endpoint_type: EndpointType | str) -> str:
    if endpoint_type == EndpointType.INTERNAL:
        return endpoint.internal_url
    if endpoint_type == EndpointType.PUBLIC:
        return endpoint.public_url
    if endpoint_type == EndpointType.ADMIN:
        return endpoint.admin_url
    return ""


def resolve_v2_endpoint(
    catalog: Iterable[V2CatalogEntry],
    service_type: str,
    endpoint_type: EndpointType | str,
    region: str = "",
) -> str:
    """Find a v2 endpoint URL.

    Args:
        catalog: The ``serviceCatalog`` entries in response order.
        service_type: Service type, e.g. ``object-store``.
        endpoint_type: Interface whose URL field is returned.
        region: Region to match; empty accepts any region.

    Returns:
        The URL, or "" if nothing matches or the interface is unknown.
    """
    for entry in catalog:
        if entry.type != service_type:
            continue
        for endpoint in entry.endpoints:
            if _region_matches(region, endpoint.region):
                return _v2_interface_url(endpoint, endpoint_type)
    return ""


def resolve_v3_endpoint(
    catalog: Iterable[V3CatalogEntry],
    service_type: str,
    endpoint_type: EndpointType | str,
    region: str = "",
) -> str:
    """Find a v3 endpoint URL.

    Args:
        catalog: The token ``catalog`` entries in response order.
        service_type: Service type, e.g. ``object-store``.
        endpoint_type: Required value of the endpoint ``interface`` tag.
        region: Region to match; empty accepts any region.

    Returns:
        The URL, or "" if nothing matches.
    """
    for entry in catalog:
        if entry.type != service_type:
            continue
        for endpoint in entry.endpoints:
            if endpoint.interface == endpoint_type and _region_matches(
                region, endpoint.region
            ):
                return endpoint.url
    return ""
