"""Unit tests for service catalog resolution."""

from __future__ import annotations

import pytest

from swift_auth.auth.providers.catalog import (
    OBJECT_STORE,
    RACKSPACE_CDN,
    resolve_v2_endpoint,
    resolve_v3_endpoint,
)
from swift_auth.auth.providers.models import EndpointType
from swift_auth.auth.schemas.v2 import V2CatalogEntry
from swift_auth.auth.schemas.v3 import V3CatalogEntry
from tests.fixtures.identity_responses import create_v2_endpoint, create_v3_endpoint


pytestmark = pytest.mark.unit


@pytest.fixture
def v2_catalog() -> list[V2CatalogEntry]:
    return [
        V2CatalogEntry.model_validate(entry)
        for entry in [
            {
                "type": "compute",
                "endpoints": [create_v2_endpoint("A", "compute.a.example.com")],
            },
            {
                "type": OBJECT_STORE,
                "endpoints": [
                    create_v2_endpoint("A", "a.example.com"),
                    create_v2_endpoint("B", "b.example.com"),
                ],
            },
            {
                "type": OBJECT_STORE,
                "endpoints": [create_v2_endpoint("C", "c.example.com")],
            },
        ]
    ]


@pytest.fixture
def v3_catalog() -> list[V3CatalogEntry]:
    return [
        V3CatalogEntry.model_validate(
            {
                "type": OBJECT_STORE,
                "endpoints": [
                    create_v3_endpoint("A", "internal", "http://a-internal"),
                    create_v3_endpoint("A", "public", "https://a-public"),
                    create_v3_endpoint("B", "public", "https://b-public"),
                ],
            }
        )
    ]


class TestResolveV2Endpoint:
    """Tests for resolve_v2_endpoint."""

    def test_no_region_takes_first_endpoint(self, v2_catalog) -> None:
        """Should return the first endpoint of the first matching service."""
        assert (
            resolve_v2_endpoint(v2_catalog, OBJECT_STORE, EndpointType.PUBLIC)
            == "https://a.example.com/v1/AUTH_tenant"
        )

    def test_region_skips_other_regions(self, v2_catalog) -> None:
        """Should skip endpoints of other regions."""
        assert (
            resolve_v2_endpoint(v2_catalog, OBJECT_STORE, EndpointType.PUBLIC, "B")
            == "https://b.example.com/v1/AUTH_tenant"
        )

    def test_region_found_in_later_entry(self, v2_catalog) -> None:
        """Should keep scanning entries of the same type after a miss."""
        assert (
            resolve_v2_endpoint(v2_catalog, OBJECT_STORE, EndpointType.INTERNAL, "C")
            == "https://snet-c.example.com/v1/AUTH_tenant"
        )

    def test_selects_interface_field(self, v2_catalog) -> None:
        """Should return the URL field matching the interface."""
        assert (
            resolve_v2_endpoint(v2_catalog, OBJECT_STORE, EndpointType.ADMIN)
            == "https://admin-a.example.com/v1/AUTH_tenant"
        )

    def test_unknown_interface(self, v2_catalog) -> None:
        """Should return an empty string for an unknown interface."""
        assert resolve_v2_endpoint(v2_catalog, OBJECT_STORE, "private") == ""

    def test_unknown_region_or_service(self, v2_catalog) -> None:
        """Should return an empty string when nothing matches."""
        assert resolve_v2_endpoint(v2_catalog, OBJECT_STORE, "public", "Z") == ""
        assert resolve_v2_endpoint(v2_catalog, RACKSPACE_CDN, "public") == ""


class TestResolveV3Endpoint:
    """Tests for resolve_v3_endpoint."""

    def test_matches_interface(self, v3_catalog) -> None:
        """Should skip endpoints with another interface."""
        assert (
            resolve_v3_endpoint(v3_catalog, OBJECT_STORE, EndpointType.PUBLIC)
            == "https://a-public"
        )

    def test_matches_region(self, v3_catalog) -> None:
        """Should require both the region and the interface."""
        assert (
            resolve_v3_endpoint(v3_catalog, OBJECT_STORE, EndpointType.PUBLIC, "B")
            == "https://b-public"
        )
        assert (
            resolve_v3_endpoint(v3_catalog, OBJECT_STORE, EndpointType.INTERNAL, "B")
            == ""
        )

    def test_unknown_service(self, v3_catalog) -> None:
        """Should return an empty string for a missing service."""
        assert resolve_v3_endpoint(v3_catalog, "identity", EndpointType.PUBLIC) == ""
