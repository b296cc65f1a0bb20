"""Integration tests against a real Storefront API.

Skipped unless SHOPIFY_STORE_DOMAIN and SHOPIFY_STOREFRONT_ACCESS_TOKEN are set.
"""

import pytest

from domains.shopify.client import StorefrontClient
from domains.shopify.products import ProductLookupService
from domains.shopify.types import Availability, LookupArguments
from infrastructure.config.settings import Settings


@pytest.fixture
async def storefront_client():
    """Create a real Storefront client for testing."""
    settings = Settings()

    if not settings.store_domain or not settings.shopify_storefront_access_token:
        pytest.skip("Shopify Storefront credentials not configured")

    async with StorefrontClient(
        store_domain=settings.store_domain,
        access_token=settings.shopify_storefront_access_token,
        api_version=settings.shopify_api_version,
        timeout=settings.shopify_timeout
    ) as client:
        yield client


class TestStorefrontLookup:
    """Round trips against the live store."""

    @pytest.mark.asyncio
    async def test_search(self, storefront_client):
        args = LookupArguments.model_validate({"mode": "search", "searchTerm": "*", "limit": 3})
        service = ProductLookupService(storefront_client)

        response = await service.lookup(args, service.plan(args))

        assert len(response.products) <= 3
        for product in response.products:
            assert product.availability in set(Availability)
            assert len(product.variants) <= 10

    @pytest.mark.asyncio
    async def test_unknown_handle(self, storefront_client):
        args = LookupArguments.model_validate(
            {"mode": "byHandle", "handle": "this-handle-should-not-exist-0000"}
        )
        service = ProductLookupService(storefront_client)

        response = await service.lookup(args, service.plan(args))

        assert response.products == []
        assert response.matched_root_intent == "byHandle"
