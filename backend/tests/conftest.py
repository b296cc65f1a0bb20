"""Shared test fixtures."""

import json
from typing import Any, Dict, Iterable, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from infrastructure.api.app import create_app
from infrastructure.api.routes import get_upstream_transport
from infrastructure.config.settings import Settings


TEST_DOMAIN = "test-store.myshopify.com"
TEST_TOKEN = "storefront-test-token"


class FakeStorefront:
    """httpx handler standing in for the Storefront GraphQL endpoint."""

    def __init__(
        self,
        payload: Any = None,
        status_code: int = 200,
        error: Optional[Exception] = None,
        raw: Optional[str] = None
    ):
        self.payload = payload if payload is not None else {"data": {}}
        self.status_code = status_code
        self.error = error
        self.raw = raw
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, text=self.raw)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


def build_settings(**overrides: Any) -> Settings:
    values = {
        "SHOPIFY_STORE_DOMAIN": TEST_DOMAIN,
        "SHOPIFY_STOREFRONT_ACCESS_TOKEN": TEST_TOKEN,
        "SHOPIFY_STOREFRONT_API_VERSION": "2026-01",
        "LOG_JSON": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    """Settings with both Storefront credentials present."""
    return build_settings()


@pytest.fixture
def make_product():
    """Factory for raw Storefront product nodes."""

    def _make(
        handle: str = "classic-tee",
        available: bool = True,
        quantities: Iterable[Optional[int]] = (0, 3)
    ) -> Dict[str, Any]:
        variants = [
            {
                "id": f"gid://shopify/ProductVariant/{handle}-{i}",
                "title": f"Option {i}",
                "availableForSale": bool(q and q > 0),
                "currentlyNotInStock": not (q and q > 0),
                "quantityAvailable": q,
            }
            for i, q in enumerate(quantities)
        ]
        return {
            "id": f"gid://shopify/Product/{handle}",
            "handle": handle,
            "title": handle.replace("-", " ").title(),
            "availableForSale": available,
            "variants": {"nodes": variants},
        }

    return _make


@pytest.fixture
def make_client(settings):
    """Build a TestClient wired to a FakeStorefront."""

    def _make(storefront: FakeStorefront, app_settings: Optional[Settings] = None) -> TestClient:
        app = create_app(app_settings or settings)
        app.dependency_overrides[get_upstream_transport] = lambda: storefront.transport
        return TestClient(app)

    return _make


@pytest.fixture
def storefront():
    """The FakeStorefront class, for building upstream stand-ins."""
    return FakeStorefront


@pytest.fixture
def settings_factory():
    """Build Settings with overrides on top of the test defaults."""
    return build_settings
