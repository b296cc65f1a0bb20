"""Shopify Storefront GraphQL client."""

import httpx
from typing import Any, Dict, Optional

from shared import (
    ShopifyAPIError,
    LoggerMixin,
    Timer,
    normalize_store_domain,
    safe_json_loads,
)
from .queries import StorefrontQuery


ACCESS_TOKEN_HEADER = "X-Shopify-Storefront-Access-Token"

_NOT_JSON = object()


class StorefrontClient(LoggerMixin):
    """Client for the Shopify Storefront GraphQL API.

    One instance serves one invocation; use it as an async context manager
    so the underlying connection is released.
    """

    def __init__(
        self,
        store_domain: str,
        access_token: str,
        api_version: str = "2026-01",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.store_domain = normalize_store_domain(store_domain)
        self.api_version = api_version
        self.endpoint = f"https://{self.store_domain}/api/{api_version}/graphql.json"

        self.client = httpx.AsyncClient(
            headers={
                ACCESS_TOKEN_HEADER: access_token,
                "Content-Type": "application/json"
            },
            timeout=timeout,
            transport=transport
        )

    async def __aenter__(self) -> "StorefrontClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def execute(self, query: StorefrontQuery) -> Dict[str, Any]:
        """Send one GraphQL request and return the decoded body.

        HTTP error statuses are not raised: whatever JSON comes back is
        handed to the caller, which treats missing data as empty.
        """
        self.log_event(
            "storefront_request",
            store_domain=self.store_domain,
            api_version=self.api_version,
            variant=query.variant.value,
            variables=query.variables
        )

        try:
            with Timer() as timer:
                response = await self.client.post(self.endpoint, json=query.to_payload())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.log_error(e, "storefront_request_failed", store_domain=self.store_domain)
            raise ShopifyAPIError(reason=str(e) or type(e).__name__)

        body = safe_json_loads(response.text, default=_NOT_JSON)
        if body is _NOT_JSON:
            raise ShopifyAPIError(
                reason=f"Invalid JSON in response (HTTP {response.status_code})",
                status_code=response.status_code
            )

        self.log_event(
            "storefront_response",
            status_code=response.status_code,
            duration_ms=round(timer.duration_ms, 2)
        )

        if isinstance(body, dict) and body.get("errors"):
            self.log_event(
                "graphql_errors_ignored",
                level="warning",
                status_code=response.status_code,
                errors=body["errors"]
            )

        return body
