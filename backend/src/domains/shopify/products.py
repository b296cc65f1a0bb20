"""Product lookup against the Storefront API."""

from typing import List, Any

from shared import get_logger
from .client import StorefrontClient
from .queries import StorefrontQuery, build_query
from .types import (
    LookupArguments,
    LookupMode,
    LookupResponse,
    StorefrontProduct,
)


logger = get_logger(__name__)


def _get(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


def extract_products(variant: LookupMode, payload: Any) -> List[StorefrontProduct]:
    """Pull raw products out of a Storefront response.

    Missing ``data``, ``product`` or ``products.nodes`` yield an empty list.
    """
    data = _get(payload, "data")

    if variant is LookupMode.BY_HANDLE:
        product = _get(data, "product")
        nodes = [product] if product else []
    else:
        nodes = _get(_get(data, "products"), "nodes") or []
        if not isinstance(nodes, list):
            nodes = []

    return [
        StorefrontProduct.model_validate(node)
        for node in nodes
        if isinstance(node, dict)
    ]


class ProductLookupService:
    """Runs one product lookup and shapes the result."""

    def __init__(self, client: StorefrontClient):
        self.client = client

    @staticmethod
    def plan(arguments: LookupArguments) -> StorefrontQuery:
        """Choose the query variant for the arguments."""
        return build_query(
            mode=arguments.mode,
            search_term=arguments.search_term,
            handle=arguments.handle,
            limit=arguments.limit
        )

    async def lookup(
        self,
        arguments: LookupArguments,
        query: StorefrontQuery
    ) -> LookupResponse:
        payload = await self.client.execute(query)
        products = extract_products(query.variant, payload)

        logger.info(
            "products_normalized",
            variant=query.variant.value,
            count=len(products)
        )

        return LookupResponse(
            products=[product.to_response() for product in products],
            matched_root_intent=arguments.mode
        )
