"""Shopify Storefront domain."""

from .client import StorefrontClient
from .products import ProductLookupService, extract_products
from .queries import StorefrontQuery, build_query
from .types import (
    Availability,
    LookupArguments,
    LookupMode,
    LookupResponse,
    ProductAvailability,
    StorefrontProduct,
    StorefrontVariant,
    compute_availability,
)

__all__ = [
    "StorefrontClient",
    "ProductLookupService",
    "extract_products",
    "StorefrontQuery",
    "build_query",
    "Availability",
    "LookupArguments",
    "LookupMode",
    "LookupResponse",
    "ProductAvailability",
    "StorefrontProduct",
    "StorefrontVariant",
    "compute_availability",
]
