"""Storefront GraphQL query templates and query selection."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from shared import ValidationError
from .types import LookupMode


VARIANTS_PER_PRODUCT = 10

PRODUCT_FIELDS = f"""
      id handle title availableForSale
      variants(first: {VARIANTS_PER_PRODUCT}) {{
        nodes {{
          id title availableForSale currentlyNotInStock quantityAvailable
        }}
      }}
"""

PRODUCT_BY_HANDLE_QUERY = f"""
  query ProductByHandle($h: String!) {{
    product(handle: $h) {{{PRODUCT_FIELDS}    }}
  }}
"""

SEARCH_PRODUCTS_QUERY = f"""
  query SearchProducts($q: String!, $limit: Int!) {{
    products(first: $limit, query: $q) {{
      nodes {{{PRODUCT_FIELDS}      }}
    }}
  }}
"""


@dataclass(frozen=True)
class StorefrontQuery:
    """A GraphQL document plus its variables."""

    variant: LookupMode
    query: str
    variables: Dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        return {"query": self.query, "variables": self.variables}


def build_query(
    mode: Optional[str],
    search_term: Optional[str] = None,
    handle: Optional[str] = None,
    limit: int = 5
) -> StorefrontQuery:
    """Pick the query variant for the given arguments.

    By-handle wins whenever it is requested with a handle, even if a search
    term is also present. Empty strings count as absent.
    """
    if mode == LookupMode.BY_HANDLE.value and handle:
        return StorefrontQuery(
            variant=LookupMode.BY_HANDLE,
            query=PRODUCT_BY_HANDLE_QUERY,
            variables={"h": handle}
        )

    if search_term:
        return StorefrontQuery(
            variant=LookupMode.SEARCH,
            query=SEARCH_PRODUCTS_QUERY,
            variables={"q": search_term, "limit": limit}
        )

    raise ValidationError("Missing handle or searchTerm")
