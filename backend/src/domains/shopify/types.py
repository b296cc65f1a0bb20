"""Shopify Storefront domain types."""

from enum import Enum
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class Availability(str, Enum):
    """Simplified stock state of a product."""

    IN_STOCK = "in_stock"
    BACKORDER_POSSIBLE = "backorder_possible"
    SOLD_OUT = "sold_out"


class LookupMode(str, Enum):
    """Query variants the lookup tool can run."""

    BY_HANDLE = "byHandle"
    SEARCH = "search"


def _text_or_none(v):
    """Scalars become strings; objects, lists and null become None."""
    if isinstance(v, (str, int, float)):
        return str(v)
    return None


class StorefrontVariant(BaseModel):
    """Product variant as returned by the Storefront API."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    title: Optional[str] = None
    available_for_sale: bool = Field(default=False, alias="availableForSale")
    quantity_available: Optional[int] = Field(default=None, alias="quantityAvailable")

    @field_validator("id", "title", mode="before")
    @classmethod
    def convert_to_string(cls, v):
        return _text_or_none(v)

    @field_validator("available_for_sale", mode="before")
    @classmethod
    def coerce_null_flag(cls, v):
        return bool(v) if v is not None else False

    @field_validator("quantity_available", mode="before")
    @classmethod
    def drop_non_integer_quantity(cls, v):
        # Anything but a plain integer is unknown stock.
        if isinstance(v, bool) or not isinstance(v, int):
            return None
        return v

    def to_response(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "availableForSale": self.available_for_sale,
            "quantityAvailable": self.quantity_available,
        }


class StorefrontProduct(BaseModel):
    """Product as returned by the Storefront API.

    Variants arrive as a GraphQL connection (``{"nodes": [...]}``) and are
    flattened on the way in.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    handle: Optional[str] = None
    title: Optional[str] = None
    available_for_sale: bool = Field(default=False, alias="availableForSale")
    variants: List[StorefrontVariant] = Field(default_factory=list)

    @field_validator("id", "handle", "title", mode="before")
    @classmethod
    def convert_to_string(cls, v):
        return _text_or_none(v)

    @field_validator("available_for_sale", mode="before")
    @classmethod
    def coerce_null_flag(cls, v):
        return bool(v) if v is not None else False

    @field_validator("variants", mode="before")
    @classmethod
    def flatten_connection(cls, v):
        if isinstance(v, dict):
            v = v.get("nodes")
        if not isinstance(v, list):
            return []
        return [node for node in v if isinstance(node, dict)]

    @property
    def availability(self) -> Availability:
        return compute_availability(
            self.available_for_sale,
            [variant.quantity_available for variant in self.variants]
        )

    def to_response(self) -> "ProductAvailability":
        """Convert to the simplified availability model."""
        return ProductAvailability(
            id=self.id,
            handle=self.handle,
            title=self.title,
            availability=self.availability,
            variants=[variant.to_response() for variant in self.variants]
        )


class ProductAvailability(BaseModel):
    """Normalized product returned to tool callers."""

    id: Optional[str] = None
    handle: Optional[str] = None
    title: Optional[str] = None
    availability: Availability
    variants: List[Dict[str, Any]] = Field(default_factory=list)


class LookupArguments(BaseModel):
    """Arguments accepted by the product lookup tool."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    mode: Optional[str] = None
    search_term: Optional[str] = Field(default=None, alias="searchTerm")
    handle: Optional[str] = None
    limit: StrictInt = Field(default=5, ge=1, le=250)

    @field_validator("mode", "search_term", "handle", mode="before")
    @classmethod
    def ignore_non_string_selector(cls, v):
        return v if isinstance(v, str) else None

    @field_validator("limit", mode="before")
    @classmethod
    def default_null_limit(cls, v):
        return 5 if v is None else v


class LookupResponse(BaseModel):
    """Envelope returned by a successful invocation."""

    products: List[ProductAvailability] = Field(default_factory=list)
    matched_root_intent: Optional[str] = Field(default=None, serialization_alias="matchedRootIntent")

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def compute_availability(
    available_for_sale: bool,
    quantities: List[Optional[int]]
) -> Availability:
    """Map a sale flag and variant quantities to an Availability.

    Null quantities count as no stock.
    """
    if not available_for_sale:
        return Availability.SOLD_OUT
    if any(q is not None and q > 0 for q in quantities):
        return Availability.IN_STOCK
    return Availability.BACKORDER_POSSIBLE
