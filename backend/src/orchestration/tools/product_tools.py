"""Product lookup tool exposed to callers."""

from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from orchestration.tools.base import BaseTool, ToolContext
from orchestration.tools.registry import register_tool
from shared import ToolResult, ValidationError
from domains.shopify.client import StorefrontClient
from domains.shopify.products import ProductLookupService
from domains.shopify.types import LookupArguments


def _describe_errors(error: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


@register_tool
class ShopifyMCPTool(BaseTool):
    """Look up products by handle or search term and report availability."""

    name = "Shopify_MCP"
    description = "Lookup products and availability in Shopify Storefront"
    input_schema = {
        "mode": "string",
        "searchTerm": "string",
        "handle": "string",
        "limit": "number",
    }
    output_schema = {
        "products": "array",
        "matchedRootIntent": "string",
    }

    async def execute(
        self,
        arguments: Dict[str, Any],
        context: ToolContext
    ) -> ToolResult[Dict[str, Any]]:
        """
        Run one Storefront lookup.

        Args:
            arguments: ``mode``, ``searchTerm``, ``handle`` and ``limit``
                (default 5). Anything that is not an object counts as empty.
            context: per-request settings and upstream transport

        Returns:
            ``{"products": [...], "matchedRootIntent": mode}``
        """
        try:
            lookup_args = LookupArguments.model_validate(
                arguments if isinstance(arguments, dict) else {}
            )
        except PydanticValidationError as e:
            raise ValidationError("Invalid arguments", reason=_describe_errors(e))

        # Input problems are reported before configuration problems.
        query = ProductLookupService.plan(lookup_args)

        settings = context.settings
        settings.require_storefront_credentials()

        async with StorefrontClient(
            store_domain=settings.store_domain,
            access_token=settings.shopify_storefront_access_token,
            api_version=settings.shopify_api_version,
            timeout=settings.shopify_timeout,
            transport=context.transport
        ) as client:
            response = await ProductLookupService(client).lookup(lookup_args, query)

        return ToolResult.ok(
            data=response.to_response(),
            metadata={"variant": query.variant.value, "count": len(response.products)}
        )
