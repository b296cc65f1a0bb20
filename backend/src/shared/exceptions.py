"""Custom exceptions for the tool router."""

from typing import Optional, Dict, Any


class ToolRouterException(Exception):
    """Base exception for all tool router errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_response(self) -> Dict[str, Any]:
        """Body returned to the caller."""
        return {"error": self.message}


class ClientInputError(ToolRouterException):
    """Raised when the caller sent something we cannot act on."""

    status_code = 400


class InvalidJSONError(ClientInputError):
    """Raised when the request body is not valid JSON."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            message="Invalid JSON body",
            error_code="INVALID_JSON",
            details={"reason": reason}
        )


class ToolNotFoundError(ClientInputError):
    """Raised when a requested tool doesn't exist."""

    def __init__(self, tool_name: Any):
        super().__init__(
            message="Unknown tool",
            error_code="TOOL_NOT_FOUND",
            details={"tool_name": tool_name}
        )
        self.tool_name = tool_name


class ValidationError(ClientInputError):
    """Raised when tool arguments fail validation."""

    def __init__(
        self,
        message: str,
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={"reason": reason, **(details or {})}
        )
        self.reason = reason

    def to_response(self) -> Dict[str, Any]:
        body = super().to_response()
        if self.reason:
            body["details"] = self.reason
        return body


class ConfigurationError(ToolRouterException):
    """Raised when required configuration is missing.

    The response carries a presence marker per value. Secrets are reported
    only as ``SET`` or ``MISSING``.
    """

    def __init__(
        self,
        missing: list,
        status: Dict[str, str]
    ):
        super().__init__(
            message="Missing Shopify configuration",
            error_code="CONFIGURATION_ERROR",
            details={"missing": missing}
        )
        self.missing = missing
        self.status = status

    def to_response(self) -> Dict[str, Any]:
        return {**super().to_response(), **self.status}


class ShopifyAPIError(ToolRouterException):
    """Raised when the Storefront API call fails at the transport level."""

    def __init__(
        self,
        reason: str,
        status_code: Optional[int] = None
    ):
        super().__init__(
            message="Error fetching from Shopify",
            error_code="SHOPIFY_API_ERROR",
            details={"reason": reason, "upstream_status": status_code}
        )
        self.reason = reason
        self.upstream_status = status_code

    def to_response(self) -> Dict[str, Any]:
        return {**super().to_response(), "details": self.reason}
