"""Shared module for common utilities and types."""

from .types import ToolResult

from .exceptions import (
    ToolRouterException,
    ClientInputError,
    InvalidJSONError,
    ToolNotFoundError,
    ValidationError,
    ConfigurationError,
    ShopifyAPIError,
)

from .logging import (
    setup_logging,
    get_logger,
    LoggerMixin,
    RequestLogger,
)

from .utils import (
    generate_id,
    generate_request_id,
    normalize_store_domain,
    safe_json_loads,
    Timer,
)

__all__ = [
    # Types
    "ToolResult",
    # Exceptions
    "ToolRouterException",
    "ClientInputError",
    "InvalidJSONError",
    "ToolNotFoundError",
    "ValidationError",
    "ConfigurationError",
    "ShopifyAPIError",
    # Logging
    "setup_logging",
    "get_logger",
    "LoggerMixin",
    "RequestLogger",
    # Utils
    "generate_id",
    "generate_request_id",
    "normalize_store_domain",
    "safe_json_loads",
    "Timer",
]
