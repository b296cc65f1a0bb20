"""Orchestration tools module."""

from .base import BaseTool, ToolContext, ToolDescriptor
from .registry import ToolRegistry, registry, register_tool
from .product_tools import ShopifyMCPTool

__all__ = [
    "BaseTool",
    "ToolContext",
    "ToolDescriptor",
    "ToolRegistry",
    "registry",
    "register_tool",
    "ShopifyMCPTool",
]
