"""Shared type definitions across the application."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, TypeVar, Generic


T = TypeVar("T")


@dataclass
class ToolResult(Generic[T]):
    """Standard result from tool execution."""

    success: bool
    data: Optional[T] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def ok(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "ToolResult[T]":
        """Create successful result."""
        return cls(success=True, data=data, metadata=metadata)
