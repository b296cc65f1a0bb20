"""Tool registry for tool discovery and dispatch."""

from typing import Any, Dict, List, Optional, Type

from .base import BaseTool, ToolContext, ToolDescriptor
from shared import ToolNotFoundError, ToolResult, get_logger


logger = get_logger(__name__)


class ToolRegistry:
    """Registry for managing available tools."""

    _instance: Optional["ToolRegistry"] = None
    _tools: Dict[str, BaseTool] = {}

    def __new__(cls) -> "ToolRegistry":
        """Singleton pattern for global registry."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._tools = {}
        return cls._instance

    def register(self, tool: BaseTool) -> None:
        """Register a tool; a second tool with the same name is skipped."""
        if tool.name in self._tools:
            logger.warning("tool_already_registered", tool_name=tool.name)
            return

        self._tools[tool.name] = tool
        logger.info("tool_registered", tool_name=tool.name)

    def get(self, tool_name: Any) -> BaseTool:
        """Get a tool by name."""
        if not isinstance(tool_name, str) or tool_name not in self._tools:
            raise ToolNotFoundError(tool_name)
        return self._tools[tool_name]

    def get_descriptors(self) -> List[ToolDescriptor]:
        """Descriptors for all tools, in registration order."""
        return [tool.get_descriptor() for tool in self._tools.values()]

    async def execute_tool(
        self,
        tool_name: Any,
        arguments: Dict[str, Any],
        context: ToolContext
    ) -> ToolResult:
        """Execute a tool by name."""
        tool = self.get(tool_name)
        return await tool.execute_with_logging(arguments, context)


# Global registry instance
registry = ToolRegistry()


def register_tool(cls: Type[BaseTool]) -> Type[BaseTool]:
    """Class decorator that registers one instance of the tool."""
    registry.register(cls())
    return cls
