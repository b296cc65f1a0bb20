"""Base tool abstraction for invocable capabilities."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
import time

import httpx

from shared import ToolResult, LoggerMixin
from infrastructure.config.settings import Settings


class ToolDescriptor(BaseModel):
    """Static metadata a caller uses to discover a tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    input_schema: Dict[str, str] = Field(default_factory=dict)
    output_schema: Dict[str, str] = Field(default_factory=dict)


class ToolContext:
    """Per-invocation context handed to a tool.

    Carries the settings bound to the app and, in tests, the
    transport the upstream client should use.
    """

    def __init__(
        self,
        request_id: str,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.request_id = request_id
        self.settings = settings
        self.transport = transport


class BaseTool(ABC, LoggerMixin):
    """Base class for all tools."""

    name: str = ""
    description: str = ""
    input_schema: Dict[str, str] = {}
    output_schema: Dict[str, str] = {}

    def __init__(self):
        if not self.name:
            self.name = self.__class__.__name__.replace("Tool", "")
        super().__init__()

    @abstractmethod
    async def execute(self, arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
        """Run the tool.

        Failures are raised as ToolRouterException subclasses so the API
        layer can map them to a status code.
        """

    def get_descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=dict(self.input_schema),
            output_schema=dict(self.output_schema)
        )

    async def execute_with_logging(
        self,
        arguments: Dict[str, Any],
        context: ToolContext
    ) -> ToolResult:
        """Execute tool with automatic logging."""
        start_time = time.perf_counter()

        self.log_event(
            "tool_execution_started",
            tool_name=self.name,
            request_id=context.request_id,
            arguments=arguments
        )

        try:
            result = await self.execute(arguments, context)
        except Exception as e:
            self.log_error(
                e,
                "tool_execution_failed",
                tool_name=self.name,
                request_id=context.request_id,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2)
            )
            raise

        self.log_event(
            "tool_execution_completed",
            tool_name=self.name,
            request_id=context.request_id,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            success=result.success,
            result=result.metadata
        )

        return result
