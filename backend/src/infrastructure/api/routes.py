"""API routes."""

from fastapi import APIRouter, Depends, Request
from typing import Any, Dict, List, Optional

import httpx

from shared import (
    InvalidJSONError,
    RequestLogger,
    generate_request_id,
    get_logger,
    safe_json_loads,
)
from infrastructure.config.settings import Settings, get_settings
from orchestration.tools import ToolContext, registry

logger = get_logger(__name__)
router = APIRouter()

_INVALID_BODY = object()


def get_request_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_upstream_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for upstream calls; None means httpx's default network transport."""
    return None


@router.get("/toollist")
async def list_tools() -> List[Dict[str, Any]]:
    """List the tools this server can run."""
    return [descriptor.model_dump() for descriptor in registry.get_descriptors()]


@router.post("/run")
async def run_tool(
    request: Request,
    settings: Settings = Depends(get_request_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_upstream_transport)
) -> Dict[str, Any]:
    """Invoke one tool with its arguments."""
    request_id = generate_request_id()

    with RequestLogger(logger, request_id, "run_tool"):
        body = safe_json_loads(await request.body(), default=_INVALID_BODY)
        if body is _INVALID_BODY:
            raise InvalidJSONError()

        if not isinstance(body, dict):
            body = {}

        context = ToolContext(
            request_id=request_id,
            settings=settings,
            transport=transport
        )
        result = await registry.execute_tool(
            body.get("tool"),
            body.get("arguments") or {},
            context
        )

    return result.data
