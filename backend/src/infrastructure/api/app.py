"""FastAPI application setup."""

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Optional

from shared import ToolRouterException, setup_logging, get_logger
from infrastructure.config.settings import Settings, get_settings
from orchestration.tools import registry


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings

    setup_logging(
        log_level=settings.log_level,
        json_logs=settings.log_json
    )

    logger.info(
        "starting_tool_router",
        version=settings.app_version,
        tools=[descriptor.name for descriptor in registry.get_descriptors()],
        config=settings.mask_sensitive()
    )

    yield

    logger.info("shutting_down_tool_router")


async def tool_router_exception_handler(
    request: Request,
    exc: ToolRouterException
) -> JSONResponse:
    """Render a ToolRouterException with its own status and body."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "request_rejected",
        path=request.url.path,
        status_code=exc.status_code,
        error_code=exc.error_code,
        details=exc.details
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def not_found_handler(
    request: Request,
    exc: StarletteHTTPException
):
    """Unknown paths and wrong methods are both plain-text 404s."""
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return await http_exception_handler(request, exc)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create FastAPI application."""
    settings = settings or get_settings()

    # No docs or schema routes: only the two tool endpoints are served.
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None
    )
    app.state.settings = settings

    # No CORS middleware: preflight OPTIONS must fall through to the 404 handler.
    app.add_exception_handler(ToolRouterException, tool_router_exception_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    from .routes import router
    app.include_router(router)

    return app


# Create app instance
app = create_app()
