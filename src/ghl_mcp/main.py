"""FastAPI application entry point for the GHL MCP server."""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ghl_mcp import SERVER_NAME, __version__
from ghl_mcp.api import CORSHeadersMiddleware, mount_sse, router
from ghl_mcp.config import Settings, get_settings
from ghl_mcp.context import AppContext

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    context: AppContext = app.state.context
    logger.info(f"Starting {SERVER_NAME} v{__version__}")
    logger.info(
        f"Serving {len(context.registry)} tools; "
        f"SSE endpoint {context.settings.sse_path}"
    )

    yield

    logger.info(f"Shutting down {SERVER_NAME}")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse({"error": "Not found"}, status_code=404)
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app(
    settings: Settings | None = None,
    context: AppContext | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to build the context from; defaults to the
            environment.
        context: Prebuilt context, used as-is (tests pass one with a
            custom registry).
    """
    if context is None:
        context = AppContext.from_settings(settings or get_settings())

    app = FastAPI(
        title="GHL MCP Server",
        description="GoHighLevel API exposed as Model Context Protocol tools",
        version=__version__,
        lifespan=lifespan,
        debug=context.settings.debug,
    )
    app.state.context = context

    app.add_middleware(CORSHeadersMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(router)
    mount_sse(app, context)

    return app


async def run_stdio(context: AppContext) -> None:
    """Serve the same tools over stdio for local MCP clients."""
    from mcp.server.stdio import stdio_server

    server = context.adapter.build_server(SERVER_NAME, __version__)
    logger.info("Starting MCP server on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run() -> None:
    """Console entry point; picks the transport from MCP_TRANSPORT."""
    settings = get_settings()

    if settings.mcp_transport == "stdio":
        asyncio.run(run_stdio(AppContext.from_settings(settings)))
        return

    import uvicorn

    uvicorn.run(
        "ghl_mcp.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


# Create app instance for uvicorn
app = create_app()


if __name__ == "__main__":
    run()
