"""FastAPI routes for health checks and tool discovery."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from ghl_mcp import SERVER_NAME, __version__
from ghl_mcp.context import AppContext

logger = logging.getLogger(__name__)

router = APIRouter()


def get_context(request: Request) -> AppContext:
    """Application context created by ``create_app``."""
    return request.app.state.context


Context = Annotated[AppContext, Depends(get_context)]


@router.get("/")
@router.get("/health")
async def health(context: Context) -> dict[str, Any]:
    """Health check endpoint.

    The tool count is read from the registry on every call.
    """
    return {
        "status": "healthy",
        "server": SERVER_NAME,
        "version": __version__,
        "tools": len(context.registry.list_all()),
        "endpoint": context.settings.sse_path,
    }


@router.get("/tools")
async def list_tools(context: Context) -> dict[str, Any]:
    """List every tool with its input schema."""
    tools = [d.to_dict() for d in context.registry.list_all()]
    return {"tools": tools, "count": len(tools)}
