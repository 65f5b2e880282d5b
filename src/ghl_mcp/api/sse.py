"""MCP over Server-Sent Events."""

import logging

from fastapi import FastAPI, Request
from mcp.server.sse import SseServerTransport
from starlette.responses import Response

from ghl_mcp import SERVER_NAME, __version__
from ghl_mcp.context import AppContext

logger = logging.getLogger(__name__)


def mount_sse(app: FastAPI, context: AppContext) -> SseServerTransport:
    """Serve the MCP session on ``sse_path`` and accept client posts on ``messages_path``.

    Each GET opens its own session against the shared protocol adapter.
    """
    settings = context.settings
    transport = SseServerTransport(settings.messages_path)
    server = context.adapter.build_server(SERVER_NAME, __version__)

    async def handle_sse(request: Request) -> Response:
        client = request.client.host if request.client else "unknown"
        logger.info(f"SSE session opened by {client}")
        async with transport.connect_sse(
            request.scope, request.receive, request._send
        ) as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
        logger.info(f"SSE session closed for {client}")
        return Response()

    app.add_api_route(settings.sse_path, handle_sse, methods=["GET"], include_in_schema=False)
    app.mount(settings.messages_path, app=transport.handle_post_message)
    return transport
