"""MCP protocol adapter: translates tools/list and tools/call onto the registry."""

import json
import logging
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.shared.exceptions import McpError

from ghl_mcp.tools.registry import DispatchResult, ErrorKind, ToolRegistry

logger = logging.getLogger(__name__)

_ERROR_CODES = {
    ErrorKind.UNKNOWN_TOOL: types.METHOD_NOT_FOUND,
    ErrorKind.INVALID_REQUEST: types.INVALID_REQUEST,
    ErrorKind.UPSTREAM_FAILURE: types.INTERNAL_ERROR,
    ErrorKind.INTERNAL_ERROR: types.INTERNAL_ERROR,
}


def to_mcp_error(result: DispatchResult) -> McpError:
    """Map a failed dispatch to the JSON-RPC error sent to the client."""
    kind = result.error_kind or ErrorKind.INTERNAL_ERROR
    if kind == ErrorKind.UNKNOWN_TOOL:
        message = result.message or "Unknown tool"
    else:
        message = f"Tool execution failed: {result.message}"
    return McpError(types.ErrorData(code=_ERROR_CODES[kind], message=message))


def render_value(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


class ProtocolAdapter:
    """Serves MCP tool requests from a ToolRegistry.

    The adapter holds no state of its own; every call goes straight to the
    registry, so one adapter can back any number of sessions.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def list_tools(self) -> types.ListToolsResult:
        tools = [
            types.Tool(
                name=d.name,
                description=d.description,
                inputSchema=d.input_schema,
            )
            for d in self._registry.list_all()
        ]
        return types.ListToolsResult(tools=tools)

    async def call_tool(
        self,
        name: str,
        arguments: dict[str, Any] | None = None,
    ) -> types.CallToolResult:
        """Run a tool and wrap its value as JSON text content.

        Raises:
            McpError: If the dispatch fails, with a code matching the
                failure kind.
        """
        result = await self._registry.dispatch(name, arguments)
        if not result.ok:
            raise to_mcp_error(result)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=render_value(result.value))]
        )

    def build_server(self, name: str, version: str) -> Server:
        """Create a low-level MCP server whose tool handlers use this adapter.

        Handlers go straight into ``request_handlers`` instead of through the
        ``call_tool`` decorator, which would turn an McpError into an
        ``isError`` tool result instead of a JSON-RPC error.
        """
        server: Server = Server(name, version=version)

        async def handle_list_tools(_: types.ListToolsRequest) -> types.ServerResult:
            return types.ServerResult(self.list_tools())

        async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
            return types.ServerResult(
                await self.call_tool(req.params.name, req.params.arguments)
            )

        server.request_handlers[types.ListToolsRequest] = handle_list_tools
        server.request_handlers[types.CallToolRequest] = handle_call_tool
        logger.info(f"MCP server '{name}' v{version} ready with {len(self._registry)} tools")
        return server
