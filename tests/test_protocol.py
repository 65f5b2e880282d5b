"""Tests for the MCP protocol adapter."""

import json

import pytest
from mcp import types
from mcp.shared.exceptions import McpError

from ghl_mcp.exceptions import GHLAPIError, ToolArgumentError
from ghl_mcp.protocol import ProtocolAdapter
from ghl_mcp.tools.registry import ToolRegistry

from fakes import FakeGroup


@pytest.fixture
def adapter():
    registry = ToolRegistry()
    registry.register(FakeGroup("contacts", ["get_contact", "create_contact"]))
    registry.register(FakeGroup("missing", ["get_missing"], error=GHLAPIError(404, "Not found")))
    registry.register(FakeGroup("broken", ["get_broken"], error=GHLAPIError(502, "Bad gateway")))
    registry.register(FakeGroup("strict", ["get_strict"], error=ToolArgumentError("get_strict", "missing 'id'")))
    return ProtocolAdapter(registry)


class TestListTools:
    def test_lists_registry_descriptors(self, adapter):
        result = adapter.list_tools()
        names = [t.name for t in result.tools]
        assert names == ["get_contact", "create_contact", "get_missing", "get_broken", "get_strict"]
        assert result.tools[0].inputSchema == {"type": "object", "properties": {}}

    def test_empty_registry(self):
        assert ProtocolAdapter(ToolRegistry()).list_tools().tools == []


class TestCallTool:
    """Verify success payloads and error code mapping."""

    @pytest.mark.asyncio
    async def test_success_is_json_text(self, adapter):
        result = await adapter.call_tool("get_contact", {"contactId": "c1"})

        assert len(result.content) == 1
        content = result.content[0]
        assert content.type == "text"
        assert json.loads(content.text) == {
            "group": "contacts",
            "tool": "get_contact",
            "args": {"contactId": "c1"},
        }
        assert content.text.startswith("{\n  ")

    @pytest.mark.asyncio
    async def test_none_arguments(self, adapter):
        result = await adapter.call_tool("get_contact", None)
        assert json.loads(result.content[0].text)["args"] == {}

    @pytest.mark.asyncio
    async def test_unknown_tool_is_method_not_found(self, adapter):
        with pytest.raises(McpError) as exc_info:
            await adapter.call_tool("no_such_tool", {})
        assert exc_info.value.error.code == types.METHOD_NOT_FOUND
        assert exc_info.value.error.message == "Unknown tool: no_such_tool"

    @pytest.mark.asyncio
    async def test_not_found_is_invalid_request(self, adapter):
        with pytest.raises(McpError) as exc_info:
            await adapter.call_tool("get_missing", {})
        assert exc_info.value.error.code == types.INVALID_REQUEST
        assert exc_info.value.error.message.startswith("Tool execution failed: ")
        assert "404" in exc_info.value.error.message

    @pytest.mark.asyncio
    async def test_argument_error_is_invalid_request(self, adapter):
        with pytest.raises(McpError) as exc_info:
            await adapter.call_tool("get_strict", {})
        assert exc_info.value.error.code == types.INVALID_REQUEST

    @pytest.mark.asyncio
    async def test_upstream_failure_is_internal_error(self, adapter):
        with pytest.raises(McpError) as exc_info:
            await adapter.call_tool("get_broken", {})
        assert exc_info.value.error.code == types.INTERNAL_ERROR
        assert exc_info.value.error.message == (
            "Tool execution failed: GHL API Error (502): Bad gateway"
        )


class TestBuildServer:
    """Verify the low-level server is wired to the adapter."""

    def test_handlers_registered(self, adapter):
        server = adapter.build_server("ghl-mcp-server", "0.1.0")
        assert types.ListToolsRequest in server.request_handlers
        assert types.CallToolRequest in server.request_handlers

    @pytest.mark.asyncio
    async def test_list_handler_returns_tools(self, adapter):
        server = adapter.build_server("ghl-mcp-server", "0.1.0")
        handler = server.request_handlers[types.ListToolsRequest]

        result = await handler(types.ListToolsRequest(method="tools/list"))

        assert len(result.root.tools) == 5

    @pytest.mark.asyncio
    async def test_call_handler_raises_mcp_error(self, adapter):
        server = adapter.build_server("ghl-mcp-server", "0.1.0")
        handler = server.request_handlers[types.CallToolRequest]
        request = types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="no_such_tool", arguments={}),
        )

        with pytest.raises(McpError) as exc_info:
            await handler(request)
        assert exc_info.value.error.code == types.METHOD_NOT_FOUND
