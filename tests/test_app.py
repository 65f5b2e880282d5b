"""Tests for the HTTP front door."""

import pytest
from httpx import ASGITransport, AsyncClient
from unittest.mock import MagicMock

from ghl_mcp import __version__
from ghl_mcp.clients.ghl import GHLApiClient
from ghl_mcp.config import Settings
from ghl_mcp.context import AppContext
from ghl_mcp.main import create_app
from ghl_mcp.protocol import ProtocolAdapter
from ghl_mcp.tools.registry import ToolRegistry

from fakes import FakeGroup


def _context(*groups: FakeGroup) -> AppContext:
    registry = ToolRegistry()
    for group in groups:
        registry.register(group)
    return AppContext(
        settings=Settings(ghl_api_key="k", ghl_location_id="loc"),
        client=MagicMock(spec=GHLApiClient),
        registry=registry,
        adapter=ProtocolAdapter(registry),
    )


def _client(context: AppContext) -> AsyncClient:
    app = create_app(context=context)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestHealth:
    @pytest.mark.asyncio
    async def test_health_reports_live_tool_count(self):
        context = _context(FakeGroup("g1", ["a", "b"]), FakeGroup("g2", ["c"]))

        async with _client(context) as client:
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "server": "ghl-mcp-server",
            "version": __version__,
            "tools": 3,
            "endpoint": "/sse",
        }

    @pytest.mark.asyncio
    async def test_root_is_health(self):
        context = _context(FakeGroup("g1", ["a"]))

        async with _client(context) as client:
            response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["tools"] == len(context.registry.list_all())

    @pytest.mark.asyncio
    async def test_empty_registry(self):
        async with _client(_context()) as client:
            response = await client.get("/health")
        assert response.json()["tools"] == 0


class TestToolListing:
    @pytest.mark.asyncio
    async def test_lists_tools_with_schema(self):
        context = _context(FakeGroup("g1", ["a", "b"]))

        async with _client(context) as client:
            response = await client.get("/tools")

        body = response.json()
        assert body["count"] == 2
        assert body["tools"][0] == {
            "name": "a",
            "description": "Fake a",
            "inputSchema": {"type": "object", "properties": {}},
        }


class TestCors:
    """Verify CORS headers and preflight handling."""

    @pytest.mark.asyncio
    async def test_options_is_empty_200(self):
        async with _client(_context()) as client:
            response = await client.options("/anything/at/all")

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
        assert response.headers["access-control-allow-headers"] == (
            "Content-Type, Accept, Authorization"
        )

    @pytest.mark.asyncio
    async def test_headers_on_normal_response(self):
        async with _client(_context()) as client:
            response = await client.get("/health")
        assert response.headers["access-control-allow-origin"] == "*"


class TestNotFound:
    @pytest.mark.asyncio
    async def test_unknown_route(self):
        async with _client(_context()) as client:
            response = await client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}
        assert response.headers["access-control-allow-origin"] == "*"


class TestMessages:
    @pytest.mark.asyncio
    async def test_post_without_session_is_rejected(self):
        async with _client(_context()) as client:
            response = await client.post("/messages/", json={"jsonrpc": "2.0"})
        assert response.status_code == 400
