"""Tests for the GHL API client using httpx.MockTransport."""

import json

import httpx
import pytest

from ghl_mcp.clients.ghl import GHLApiClient, GHLConfig
from ghl_mcp.config import Settings
from ghl_mcp.exceptions import GHLAPIError, GHLConfigError


def _client(handler, token: str = "tok") -> GHLApiClient:
    config = GHLConfig(access_token=token, location_id="loc_1")
    return GHLApiClient(config, transport=httpx.MockTransport(handler))


class TestGHLConfig:
    def test_from_settings(self):
        settings = Settings(
            ghl_api_key="key",
            ghl_location_id="loc",
            ghl_base_url="https://example.test",
            request_timeout=5,
        )
        config = GHLConfig.from_settings(settings)
        assert config.access_token == "key"
        assert config.location_id == "loc"
        assert config.base_url == "https://example.test"
        assert config.timeout == 5.0

    def test_config_is_frozen(self):
        config = GHLConfig(access_token="tok")
        with pytest.raises(Exception):
            config.access_token = "other"


class TestRequest:
    """Verify request shaping and response handling."""

    @pytest.mark.asyncio
    async def test_sends_auth_and_version_headers(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json={"contact": {"id": "c1"}})

        result = await _client(handler).request(
            "GET", "/contacts/c1", params={"locationId": "loc_1"}
        )

        request = seen["request"]
        assert result == {"contact": {"id": "c1"}}
        assert request.headers["Authorization"] == "Bearer tok"
        assert request.headers["Version"] == "2021-07-28"
        assert request.url.path == "/contacts/c1"
        assert request.url.params["locationId"] == "loc_1"

    @pytest.mark.asyncio
    async def test_sends_json_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"id": "new"})

        result = await _client(handler).request("POST", "/contacts/", json_body={"firstName": "Ada"})

        assert seen["body"] == {"firstName": "Ada"}
        assert result == {"id": "new"}

    @pytest.mark.asyncio
    async def test_empty_body_is_success(self):
        result = await _client(lambda r: httpx.Response(204)).request("DELETE", "/contacts/c1")
        assert result == {"success": True}

    @pytest.mark.asyncio
    async def test_non_json_body_is_returned_raw(self):
        handler = lambda r: httpx.Response(200, text="plain transcript")
        result = await _client(handler).request("GET", "/transcription/download")
        assert result == {"success": True, "raw": "plain transcript"}

    @pytest.mark.asyncio
    async def test_not_found_raises_with_marker(self):
        handler = lambda r: httpx.Response(404, json={"message": "Contact not found"})

        with pytest.raises(GHLAPIError) as exc_info:
            await _client(handler).request("GET", "/contacts/missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.is_not_found
        assert "404" in str(exc_info.value)
        assert "Contact not found" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_error_message_list_is_joined(self):
        handler = lambda r: httpx.Response(422, json={"message": ["name is required", "bad email"]})

        with pytest.raises(GHLAPIError, match="name is required; bad email"):
            await _client(handler).request("POST", "/contacts/", json_body={})

    @pytest.mark.asyncio
    async def test_missing_token_raises_before_request(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("request should not be sent")

        with pytest.raises(GHLConfigError):
            await _client(handler, token="").request("GET", "/contacts/c1")
