"""Tests for declarative REST operations and RestToolGroup."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from ghl_mcp.clients.ghl import GHLApiClient
from ghl_mcp.exceptions import ToolArgumentError, UnknownToolError
from ghl_mcp.tools.rest import (
    RestToolGroup,
    alt,
    body,
    location,
    op,
    path,
    prepare_request,
    query,
)


GET_CONTACT = op(
    "get_thing",
    "Get a thing",
    "GET", "/things/{thingId}",
    path("thingId", "Thing ID"),
    location(),
    query("limit", "Maximum results", type="integer", default=20),
)

CREATE_THING = op(
    "create_thing",
    "Create a thing",
    "post", "/things/",
    location("body"),
    body("name", "Name", required=True),
    body("tags", "Tags", type="array"),
)

DELETE_COUPON = op(
    "delete_coupon",
    "Delete a coupon",
    "DELETE", "/coupon",
    *alt("body"),
    body("id", "Coupon ID", required=True),
)


class ThingTools(RestToolGroup):
    group_id = "things"
    operations = (GET_CONTACT, CREATE_THING)


def _client(location_id: str = "loc_1") -> MagicMock:
    client = MagicMock(spec=GHLApiClient)
    client.location_id = location_id
    client.request = AsyncMock(return_value={"ok": True})
    return client


# ---------------------------------------------------------------------------
# TestDescriptor
# ---------------------------------------------------------------------------

class TestDescriptor:
    """Verify the JSON Schema rendered for an operation."""

    def test_schema_properties(self):
        schema = GET_CONTACT.descriptor().input_schema
        assert schema["type"] == "object"
        assert schema["properties"]["thingId"] == {"type": "string", "description": "Thing ID"}
        assert schema["properties"]["limit"]["default"] == 20
        assert schema["required"] == ["thingId"]

    def test_array_gets_items(self):
        schema = CREATE_THING.descriptor().input_schema
        assert schema["properties"]["tags"]["items"] == {"type": "string"}

    def test_no_required_key_when_nothing_required(self):
        descriptor = op("list_all", "List", "GET", "/all", query("q")).descriptor()
        assert "required" not in descriptor.input_schema

    def test_method_is_uppercased(self):
        assert CREATE_THING.method == "POST"


# ---------------------------------------------------------------------------
# TestPrepareRequest
# ---------------------------------------------------------------------------

class TestPrepareRequest:
    """Verify arguments are split into path, query and body."""

    def test_path_and_query(self):
        request = prepare_request(GET_CONTACT, {"thingId": "t 1"}, "loc_1")
        assert request.method == "GET"
        assert request.path == "/things/t%201"
        assert request.params == {"locationId": "loc_1", "limit": 20}
        assert request.json_body is None

    def test_explicit_location_wins(self):
        request = prepare_request(GET_CONTACT, {"thingId": "t", "locationId": "other"}, "loc_1")
        assert request.params["locationId"] == "other"

    def test_location_omitted_without_configured_id(self):
        request = prepare_request(GET_CONTACT, {"thingId": "t"}, "")
        assert "locationId" not in request.params

    def test_missing_path_argument(self):
        with pytest.raises(ToolArgumentError, match="thingId"):
            prepare_request(GET_CONTACT, {}, "loc_1")

    def test_missing_required_body_argument(self):
        with pytest.raises(ToolArgumentError, match="name"):
            prepare_request(CREATE_THING, {}, "loc_1")

    def test_none_values_are_dropped(self):
        request = prepare_request(CREATE_THING, {"name": "n", "tags": None}, "loc_1")
        assert request.json_body == {"locationId": "loc_1", "name": "n"}

    def test_undeclared_arguments_go_to_body_for_writes(self):
        request = prepare_request(CREATE_THING, {"name": "n", "extra": 1}, "loc_1")
        assert request.json_body["extra"] == 1
        assert request.params == {}

    def test_undeclared_arguments_go_to_query_for_reads(self):
        request = prepare_request(GET_CONTACT, {"thingId": "t", "sort": "asc"}, "loc_1")
        assert request.params["sort"] == "asc"

    def test_delete_with_body_params(self):
        request = prepare_request(DELETE_COUPON, {"id": "c1"}, "loc_1")
        assert request.method == "DELETE"
        assert request.params == {}
        assert request.json_body == {"altId": "loc_1", "altType": "location", "id": "c1"}

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_path_argument_is_missing(self, blank):
        with pytest.raises(ToolArgumentError, match="thingId"):
            prepare_request(GET_CONTACT, {"thingId": blank}, "loc_1")

    def test_blank_required_body_argument_is_missing(self):
        with pytest.raises(ToolArgumentError, match="name"):
            prepare_request(CREATE_THING, {"name": ""}, "loc_1")

    def test_blank_location_falls_back_to_configured(self):
        op_with_location_path = op(
            "get_recording", "Get recording", "GET", "/locations/{locationId}/recording",
            location("path"),
        )
        request = prepare_request(op_with_location_path, {"locationId": ""}, "loc_1")
        assert request.path == "/locations/loc_1/recording"

    def test_blank_optional_argument_is_sent(self):
        request = prepare_request(CREATE_THING, {"name": "n", "extra": ""}, "loc_1")
        assert request.json_body["extra"] == ""


# ---------------------------------------------------------------------------
# TestRestToolGroup
# ---------------------------------------------------------------------------

class TestRestToolGroup:
    """Verify the group membership and execution path."""

    def test_membership(self):
        group = ThingTools(_client())
        assert group.handles("get_thing")
        assert not group.handles("get_things")
        assert len(group) == 2

    def test_descriptors_in_declaration_order(self):
        group = ThingTools(_client())
        assert [d.name for d in group.list_descriptors()] == ["get_thing", "create_thing"]

    @pytest.mark.asyncio
    async def test_execute_calls_client(self):
        client = _client()
        group = ThingTools(client)

        result = await group.execute("create_thing", {"name": "n"})

        assert result == {"ok": True}
        client.request.assert_awaited_once_with(
            "POST",
            "/things/",
            params={},
            json_body={"locationId": "loc_1", "name": "n"},
        )

    @pytest.mark.asyncio
    async def test_execute_unknown_name(self):
        client = _client()
        group = ThingTools(client)

        with pytest.raises(UnknownToolError):
            await group.execute("delete_thing", {})
        client.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_client_errors_propagate(self):
        client = _client()
        client.request.side_effect = RuntimeError("connection reset")
        group = ThingTools(client)

        with pytest.raises(RuntimeError, match="connection reset"):
            await group.execute("get_thing", {"thingId": "t"})
