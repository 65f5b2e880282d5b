"""Tests for ToolRegistry: registration, listing, and dispatch."""

import asyncio

import pytest

from ghl_mcp.exceptions import DuplicateToolError, GHLAPIError, ToolArgumentError
from ghl_mcp.tools.base import ToolGroup
from ghl_mcp.tools.registry import (
    DispatchResult,
    ErrorKind,
    ToolRegistry,
    classify_failure,
)

from fakes import FakeGroup, PrefixGroup


@pytest.fixture
def registry():
    """Empty registry."""
    return ToolRegistry()


# ---------------------------------------------------------------------------
# TestRegistration
# ---------------------------------------------------------------------------

class TestRegistration:
    """Verify group registration and the partition of tool names."""

    def test_fake_group_satisfies_protocol(self):
        assert isinstance(FakeGroup("g", ["a"]), ToolGroup)

    def test_register_group(self, registry):
        registry.register(FakeGroup("g1", ["a", "b"]))
        assert len(registry) == 2
        assert "a" in registry
        assert registry.group_for("b").group_id == "g1"

    def test_duplicate_across_groups_raises(self, registry):
        registry.register(FakeGroup("g1", ["a", "b"]))
        with pytest.raises(DuplicateToolError) as exc_info:
            registry.register(FakeGroup("g2", ["c", "b"]))
        assert exc_info.value.tool_name == "b"
        assert exc_info.value.existing_group == "g1"
        assert exc_info.value.new_group == "g2"

    def test_failed_registration_records_nothing(self, registry):
        registry.register(FakeGroup("g1", ["a"]))
        with pytest.raises(DuplicateToolError):
            registry.register(FakeGroup("g2", ["c", "a"]))
        assert "c" not in registry
        assert len(registry.groups) == 1

    def test_duplicate_within_group_raises(self, registry):
        with pytest.raises(DuplicateToolError):
            registry.register(FakeGroup("g1", ["a", "a"]))

    def test_membership_overlap_with_earlier_group_raises(self, registry):
        """A name claimed by an earlier group's handles() is a duplicate."""
        registry.register(PrefixGroup("ghl", ["ghl_one"], prefix="ghl_"))
        with pytest.raises(DuplicateToolError):
            registry.register(FakeGroup("other", ["ghl_two"]))

    def test_membership_overlap_with_later_group_raises(self, registry):
        """A later group may not claim names another group already owns."""
        registry.register(FakeGroup("first", ["ghl_one"]))
        with pytest.raises(DuplicateToolError):
            registry.register(PrefixGroup("ghl", ["ghl_two"], prefix="ghl_"))

    def test_group_must_handle_its_own_descriptors(self, registry):
        class Broken(FakeGroup):
            def handles(self, name: str) -> bool:
                return False

        with pytest.raises(ValueError, match="does not handle"):
            registry.register(Broken("broken", ["a"]))


# ---------------------------------------------------------------------------
# TestListing
# ---------------------------------------------------------------------------

class TestListing:
    """Verify list_all ordering and length."""

    def test_empty_registry_lists_nothing(self, registry):
        assert registry.list_all() == []
        assert len(registry) == 0

    def test_list_all_in_registration_order(self, registry):
        registry.register(FakeGroup("g1", ["b", "a"]))
        registry.register(FakeGroup("g2", ["c"]))
        assert [d.name for d in registry.list_all()] == ["b", "a", "c"]

    def test_list_length_matches_sum_of_groups(self, registry):
        groups = [FakeGroup(f"g{i}", [f"t{i}_{j}" for j in range(i + 1)]) for i in range(4)]
        for group in groups:
            registry.register(group)
        assert len(registry.list_all()) == sum(len(g.list_descriptors()) for g in groups)

    def test_list_all_is_stable(self, registry):
        registry.register(FakeGroup("g1", ["a", "b"]))
        assert registry.list_all() == registry.list_all()


# ---------------------------------------------------------------------------
# TestDispatch
# ---------------------------------------------------------------------------

class TestDispatch:
    """Verify routing and error classification."""

    @pytest.mark.asyncio
    async def test_routes_to_owning_group(self, registry):
        g1 = FakeGroup("g1", ["a"])
        g2 = FakeGroup("g2", ["b"])
        registry.register(g1)
        registry.register(g2)

        result = await registry.dispatch("b", {"x": 1})

        assert result.ok
        assert result.value == {"group": "g2", "tool": "b", "args": {"x": 1}}
        assert g1.calls == []
        assert g2.calls == [("b", {"x": 1})]

    @pytest.mark.asyncio
    async def test_unknown_tool(self, registry):
        group = FakeGroup("g1", ["a"])
        registry.register(group)

        result = await registry.dispatch("nope", {})

        assert not result.ok
        assert result.error_kind == ErrorKind.UNKNOWN_TOOL
        assert result.message == "Unknown tool: nope"
        assert group.calls == []

    @pytest.mark.asyncio
    async def test_unknown_tool_on_empty_registry(self, registry):
        result = await registry.dispatch("anything")
        assert result.error_kind == ErrorKind.UNKNOWN_TOOL

    @pytest.mark.asyncio
    async def test_none_arguments_equal_empty(self, registry):
        group = FakeGroup("g1", ["a"])
        registry.register(group)

        omitted = await registry.dispatch("a")
        explicit = await registry.dispatch("a", {})

        assert omitted == explicit
        assert group.calls == [("a", {}), ("a", {})]

    @pytest.mark.asyncio
    async def test_non_mapping_arguments_are_invalid(self, registry):
        group = FakeGroup("g1", ["a"])
        registry.register(group)

        result = await registry.dispatch("a", ["not", "a", "dict"])

        assert result.error_kind == ErrorKind.INVALID_REQUEST
        assert group.calls == []

    @pytest.mark.asyncio
    async def test_not_found_upstream_is_invalid_request(self, registry):
        registry.register(FakeGroup("g1", ["a"], error=GHLAPIError(404, "Contact not found")))

        result = await registry.dispatch("a", {})

        assert result.error_kind == ErrorKind.INVALID_REQUEST
        assert "404" in result.message

    @pytest.mark.asyncio
    async def test_other_upstream_errors_are_upstream_failure(self, registry):
        registry.register(FakeGroup("g1", ["a"], error=GHLAPIError(500, "boom")))

        result = await registry.dispatch("a", {})

        assert result.error_kind == ErrorKind.UPSTREAM_FAILURE
        assert result.message == "GHL API Error (500): boom"

    @pytest.mark.asyncio
    async def test_argument_error_is_invalid_request(self, registry):
        registry.register(FakeGroup("g1", ["a"], error=ToolArgumentError("a", "missing 'id'")))

        result = await registry.dispatch("a", {})

        assert result.error_kind == ErrorKind.INVALID_REQUEST

    @pytest.mark.asyncio
    async def test_empty_error_message_falls_back_to_type(self, registry):
        registry.register(FakeGroup("g1", ["a"], error=RuntimeError()))

        result = await registry.dispatch("a", {})

        assert result.error_kind == ErrorKind.UPSTREAM_FAILURE
        assert result.message == "RuntimeError"

    @pytest.mark.asyncio
    async def test_concurrent_dispatch_across_groups(self, registry):
        """50 concurrent calls over 5 groups each land on their own group."""
        groups = [FakeGroup(f"g{i}", [f"tool_{i}"]) for i in range(5)]
        for group in groups:
            registry.register(group)

        calls = [(f"tool_{n % 5}", {"n": n}) for n in range(50)]
        results = await asyncio.gather(*(registry.dispatch(name, args) for name, args in calls))

        for (name, args), result in zip(calls, results):
            assert result.ok
            assert result.value["tool"] == name
            assert result.value["args"] == args
        for group in groups:
            assert len(group.calls) == 10


# ---------------------------------------------------------------------------
# TestDispatchResult
# ---------------------------------------------------------------------------

class TestDispatchResult:
    """Verify a result carries a value or an error, never both."""

    def test_success(self):
        result = DispatchResult.success({"id": 1})
        assert result.ok
        assert result.error_kind is None

    def test_failure(self):
        result = DispatchResult.failure(ErrorKind.INTERNAL_ERROR, "bad")
        assert not result.ok
        assert result.value is None

    def test_success_with_error_rejected(self):
        with pytest.raises(ValueError):
            DispatchResult(ok=True, value=1, error_kind=ErrorKind.INTERNAL_ERROR)

    def test_failure_without_kind_rejected(self):
        with pytest.raises(ValueError):
            DispatchResult(ok=False, message="bad")

    def test_classify_plain_not_found_message(self):
        assert classify_failure(RuntimeError("HTTP 404")) == ErrorKind.INVALID_REQUEST
        assert classify_failure(TimeoutError("timed out")) == ErrorKind.UPSTREAM_FAILURE

    def test_classify_api_not_found(self):
        assert classify_failure(GHLAPIError(404, "gone")) == ErrorKind.INVALID_REQUEST
        assert classify_failure(GHLAPIError(401, "unauthorized")) == ErrorKind.UPSTREAM_FAILURE
