"""Tool registry: maps every tool name to exactly one tool group."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ghl_mcp.exceptions import DuplicateToolError, GHLAPIError, ToolArgumentError
from ghl_mcp.tools.base import ToolDescriptor, ToolGroup

logger = logging.getLogger(__name__)

NOT_FOUND_MARKER = "404"


class ErrorKind(str, Enum):
    """Classification of a failed dispatch."""

    UNKNOWN_TOOL = "unknown_tool"
    INVALID_REQUEST = "invalid_request"  # Caller-correctable
    UPSTREAM_FAILURE = "upstream_failure"  # GHL API failed
    INTERNAL_ERROR = "internal_error"  # Routing defect


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one dispatch: either a value or an error, never both."""

    ok: bool
    value: Any = None
    error_kind: ErrorKind | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if self.ok and (self.error_kind is not None or self.message is not None):
            raise ValueError("A successful DispatchResult cannot carry an error")
        if not self.ok and (self.error_kind is None or self.value is not None):
            raise ValueError("A failed DispatchResult needs an error kind and no value")

    @classmethod
    def success(cls, value: Any) -> DispatchResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> DispatchResult:
        return cls(ok=False, error_kind=kind, message=message)


def classify_failure(error: BaseException) -> ErrorKind:
    """Decide whether a failed execution was the caller's fault.

    Argument errors and upstream "not found" responses are caller-correctable;
    anything else is an upstream failure.
    """
    if isinstance(error, ToolArgumentError):
        return ErrorKind.INVALID_REQUEST
    if isinstance(error, GHLAPIError) and error.is_not_found:
        return ErrorKind.INVALID_REQUEST
    if NOT_FOUND_MARKER in str(error):
        return ErrorKind.INVALID_REQUEST
    return ErrorKind.UPSTREAM_FAILURE


def _error_message(error: BaseException) -> str:
    return str(error) or type(error).__name__


class ToolRegistry:
    """Central registry that routes tool names to their owning group.

    Groups are registered once at startup, in a fixed order. Registration
    rejects any name that another group already owns or claims, so after
    startup the name table is a partition of the full tool set and is never
    written again.
    """

    def __init__(self) -> None:
        self._groups: list[ToolGroup] = []
        self._owners: dict[str, ToolGroup] = {}

    def register(self, group: ToolGroup) -> None:
        """Register a tool group.

        Raises:
            DuplicateToolError: If any of the group's tool names collides
                with a name owned or claimed by an already registered group.
            ValueError: If the group's membership check disagrees with its
                own descriptors.
        """
        descriptors = group.list_descriptors()
        names: list[str] = []
        seen: set[str] = set()

        for descriptor in descriptors:
            name = descriptor.name
            if name in seen:
                raise DuplicateToolError(name, group.group_id, group.group_id)
            seen.add(name)
            if not group.handles(name):
                raise ValueError(
                    f"Group '{group.group_id}' lists '{name}' but does not handle it"
                )
            owner = self._owners.get(name) or self._claimant(name)
            if owner is not None:
                raise DuplicateToolError(name, owner.group_id, group.group_id)
            names.append(name)

        for name in self._owners:
            if group.handles(name):
                raise DuplicateToolError(
                    name, self._owners[name].group_id, group.group_id
                )

        self._groups.append(group)
        for name in names:
            self._owners[name] = group

        logger.info(f"Registered tool group '{group.group_id}' with {len(names)} tools")

    def _claimant(self, name: str) -> ToolGroup | None:
        """First registered group whose membership check claims ``name``."""
        for group in self._groups:
            if group.handles(name):
                return group
        return None

    def list_all(self) -> list[ToolDescriptor]:
        """All descriptors, in group registration order."""
        descriptors: list[ToolDescriptor] = []
        for group in self._groups:
            descriptors.extend(group.list_descriptors())
        return descriptors

    def group_for(self, name: str) -> ToolGroup | None:
        return self._owners.get(name)

    @property
    def groups(self) -> list[ToolGroup]:
        return list(self._groups)

    async def dispatch(
        self,
        name: str,
        arguments: Mapping[str, Any] | None = None,
    ) -> DispatchResult:
        """Route a call to its owning group and normalise the outcome.

        Never raises for tool failures; every outcome is a DispatchResult.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            return DispatchResult.failure(
                ErrorKind.INVALID_REQUEST,
                f"Arguments for '{name}' must be an object, "
                f"got {type(arguments).__name__}",
            )

        try:
            group = self.group_for(name)
        except Exception as e:
            logger.exception(f"Failed to resolve tool {name}")
            return DispatchResult.failure(ErrorKind.INTERNAL_ERROR, _error_message(e))

        if group is None:
            logger.warning(f"Unknown tool requested: {name}")
            return DispatchResult.failure(ErrorKind.UNKNOWN_TOOL, f"Unknown tool: {name}")

        logger.info(f"Executing tool: {name} (group={group.group_id})")
        try:
            value = await group.execute(name, dict(arguments))
        except Exception as e:
            kind = classify_failure(e)
            logger.error(f"Tool {name} failed ({kind.value}): {_error_message(e)}")
            return DispatchResult.failure(kind, _error_message(e))

        logger.info(f"Tool {name} executed successfully")
        return DispatchResult.success(value)

    def __len__(self) -> int:
        return len(self._owners)

    def __contains__(self, name: str) -> bool:
        return name in self._owners
