"""Tool group protocol and descriptor for the GHL MCP tool infrastructure."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class ToolDescriptor:
    """Immutable metadata advertised for a tool before it is ever invoked.

    Attributes:
        name: Stable unique identifier (e.g. "create_contact").
        description: Human-readable summary shown to MCP clients.
        input_schema: JSON Schema object describing the arguments.
    """

    name: str
    description: str
    input_schema: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )

    def to_dict(self) -> dict[str, Any]:
        """Render in the MCP wire shape."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


@runtime_checkable
class ToolGroup(Protocol):
    """Protocol that every tool group must satisfy.

    A group owns a closed set of tool names. The registry relies on
    ``handles`` agreeing with ``list_descriptors`` and on ``execute``
    raising (never returning an error value) when the operation fails.
    """

    @property
    def group_id(self) -> str: ...

    def list_descriptors(self) -> list[ToolDescriptor]: ...

    def handles(self, name: str) -> bool: ...

    async def execute(self, name: str, arguments: dict[str, Any]) -> Any: ...
