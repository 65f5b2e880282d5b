"""Tool infrastructure for the GHL MCP server."""

from ghl_mcp.clients.ghl import GHLApiClient
from ghl_mcp.tools.base import ToolDescriptor, ToolGroup
from ghl_mcp.tools.groups import GROUP_CLASSES
from ghl_mcp.tools.registry import DispatchResult, ErrorKind, ToolRegistry


def build_registry(client: GHLApiClient) -> ToolRegistry:
    """Create the registry and register every GHL tool group against ``client``."""
    registry = ToolRegistry()
    for group_cls in GROUP_CLASSES:
        registry.register(group_cls(client))
    return registry


__all__ = [
    "DispatchResult",
    "ErrorKind",
    "ToolDescriptor",
    "ToolGroup",
    "ToolRegistry",
    "build_registry",
]
