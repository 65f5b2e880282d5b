"""GHL MCP Server - GoHighLevel API exposed as Model Context Protocol tools."""

__version__ = "0.1.0"

SERVER_NAME = "ghl-mcp-server"

from ghl_mcp.exceptions import DuplicateToolError, GHLAPIError, GHLMCPError

__all__ = [
    "__version__",
    "SERVER_NAME",
    "DuplicateToolError",
    "GHLAPIError",
    "GHLMCPError",
]
