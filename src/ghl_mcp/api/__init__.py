"""HTTP surface of the GHL MCP server."""

from ghl_mcp.api.cors import CORSHeadersMiddleware
from ghl_mcp.api.routes import router
from ghl_mcp.api.sse import mount_sse

__all__ = ["CORSHeadersMiddleware", "mount_sse", "router"]
