"""Outbound API clients."""

from ghl_mcp.clients.ghl import GHLApiClient, GHLConfig

__all__ = ["GHLApiClient", "GHLConfig"]
