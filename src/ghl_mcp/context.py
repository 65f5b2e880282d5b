"""Application context built once at startup and shared by every request."""

import logging
from dataclasses import dataclass

from ghl_mcp.clients.ghl import GHLApiClient, GHLConfig
from ghl_mcp.config import Settings
from ghl_mcp.protocol import ProtocolAdapter
from ghl_mcp.tools import ToolRegistry, build_registry

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything a request handler needs, wired together explicitly."""

    settings: Settings
    client: GHLApiClient
    registry: ToolRegistry
    adapter: ProtocolAdapter

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        """Build the client, registry and adapter from settings.

        Missing credentials are logged but do not stop startup; tool calls
        fail until they are configured.

        Raises:
            DuplicateToolError: If two tool groups claim the same name.
        """
        for name in settings.missing_credentials:
            logger.error(f"{name} is not set; GHL tool calls will fail")

        client = GHLApiClient(GHLConfig.from_settings(settings))
        registry = build_registry(client)
        logger.info(
            f"Tool registry built: {len(registry)} tools in {len(registry.groups)} groups"
        )
        return cls(
            settings=settings,
            client=client,
            registry=registry,
            adapter=ProtocolAdapter(registry),
        )
