"""Custom exceptions for the GHL MCP server."""

from typing import Any


class GHLMCPError(Exception):
    """Base class for errors raised by the GHL MCP server."""


class DuplicateToolError(GHLMCPError):
    """Raised when two tool groups claim the same tool name."""

    def __init__(self, tool_name: str, existing_group: str, new_group: str) -> None:
        self.tool_name = tool_name
        self.existing_group = existing_group
        self.new_group = new_group
        super().__init__(
            f"Tool '{tool_name}' from group '{new_group}' is already "
            f"claimed by group '{existing_group}'"
        )


class UnknownToolError(GHLMCPError):
    """Raised when a tool group is asked to run a tool it does not own."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class ToolArgumentError(GHLMCPError):
    """Raised when tool arguments are missing or malformed."""

    def __init__(self, tool_name: str, message: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Invalid arguments for '{tool_name}': {message}")


class GHLConfigError(GHLMCPError):
    """Raised when the GHL client is used without required credentials."""


class GHLAPIError(GHLMCPError):
    """Raised when the GHL API responds with a non-success status."""

    def __init__(self, status_code: int, message: str, body: Any = None) -> None:
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(f"GHL API Error ({status_code}): {message}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404
