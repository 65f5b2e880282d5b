"""Configuration and environment loading for the GHL MCP server."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # GoHighLevel API
    ghl_api_key: str = ""
    ghl_base_url: str = "https://services.leadconnectorhq.com"
    ghl_api_version: str = "2021-07-28"
    ghl_location_id: str = ""
    request_timeout: float = 30.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # MCP transport
    mcp_transport: Literal["sse", "stdio"] = "sse"
    sse_path: str = "/sse"
    messages_path: str = "/messages/"

    @property
    def missing_credentials(self) -> list[str]:
        """Environment variables that must be set for tool calls to succeed."""
        missing = []
        if not self.ghl_api_key:
            missing.append("GHL_API_KEY")
        if not self.ghl_location_id:
            missing.append("GHL_LOCATION_ID")
        return missing


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
