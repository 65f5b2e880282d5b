"""GoHighLevel (LeadConnector) REST API wrapper."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from ghl_mcp.config import Settings
from ghl_mcp.exceptions import GHLAPIError, GHLConfigError

logger = logging.getLogger(__name__)


class GHLConfig(BaseModel):
    """Connection settings shared by every tool group.

    Frozen so that no component can change credentials or the base URL
    once the client has been handed out.
    """

    model_config = ConfigDict(frozen=True)

    access_token: str
    base_url: str = "https://services.leadconnectorhq.com"
    version: str = "2021-07-28"
    location_id: str = ""
    timeout: float = 30.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "GHLConfig":
        return cls(
            access_token=settings.ghl_api_key,
            base_url=settings.ghl_base_url,
            version=settings.ghl_api_version,
            location_id=settings.ghl_location_id,
            timeout=settings.request_timeout,
        )


class GHLApiClient:
    """Thin async wrapper around the GHL REST API.

    A fresh ``httpx.AsyncClient`` is opened per request, so concurrent tool
    calls share only the immutable ``GHLConfig``.
    """

    def __init__(
        self,
        config: GHLConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    @property
    def config(self) -> GHLConfig:
        return self._config

    @property
    def location_id(self) -> str:
        return self._config.location_id

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.access_token}",
            "Version": self._config.version,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request to the GHL API and return the decoded JSON body.

        Args:
            method: HTTP method
            path: API path, e.g. "/contacts/abc123"
            params: Query string parameters
            json_body: JSON request body

        Returns:
            The decoded response, or {"success": True} for empty bodies

        Raises:
            GHLConfigError: If no access token is configured
            GHLAPIError: If the API responds with a non-2xx status
            httpx.HTTPError: On transport failures (timeouts, resets)
        """
        if not self._config.access_token:
            raise GHLConfigError("GHL_API_KEY is not configured")

        logger.debug(f"GHL {method} {path} params={params}")

        async with httpx.AsyncClient(
            base_url=self._config.base_url,
            headers=self._headers(),
            timeout=self._config.timeout,
            transport=self._transport,
        ) as client:
            response = await client.request(
                method,
                path,
                params=params or None,
                json=json_body,
            )

        if response.is_error:
            raise _api_error(response)

        if not response.content:
            return {"success": True}

        try:
            return response.json()
        except ValueError:
            return {"success": True, "raw": response.text}


def _api_error(response: httpx.Response) -> GHLAPIError:
    """Build a GHLAPIError carrying the most specific upstream message."""
    try:
        body = response.json()
    except ValueError:
        body = response.text

    message = response.reason_phrase or "Request failed"
    if isinstance(body, dict):
        detail = body.get("message") or body.get("error") or body.get("msg")
        if isinstance(detail, list):
            detail = "; ".join(str(d) for d in detail)
        if detail:
            message = str(detail)
    elif body:
        message = str(body)

    return GHLAPIError(response.status_code, message, body)
