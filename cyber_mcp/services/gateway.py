# The module provides the shared GET helper used by every Cyber API tool.
# Date: 2025-09-02
# Version: 1.0.0

import asyncio
import httpx
from typing import Any, Dict, Mapping, Optional

from cyber_mcp.core.config import Settings, get_settings
from cyber_mcp.utils.logger import console


class CyberAPIError(Exception):
    """Base class for failures raised by the request gateway."""


class GatewayHTTPError(CyberAPIError):
    """
    Raised when the Cyber API answers with a non-success status code.
    Attributes:
        endpoint (str): The endpoint path that was requested.
        status_code (int): The HTTP status code of the response.
        reason (str): The reason phrase of the response.
    """
    def __init__(self, endpoint: str, status_code: int, reason: str):
        self.endpoint = endpoint
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to fetch {endpoint}: {status_code} {reason}")


class GatewayTimeoutError(CyberAPIError):
    """Raised when a request is aborted because its deadline elapsed."""
    def __init__(self, endpoint: str, timeout_ms: int):
        self.endpoint = endpoint
        self.timeout_ms = timeout_ms
        super().__init__(f"Request to {endpoint} was aborted after {timeout_ms} ms timeout")


class RequestGateway:
    """
    Issues GET requests against the Cyber API.

    Each call opens its own httpx.AsyncClient inside an ``async with`` block,
    so the connection is released whichever way the call ends. The gateway
    raises on every failure and never swallows one; turning failures into
    tool results is the job of the tools.
    """
    def __init__(self, settings: Optional[Settings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self._settings = settings or get_settings()
        self._transport = transport

    @property
    def settings(self) -> Settings:
        return self._settings

    def build_url(self, endpoint: str, params: Optional[Mapping[str, str]] = None) -> httpx.URL:
        url = httpx.URL(f"{self._settings.CYBER_API_BASE_URL}{endpoint}")
        for key, value in (params or {}).items():
            url = url.copy_add_param(key, value)
        return url

    def build_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._settings.CYBER_API_AUTH_KEY:
            headers["AUTH_KEY"] = self._settings.CYBER_API_AUTH_KEY
        return headers

    async def get(self, endpoint: str, params: Optional[Mapping[str, str]] = None) -> Any:
        """
        Fetches an endpoint and returns the parsed JSON body.
        Args:
            endpoint (str): Path appended to the configured base URL.
            params (Optional[Mapping[str, str]]): Query parameters, appended in order.
        Returns:
            Any: The decoded JSON body.
        Raises:
            GatewayTimeoutError: The deadline elapsed before the response arrived.
            GatewayHTTPError: The response status was not in the 2xx range.
            httpx.RequestError: The request failed at the transport level.
            ValueError: The response body was not valid JSON.
        """
        url = self.build_url(endpoint, params)
        timeout_ms = self._settings.CYBER_API_TIMEOUT_MS
        console.request("GET", url)
        try:
            return await asyncio.wait_for(self._fetch(endpoint, url), timeout=self._settings.timeout_seconds)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise GatewayTimeoutError(endpoint, timeout_ms) from e

    async def _fetch(self, endpoint: str, url: httpx.URL) -> Any:
        async with httpx.AsyncClient(transport=self._transport,
                                     timeout=self._settings.timeout_seconds) as client:
            response = await client.get(url, headers=self.build_headers(), follow_redirects=True)
            if not response.is_success:
                raise GatewayHTTPError(endpoint, response.status_code, response.reason_phrase)
            return response.json()
