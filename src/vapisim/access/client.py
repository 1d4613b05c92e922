"""HTTP client for the appliance access API.

Reads and changes the access toggles of an appliance (or of the
simulator) over HTTP.
"""

from __future__ import annotations

import logging

import httpx

from vapisim.access.models import AccessModel, AccessSetting

logger = logging.getLogger(__name__)


class AccessClientError(Exception):
    """Raised when an access API request fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApplianceAccessClient:
    """Get and set appliance access settings.

    Example usage::

        async with ApplianceAccessClient("http://localhost:8989") as client:
            await client.set_enabled(AccessSetting.SSH, True)
            shell = await client.get(AccessSetting.SHELL)
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8989",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Create the HTTP client."""
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        logger.debug("Access client connected to %s", self._base_url)

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("Access client disconnected")

    async def get(self, setting: AccessSetting) -> AccessModel:
        """Fetch the current value of ``setting``."""
        setting = AccessSetting(setting)
        resp = await self._request("GET", setting.path, expected=200)
        try:
            return setting.model.model_validate_json(resp.content)
        except ValueError as e:
            raise AccessClientError(
                f"Unexpected response from {setting.path}: {e}", status_code=resp.status_code
            ) from e

    async def set(self, setting: AccessSetting, value: AccessModel) -> None:
        """Replace the value of ``setting``."""
        setting = AccessSetting(setting)
        if not isinstance(value, setting.model):
            raise TypeError(f"{setting.value} expects {setting.model.__name__}")
        await self._request("PUT", setting.path, expected=204, json=value.model_dump(mode="json"))
        logger.debug("Set %s to %s", setting.value, value)

    async def set_enabled(self, setting: AccessSetting, enabled: bool) -> None:
        """Enable or disable ``setting``, keeping any other fields."""
        current = await self.get(setting)
        await self.set(setting, current.model_copy(update={"enabled": enabled}))

    async def _request(
        self, method: str, path: str, expected: int, json: dict | None = None
    ) -> httpx.Response:
        if self._client is None:
            raise AccessClientError("Not connected to the access API")
        try:
            resp = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise AccessClientError(f"HTTP {method} {path} failed: {e}") from e
        if resp.status_code != expected:
            raise AccessClientError(
                f"HTTP {method} {path} returned {resp.status_code}", status_code=resp.status_code
            )
        return resp

    async def __aenter__(self) -> ApplianceAccessClient:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        await self.disconnect()
