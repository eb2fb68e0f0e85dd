"""Shared upstream HTTP client.

Every provider call goes through ``UpstreamClient.fetch_json``, which returns
the decoded JSON body or raises ``UpstreamError``. The client wraps a single
``httpx.AsyncClient``. Tests build one on top of ``httpx.MockTransport`` so no
network access is needed.
"""

import httpx
import logging
from typing import Any, Dict, Optional

from finproxy.config import Settings
from finproxy.errors import UpstreamError

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Fetch JSON from a provider or raise ``UpstreamError``."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "UpstreamClient":
        """Create a client with the configured upstream timeout."""
        return cls(httpx.AsyncClient(timeout=settings.upstream_timeout_seconds))

    async def fetch_json(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """Send one request and decode its JSON body.

        Args:
            method: HTTP method
            url: Absolute provider URL
            params: Query parameters, sent in insertion order
            headers: Extra request headers
            json: JSON request body

        Returns:
            The decoded JSON body

        Raises:
            UpstreamError: On network failure, a non-2xx status or a body
                that is not valid JSON
        """
        try:
            response = await self._client.request(
                method, url, params=params, headers=headers, json=json
            )
        except httpx.HTTPError as e:
            logger.error(f"Upstream request to {url} failed: {type(e).__name__}: {e}")
            raise UpstreamError(f"Upstream request failed: {type(e).__name__}: {e}") from e

        if not response.is_success:
            logger.error(f"Upstream {url} returned HTTP {response.status_code}")
            raise UpstreamError(
                f"HTTP {response.status_code} {response.reason_phrase}: {response.text}",
                upstream_status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Upstream {url} returned a non-JSON body")
            raise UpstreamError(f"Upstream returned invalid JSON: {e}") from e

    async def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        return await self.fetch_json("GET", url, params=params, headers=headers)

    async def post_json(
        self,
        url: str,
        body: Any,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        return await self.fetch_json("POST", url, headers=headers, json=body)

    async def aclose(self) -> None:
        await self._client.aclose()
