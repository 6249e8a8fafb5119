"""Async client for the WordPress Abilities REST API.

This module provides an async wrapper around httpx.AsyncClient for talking to
the wp-abilities/v1 namespace. Every request carries Basic authentication with
a WordPress application password and a JSON content type. The client is
designed to be created once at startup and reused.
"""

import json
import logging
from typing import Any

import httpx

from wp_abilities_mcp.errors import UpstreamError

logger = logging.getLogger(__name__)


class AbilitiesClient:
    """Async client for the wp-abilities/v1 REST endpoints.

    Attributes:
        api_base: Base URL of the namespace
            (e.g., "https://example.com/wp-json/wp-abilities/v1")
        _client: The underlying httpx.AsyncClient instance
    """

    def __init__(
        self,
        api_base: str,
        username: str,
        app_password: str,
        timeout: float | None = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_base: Base URL of the wp-abilities/v1 namespace
            username: WordPress user name
            app_password: WordPress application password
            timeout: Per-request timeout in seconds (None disables it)
            client: Optional pre-built httpx.AsyncClient, used in tests
        """
        self.api_base = api_base.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None
        self._auth = httpx.BasicAuth(username, app_password)
        self._headers = {"Content-Type": "application/json"}
        logger.info(f"AbilitiesClient initialized for: {self.api_base}")

    def run_url(self, ability_name: str) -> str:
        """Get the default run endpoint for an ability."""
        return f"{self.api_base}/abilities/{ability_name}/run"

    async def request(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        body: Any = None,
    ) -> httpx.Response:
        """Send one authenticated request.

        Args:
            method: HTTP method
            url: Absolute URL
            params: Optional query parameters
            body: Optional JSON-serializable request body

        Returns:
            httpx.Response: The response, whatever its status

        Raises:
            UpstreamError: If no response could be obtained
        """
        content = None
        if body is not None:
            content = json.dumps(body, separators=(",", ":"), ensure_ascii=False)

        # params= would replace a query already in the URL (?rest_route=...)
        target = httpx.URL(url)
        if params:
            target = target.copy_merge_params(params)

        try:
            return await self._client.request(
                method,
                target,
                content=content,
                headers=self._headers,
                auth=self._auth,
            )
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise UpstreamError(f"Request to {url} failed: {e}") from e

    async def list_abilities(self, per_page: int = 100) -> list[dict[str, Any]]:
        """Fetch the raw ability records.

        Raises:
            UpstreamError: If the API does not return a success status
        """
        response = await self.request(
            "GET", f"{self.api_base}/abilities", params={"per_page": str(per_page)}
        )
        if not response.is_success:
            raise UpstreamError(
                f"Failed to discover abilities: {response.status_code} {response.text}",
                status=response.status_code,
                body=response.text,
            )

        records = self._decode(response, list, "Failed to discover abilities")
        logger.debug(f"Retrieved {len(records)} abilities")
        return records

    async def get_ability(self, ability_name: str) -> dict[str, Any]:
        """Fetch the raw record of one ability.

        Raises:
            UpstreamError: If the API does not return a success status
        """
        response = await self.request("GET", f"{self.api_base}/abilities/{ability_name}")
        if not response.is_success:
            raise UpstreamError(
                f"Failed to get ability details: {response.status_code}",
                status=response.status_code,
                body=response.text,
            )
        return self._decode(response, dict, "Failed to get ability details")

    @staticmethod
    def _decode(response: httpx.Response, expected: type, context: str) -> Any:
        """Decode a success body, rejecting non-JSON or wrongly shaped payloads.

        Raises:
            UpstreamError: If the body is not JSON of the expected type
        """
        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(
                f"{context}: invalid JSON response",
                status=response.status_code,
                body=response.text,
            ) from e

        if not isinstance(payload, expected):
            raise UpstreamError(
                f"{context}: expected a JSON {'array' if expected is list else 'object'}, "
                f"got {type(payload).__name__}",
                status=response.status_code,
                body=response.text,
            )
        return payload

    async def check_connection(self) -> bool:
        """Check if the Abilities API is reachable with the configured credentials.

        Returns:
            bool: True if a list request succeeds, False otherwise
        """
        try:
            await self.list_abilities(per_page=1)
            logger.debug("Abilities API connection check: successful")
            return True
        except Exception as e:
            logger.warning(f"Abilities API connection check failed: {e}")
            return False

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
        logger.debug("AbilitiesClient closed")
