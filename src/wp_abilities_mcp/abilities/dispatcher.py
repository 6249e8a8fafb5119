"""Execution of abilities against their run endpoints.

Readonly abilities are run with GET, passing the input as a JSON-encoded
query parameter. Every other ability, including one without annotations,
is run with POST and a JSON body. Each invocation sends exactly one request
and is never retried.
"""

import json
import logging
from typing import Any

from wp_abilities_mcp.abilities.client import AbilitiesClient
from wp_abilities_mcp.abilities.schema import accepts_input
from wp_abilities_mcp.abilities.types import Ability
from wp_abilities_mcp.errors import InvocationError, UpstreamError

logger = logging.getLogger(__name__)


def has_input(arguments: Any) -> bool:
    """Check whether caller arguments were actually supplied.

    None and an empty mapping count as "no input"; any other value,
    including falsy primitives, counts as supplied.
    """
    if arguments is None:
        return False
    if isinstance(arguments, dict) and not arguments:
        return False
    return True


class InvocationDispatcher:
    """Runs abilities, choosing HTTP method and encoding from their annotations."""

    def __init__(self, client: AbilitiesClient) -> None:
        self._client = client

    def resolve_run_url(self, ability: Ability) -> str:
        """Get the URL an ability is executed at."""
        return ability.execution_link or self._client.run_url(ability.name)

    async def invoke(self, ability: Ability, arguments: Any = None) -> Any:
        """Execute an ability and return its decoded JSON result.

        Arguments are ignored when the ability does not accept input.

        Args:
            ability: The ability to run, ideally freshly fetched
            arguments: Caller-supplied input

        Returns:
            Any: The response body, decoded but otherwise untouched

        Raises:
            InvocationError: If the request fails or returns a non-2xx status
        """
        url = self.resolve_run_url(ability)
        send_input = accepts_input(ability) and has_input(arguments)

        if ability.annotations.readonly is True:
            params = None
            if send_input:
                params = {
                    "input": json.dumps(
                        arguments, separators=(",", ":"), ensure_ascii=False
                    )
                }
            logger.info(f"Running {ability.name}: GET {url}")
            response = await self._send("GET", url, params=params)
        else:
            body = {"input": arguments} if send_input else {}
            logger.info(f"Running {ability.name}: POST {url}")
            response = await self._send("POST", url, body=body)

        if not response.is_success:
            logger.warning(f"{ability.name} failed with status {response.status_code}")
            raise InvocationError(
                f"Ability execution failed: {response.status_code} {response.text}",
                status=response.status_code,
                body=response.text,
            )

        try:
            return response.json()
        except ValueError as e:
            raise InvocationError(
                f"Ability execution returned invalid JSON: {e}",
                status=response.status_code,
                body=response.text,
            ) from e

    async def _send(self, method: str, url: str, **kwargs: Any):
        try:
            return await self._client.request(method, url, **kwargs)
        except UpstreamError as e:
            raise InvocationError(str(e), status=e.status, body=e.body) from e
