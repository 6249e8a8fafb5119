"""Projection of abilities onto MCP tools.

This module provides the ToolService class, which answers MCP tools/list and
tools/call requests using the ability directory and dispatcher.
"""

import json
import logging
from typing import Any

import mcp.types as types

from wp_abilities_mcp.abilities import (
    AbilitiesClient,
    Ability,
    AbilityDirectory,
    InvocationDispatcher,
    canonicalize,
    to_tool_name,
)
from wp_abilities_mcp.errors import InvocationError

logger = logging.getLogger(__name__)


def ability_to_tool(ability: Ability) -> types.Tool:
    """Build the MCP tool descriptor for an ability."""
    return types.Tool(
        name=to_tool_name(ability.name),
        description=f"{ability.label}: {ability.description}",
        inputSchema=canonicalize(ability.input_schema),
        annotations=types.ToolAnnotations(
            readOnlyHint=ability.annotations.readonly,
            destructiveHint=ability.annotations.destructive,
            idempotentHint=ability.annotations.idempotent,
        ),
    )


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    """Wrap text in a single-block tool result."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


class ToolService:
    """Service exposing discovered abilities as MCP tools.

    Tools are rebuilt from the current ability set on every list request.
    Calls fetch the ability's details first, then run it. Execution failures
    are returned as error-flagged results; discovery and detail-fetch failures
    propagate to the caller.
    """

    def __init__(
        self,
        directory: AbilityDirectory,
        dispatcher: InvocationDispatcher,
        client: AbilitiesClient | None = None,
    ) -> None:
        """Initialize the ToolService.

        Args:
            directory: Ability directory used for listing and detail fetches
            dispatcher: Dispatcher used to run abilities
            client: Shared API client, closed by close() when given
        """
        self.directory = directory
        self.dispatcher = dispatcher
        self._client = client

    async def check_connection(self) -> bool:
        """Check whether the Abilities API is reachable."""
        if self._client is None:
            return False
        return await self._client.check_connection()

    async def close(self) -> None:
        """Release the shared API client."""
        if self._client is not None:
            await self._client.close()

    async def list_tools(self) -> list[types.Tool]:
        """List one tool per discovered ability.

        Raises:
            UpstreamError: If discovery fails
        """
        abilities = await self.directory.discover()
        return [ability_to_tool(ability) for ability in abilities]

    async def call_tool(
        self, tool_name: str, arguments: dict[str, Any] | None = None
    ) -> types.CallToolResult:
        """Run the ability behind a tool.

        Args:
            tool_name: MCP tool name (e.g., "wp_core_get_site_info")
            arguments: Tool arguments, passed as the ability input

        Returns:
            CallToolResult: Pretty-printed JSON result, or an error result

        Raises:
            UpstreamError: If the ability details cannot be fetched
        """
        ability_name = await self.directory.resolve_ability_name(tool_name)
        logger.debug(f"Tool {tool_name} resolved to ability {ability_name}")

        ability = await self.directory.get_details(ability_name)

        try:
            result = await self.dispatcher.invoke(ability, arguments)
        except InvocationError as e:
            logger.warning(f"Error executing {ability.label}: {e}")
            return text_result(f"Error executing {ability.label}: {e}", is_error=True)

        return text_result(json.dumps(result, indent=2, ensure_ascii=False))
