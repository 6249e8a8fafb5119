"""MCP server wiring for the tool service.

This module builds the low-level MCP server, registers the tools/list and
tools/call handlers, and serves it over stdio.
"""

import logging

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from wp_abilities_mcp.abilities import (
    AbilitiesClient,
    AbilityDirectory,
    InvocationDispatcher,
)
from wp_abilities_mcp.config import WordPressMcpSettings
from wp_abilities_mcp.tools.service import ToolService

logger = logging.getLogger(__name__)

SERVER_NAME = "wp-abilities-mcp"


def build_tool_service(settings: WordPressMcpSettings) -> ToolService:
    """Create the client, directory, dispatcher and tool service from settings."""
    client = AbilitiesClient(
        api_base=settings.abilities_api_base,
        username=settings.username,
        app_password=settings.app_password,
        timeout=settings.request_timeout_seconds,
    )
    directory = AbilityDirectory(
        client,
        ttl_seconds=settings.cache_ttl_seconds,
        per_page=settings.per_page,
        exact_tool_names=settings.exact_tool_names,
    )
    return ToolService(
        directory=directory,
        dispatcher=InvocationDispatcher(client),
        client=client,
    )


def create_mcp_server(service: ToolService) -> Server:
    """Create an MCP server answering tool requests from the service.

    Args:
        service: The tool service to delegate to.

    Returns:
        Server: Low-level MCP server with tools/list and tools/call handlers.
    """
    from wp_abilities_mcp import __version__

    server = Server(SERVER_NAME, version=__version__)

    async def handle_list_tools(req: types.ListToolsRequest) -> types.ServerResult:
        tools = await service.list_tools()
        return types.ServerResult(types.ListToolsResult(tools=tools))

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await service.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(result)

    # Registered directly so arguments reach the service untouched
    server.request_handlers[types.ListToolsRequest] = handle_list_tools
    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


async def run_stdio(settings: WordPressMcpSettings) -> None:
    """Serve the MCP server over stdin/stdout until the client disconnects."""
    service = build_tool_service(settings)
    server = create_mcp_server(service)

    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info(f"WordPress MCP server connected to {settings.base_url}")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await service.close()
