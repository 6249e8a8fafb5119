"""MCP tool layer.

This package projects discovered abilities onto MCP tools and wires the
tools/list and tools/call handlers into an MCP server.
"""

from wp_abilities_mcp.tools.server import build_tool_service, create_mcp_server, run_stdio
from wp_abilities_mcp.tools.service import ToolService, ability_to_tool

__all__ = [
    "ToolService",
    "ability_to_tool",
    "build_tool_service",
    "create_mcp_server",
    "run_stdio",
]
