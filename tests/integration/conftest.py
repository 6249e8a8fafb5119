"""Pytest configuration for integration tests.

This module provides an MCP server whose tool service talks to the fake
Abilities API. Tests connect to it with create_connected_server_and_client_session
inside the test body, so the session's task group is entered and exited in
the same task.
"""

import pytest

from wp_abilities_mcp.abilities import AbilityDirectory, InvocationDispatcher
from wp_abilities_mcp.tools import ToolService, create_mcp_server


@pytest.fixture
def tool_service(abilities_client):
    """Create a ToolService backed by the fake Abilities API."""
    return ToolService(
        directory=AbilityDirectory(abilities_client),
        dispatcher=InvocationDispatcher(abilities_client),
    )


@pytest.fixture
def mcp_server(tool_service):
    """Create the low-level MCP server for the tool service."""
    return create_mcp_server(tool_service)
