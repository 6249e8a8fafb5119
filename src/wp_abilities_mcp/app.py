"""FastAPI application factory for the streamable HTTP transport.

This module contains the create_app() factory function that creates the
FastAPI application, mounts the MCP streamable HTTP endpoint at /mcp, and
manages the session manager and API client across the app lifespan.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.types import Receive, Scope, Send

from wp_abilities_mcp.config import WordPressMcpSettings
from wp_abilities_mcp.routers import health
from wp_abilities_mcp.tools import build_tool_service, create_mcp_server

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    Runs the MCP session manager while the app is serving and closes the
    shared Abilities API client on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: WordPressMcpSettings = app.state.settings
    session_manager: StreamableHTTPSessionManager = app.state.session_manager

    try:
        async with session_manager.run():
            logger.info(f"WordPress MCP server serving {settings.base_url} over HTTP")
            yield
    finally:
        await app.state.tool_service.close()
        logger.info("Abilities API client closed")


def create_app(settings: WordPressMcpSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings instance. If not provided, settings will
                  be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.

    Raises:
        ConfigurationError: If settings are not provided and the environment
                            lacks required values.
    """
    from wp_abilities_mcp import __version__

    if settings is None:
        from wp_abilities_mcp.config import get_settings

        settings = get_settings()

    app = FastAPI(
        title="wp-abilities-mcp",
        description="MCP server exposing WordPress abilities as tools",
        version=__version__,
        lifespan=lifespan,
    )

    tool_service = build_tool_service(settings)
    session_manager = StreamableHTTPSessionManager(
        app=create_mcp_server(tool_service),
        stateless=True,
    )

    app.state.settings = settings
    app.state.tool_service = tool_service
    app.state.session_manager = session_manager

    async def handle_mcp(scope: Scope, receive: Receive, send: Send) -> None:
        await session_manager.handle_request(scope, receive, send)

    app.include_router(health.router)
    app.mount("/mcp", app=handle_mcp)

    return app
