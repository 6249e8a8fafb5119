"""Liveness endpoint for the HTTP transport, with a WordPress reachability check."""

import logging

from fastapi import APIRouter, Request

from wp_abilities_mcp.models.health import HealthResponse
from wp_abilities_mcp.tools import ToolService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


async def _wordpress_reachable(tool_service: ToolService | None) -> bool | None:
    # None means no tool service is attached, so nothing was checked
    if tool_service is None:
        return None
    try:
        return await tool_service.check_connection()
    except Exception as e:
        logger.warning(f"Abilities API unreachable: {e}")
        return False


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report server liveness and whether the Abilities API answers.

    The endpoint itself always responds with status "ok"; an unreachable
    WordPress site only shows up as wordpress_connected=False.
    """
    from wp_abilities_mcp import __version__

    state = request.app.state
    settings = getattr(state, "settings", None)

    wordpress_connected = await _wordpress_reachable(getattr(state, "tool_service", None))
    logger.debug(f"Abilities API reachable: {wordpress_connected}")

    return HealthResponse(
        status="ok",
        version=__version__,
        wordpress_connected=wordpress_connected,
        wordpress_url=settings.base_url if settings is not None else None,
    )
