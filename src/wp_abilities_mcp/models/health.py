"""Payload returned by GET /api/v1/health."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Server liveness plus the outcome of a one-ability list request.

    wordpress_connected is None when no tool service is attached to the app.
    """

    status: str = Field(..., description='Always "ok" while the server answers')
    version: str = Field(..., description="Installed wp-abilities-mcp version")
    wordpress_connected: bool | None = Field(
        default=None,
        description="True if the Abilities API accepted the configured credentials",
    )
    wordpress_url: str | None = Field(
        default=None,
        description="Site URL requests are sent to, without a trailing slash",
    )
