"""Pydantic response models for the HTTP endpoints."""

from wp_abilities_mcp.models.health import HealthResponse

__all__ = ["HealthResponse"]
