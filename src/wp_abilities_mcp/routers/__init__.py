"""HTTP routers served alongside the MCP endpoint."""

from wp_abilities_mcp.routers import health

__all__ = ["health"]
