"""wp-abilities-mcp: MCP server for the WordPress Abilities API.

This package discovers the abilities registered on a WordPress site and
exposes them as MCP tools, over stdio or streamable HTTP.
"""

from wp_abilities_mcp.app import create_app

__version__ = "0.1.0"

__all__ = ["create_app", "__version__"]
