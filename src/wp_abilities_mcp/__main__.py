"""CLI entry point for wp-abilities-mcp.

This module provides the command-line interface for starting the server.
It can be invoked as `wp-abilities-mcp` (via the script entry point) or
`python -m wp_abilities_mcp`.
"""

import argparse
import asyncio
import logging
import sys

import uvicorn

from wp_abilities_mcp import __version__, create_app
from wp_abilities_mcp.config import load_settings
from wp_abilities_mcp.errors import ConfigurationError
from wp_abilities_mcp.tools import run_stdio


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the stdio MCP stream."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def main() -> int:
    """Main entry point for the wp-abilities-mcp CLI.

    Parses command-line arguments, loads settings and serves the MCP server
    over the selected transport.

    Returns:
        int: Process exit status.
    """
    parser = argparse.ArgumentParser(
        prog="wp-abilities-mcp",
        description="MCP server exposing WordPress abilities as tools",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"wp-abilities-mcp {__version__}",
    )

    parser.add_argument(
        "--transport",
        type=str,
        default=None,
        choices=["stdio", "http"],
        help="MCP transport (default: stdio, can be set via WORDPRESS_TRANSPORT)",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the HTTP transport to (default: 127.0.0.1, can be set via WORDPRESS_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the HTTP transport to (default: 8000, can be set via WORDPRESS_PORT)",
    )

    parser.add_argument(
        "--cache-ttl",
        type=float,
        default=None,
        help="Seconds to cache discovered abilities (default: 60, can be set via WORDPRESS_CACHE_TTL_SECONDS)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via WORDPRESS_LOG_LEVEL)",
    )

    args = parser.parse_args()

    # CLI args override environment variables
    settings_kwargs = {}
    if args.transport is not None:
        settings_kwargs["transport"] = args.transport
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.cache_ttl is not None:
        settings_kwargs["cache_ttl_seconds"] = args.cache_ttl
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    try:
        settings = load_settings(**settings_kwargs)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    if settings.transport == "http":
        app = create_app(settings=settings)
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    else:
        asyncio.run(run_stdio(settings))

    return 0


if __name__ == "__main__":
    sys.exit(main())
