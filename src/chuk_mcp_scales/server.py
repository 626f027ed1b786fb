#!/usr/bin/env python3
"""
Entry point for the CHUK Scales MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http). With --abc it
prints one drill's notation and exits instead of serving.
"""

import argparse
import asyncio
import logging
import sys

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def print_notation(root: str, scale_type: str) -> int:
    """Print the ABC drill for a root and scale type; returns an exit code."""
    from chuk_mcp_scales.core import Note, ScaleType
    from chuk_mcp_scales.notation import generate_notation

    try:
        abc = generate_notation(Note.parse(root), ScaleType.parse(scale_type))
    except ValueError as e:
        logger.error(str(e))
        return 2
    sys.stdout.write(abc)
    return 0


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Scales MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--abc",
        metavar="ROOT",
        help="Print the ABC drill for ROOT (e.g. 'F#') and exit",
    )
    parser.add_argument(
        "--scale",
        default="Major",
        help="Scale type for --abc (default: Major)",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.abc:
        sys.exit(print_notation(args.abc, args.scale))

    # Import after argument parsing to avoid issues
    from chuk_mcp_scales.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Scales MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Scales MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
