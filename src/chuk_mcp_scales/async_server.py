#!/usr/bin/env python3
"""
Async Scales MCP Server using chuk-mcp-server

This server provides MCP tools for piano scale and cadence drills.
Each drill is a grand-staff exercise - a scale up and down in both
hands followed by a closing cadence - emitted as ABC notation.

The server provides tools for:
- Generating ABC notation for any root and scale type
- Stepping around the circle of fifths and switching to relative keys
- Picking roots (listing, random choice)
- Compiling drills to MIDI files for playback
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_scales.layouts import LayoutLoader
from chuk_mcp_scales.tools import register_navigation_tools, register_notation_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-scales")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
LAYOUTS_DIR = BASE_PATH / "layouts"
OUTPUT_DIR = BASE_PATH / "output"
LAYOUTS_LIBRARY_PATH = Path(__file__).parent / "layouts" / "library"

layout_loader = LayoutLoader(
    library_path=LAYOUTS_LIBRARY_PATH,
    project_path=LAYOUTS_DIR,
)

# Register all tools
navigation_tools = register_navigation_tools(mcp)
notation_tools = register_notation_tools(mcp, layout_loader, OUTPUT_DIR)

# Export tool functions for direct access
scales_next_fifth = navigation_tools["scales_next_fifth"]
scales_prev_fifth = navigation_tools["scales_prev_fifth"]
scales_relative_key = navigation_tools["scales_relative_key"]
scales_list_roots = navigation_tools["scales_list_roots"]
scales_list_scale_types = navigation_tools["scales_list_scale_types"]
scales_random_root = navigation_tools["scales_random_root"]

scales_generate_notation = notation_tools["scales_generate_notation"]
scales_compile_midi = notation_tools["scales_compile_midi"]
scales_list_layouts = notation_tools["scales_list_layouts"]

logger.info("CHUK Scales MCP Server initialized")
logger.info(f"  Layouts library: {LAYOUTS_LIBRARY_PATH}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
