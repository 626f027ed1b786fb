"""
MCP tool implementations.

Tools are organized by domain:
- navigation - Circle of fifths, relative keys, root selection
- notation - ABC generation, MIDI export, layouts
"""

from chuk_mcp_scales.tools.navigation import register_navigation_tools
from chuk_mcp_scales.tools.notation import register_notation_tools

__all__ = [
    "register_navigation_tools",
    "register_notation_tools",
]
