"""
Drill layouts - timing presets loaded from YAML.
"""

from chuk_mcp_scales.layouts.loader import LayoutLoader

__all__ = ["LayoutLoader"]
