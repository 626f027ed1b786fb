"""
Navigation tools - MCP tools for moving between keys.

Tools for stepping around the circle of fifths, switching to the
relative key and picking roots.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.constants import ErrorMessages
from chuk_mcp_scales.core import (
    SELECTABLE_ROOTS,
    Note,
    ScaleType,
    next_fifth,
    prev_fifth,
    random_root,
    relative_note,
    relative_scale_type,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def parse_root_arg(root: str) -> Note:
    """Parse a tool's root argument, raising ValueError with a friendly message."""
    try:
        return Note.parse(root)
    except ValueError:
        raise ValueError(ErrorMessages.INVALID_ROOT.format(root=root)) from None


def parse_scale_type_arg(scale_type: str) -> ScaleType:
    """Parse a tool's scale type argument, raising ValueError with a friendly message."""
    try:
        return ScaleType.parse(scale_type)
    except ValueError:
        choices = ", ".join(t.value for t in ScaleType)
        raise ValueError(
            ErrorMessages.INVALID_SCALE_TYPE.format(scale_type=scale_type, choices=choices)
        ) from None


def note_to_dict(note: Note) -> dict[str, Any]:
    """JSON-friendly view of a note."""
    return {
        "name": note.name,
        "letter": note.letter.value,
        "accidental": note.accidental.value,
        "pitch_class": note.pitch_class.value,
    }


def register_navigation_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register key navigation tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def scales_next_fifth(root: str, scale_type: str = "Major") -> str:
        """
        Move one step clockwise around the circle of fifths.

        Args:
            root: Current root (e.g. 'G', 'F#', 'Bb')
            scale_type: Current scale type; minor types use minor key spellings

        Returns:
            JSON string with the new root

        Example:
            scales_next_fifth(root="G")
        """
        try:
            note = next_fifth(parse_root_arg(root), parse_scale_type_arg(scale_type))
            return json.dumps({"status": "success", "root": note_to_dict(note)})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to step to next fifth")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_next_fifth"] = scales_next_fifth

    @mcp.tool  # type: ignore[arg-type]
    async def scales_prev_fifth(root: str, scale_type: str = "Major") -> str:
        """
        Move one step counter-clockwise around the circle of fifths.

        Args:
            root: Current root
            scale_type: Current scale type; minor types use minor key spellings

        Returns:
            JSON string with the new root

        Example:
            scales_prev_fifth(root="F")
        """
        try:
            note = prev_fifth(parse_root_arg(root), parse_scale_type_arg(scale_type))
            return json.dumps({"status": "success", "root": note_to_dict(note)})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to step to previous fifth")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_prev_fifth"] = scales_prev_fifth

    @mcp.tool  # type: ignore[arg-type]
    async def scales_relative_key(root: str, scale_type: str = "Major") -> str:
        """
        Switch to the relative key.

        Major keys go to their relative harmonic minor; minor keys go
        to their relative major.

        Args:
            root: Current root
            scale_type: Current scale type

        Returns:
            JSON string with the new root and scale type

        Example:
            scales_relative_key(root="C", scale_type="Major")
        """
        try:
            current = parse_scale_type_arg(scale_type)
            note = relative_note(parse_root_arg(root), current)
            return json.dumps(
                {
                    "status": "success",
                    "root": note_to_dict(note),
                    "scale_type": relative_scale_type(current).value,
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to resolve relative key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_relative_key"] = scales_relative_key

    @mcp.tool  # type: ignore[arg-type]
    async def scales_list_roots() -> str:
        """
        List the selectable roots, one per pitch class in chromatic order.

        Returns:
            JSON string with list of roots

        Example:
            scales_list_roots()
        """
        roots = [note_to_dict(n) for n in SELECTABLE_ROOTS]
        return json.dumps({"status": "success", "roots": roots, "count": len(roots)})

    tools["scales_list_roots"] = scales_list_roots

    @mcp.tool  # type: ignore[arg-type]
    async def scales_list_scale_types() -> str:
        """
        List the scale types that can be practised.

        Returns:
            JSON string with scale type names

        Example:
            scales_list_scale_types()
        """
        return json.dumps({"status": "success", "scale_types": [t.value for t in ScaleType]})

    tools["scales_list_scale_types"] = scales_list_scale_types

    @mcp.tool  # type: ignore[arg-type]
    async def scales_random_root(current: str | None = None) -> str:
        """
        Pick a random root, different from the current one.

        Args:
            current: Optional current root to avoid

        Returns:
            JSON string with the chosen root and scale type (always Major)

        Example:
            scales_random_root(current="C")
        """
        try:
            exclude = parse_root_arg(current) if current else None
            note = random_root(exclude=exclude)
            return json.dumps(
                {
                    "status": "success",
                    "root": note_to_dict(note),
                    "scale_type": ScaleType.MAJOR.value,
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_random_root"] = scales_random_root

    return tools
