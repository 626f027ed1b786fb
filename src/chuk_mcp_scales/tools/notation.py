"""
Notation tools - MCP tools for drill output.

Tools for generating ABC notation, compiling MIDI files and
listing the available layouts.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.compiler import exercise_to_midi
from chuk_mcp_scales.constants import ErrorMessages, SuccessMessages
from chuk_mcp_scales.layouts import LayoutLoader
from chuk_mcp_scales.models import ExerciseLayout, build_exercise
from chuk_mcp_scales.notation import render_exercise
from chuk_mcp_scales.tools.navigation import note_to_dict, parse_root_arg, parse_scale_type_arg

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_notation_tools(
    mcp: ChukMCPServer,
    layout_loader: LayoutLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register notation/export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        layout_loader: The layout loader
        output_dir: Directory for MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def resolve_layout(name: str | None) -> ExerciseLayout:
        layout = layout_loader.get_layout(name)
        if layout is None:
            raise ValueError(ErrorMessages.LAYOUT_NOT_FOUND.format(layout=name))
        return layout

    @mcp.tool  # type: ignore[arg-type]
    async def scales_generate_notation(
        root: str,
        scale_type: str = "Major",
        layout: str | None = None,
    ) -> str:
        """
        Generate the ABC notation for a scale and cadence drill.

        The drill is a grand staff: the scale up and down in both hands
        (left hand an octave lower), then a I-IV-I64-V7-I cadence.

        Args:
            root: Tonic (e.g. 'C', 'F#', 'Bb')
            scale_type: 'Major', 'Minor (Natural)', 'Minor (Harmonic)' or 'Minor (Melodic)'
            layout: Optional layout name (default 'standard')

        Returns:
            JSON string with the ABC text

        Example:
            scales_generate_notation(root="A", scale_type="Minor (Melodic)")
        """
        try:
            note = parse_root_arg(root)
            kind = parse_scale_type_arg(scale_type)
            exercise = build_exercise(note, kind, resolve_layout(layout))
            return json.dumps(
                {
                    "status": "success",
                    "root": note_to_dict(exercise.root),
                    "scale_type": kind.value,
                    "key": exercise.key,
                    "layout": exercise.layout.name,
                    "abc": render_exercise(exercise),
                    "message": SuccessMessages.NOTATION_GENERATED.format(
                        key=exercise.key, scale_type=kind.value
                    ),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate notation")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_generate_notation"] = scales_generate_notation

    @mcp.tool  # type: ignore[arg-type]
    async def scales_compile_midi(
        root: str,
        scale_type: str = "Major",
        layout: str | None = None,
        tempo_bpm: int | None = None,
        output_name: str | None = None,
    ) -> str:
        """
        Compile a drill to a MIDI file for playback.

        Args:
            root: Tonic
            scale_type: Scale type to practise
            layout: Optional layout name (default 'standard')
            tempo_bpm: Optional tempo override (quarter notes per minute)
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path

        Example:
            scales_compile_midi(root="Eb", scale_type="Major", tempo_bpm=80)
        """
        try:
            note = parse_root_arg(root)
            kind = parse_scale_type_arg(scale_type)
            exercise = build_exercise(note, kind, resolve_layout(layout))
            midi = exercise_to_midi(exercise, tempo_bpm=tempo_bpm)

            default_name = f"{exercise.key}_{kind.name.lower()}".replace("#", "sharp")
            output_path = output_dir / f"{output_name or default_name}.mid"
            output_dir.mkdir(parents=True, exist_ok=True)
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "tempo_bpm": tempo_bpm or exercise.layout.tempo_bpm,
                    "message": SuccessMessages.MIDI_COMPILED.format(
                        key=exercise.key, scale_type=kind.value, path=output_path
                    ),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to compile MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_compile_midi"] = scales_compile_midi

    @mcp.tool  # type: ignore[arg-type]
    async def scales_list_layouts() -> str:
        """
        List available drill layouts.

        Returns layouts from the library and project, project layouts
        overriding library layouts of the same name.

        Returns:
            JSON string with list of layouts

        Example:
            scales_list_layouts()
        """
        try:
            layouts = [layout.model_dump() for layout in layout_loader.list_layouts()]
            return json.dumps({"status": "success", "layouts": layouts, "count": len(layouts)})
        except Exception as e:
            logger.exception("Failed to list layouts")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_list_layouts"] = scales_list_layouts

    return tools
