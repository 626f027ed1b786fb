"""
Text notation output - ABC for the grand-staff drill.
"""

from chuk_mcp_scales.notation.abc import (
    chord_to_abc,
    decode_octave,
    encode_octave,
    generate_notation,
    note_to_abc,
    render_exercise,
)

__all__ = [
    "chord_to_abc",
    "decode_octave",
    "encode_octave",
    "generate_notation",
    "note_to_abc",
    "render_exercise",
]
