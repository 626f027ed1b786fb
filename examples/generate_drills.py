#!/usr/bin/env python3
"""
Example: Print and export scale drills.

Walks the circle of fifths from C, printing each major drill and its
relative minor as ABC notation, and writes a MIDI file for each.

Usage:
    python examples/generate_drills.py
    # Creates: examples/output/*.mid
"""

from pathlib import Path

from chuk_mcp_scales.compiler import exercise_to_midi
from chuk_mcp_scales.core import Note, ScaleType, next_fifth, relative_note, relative_scale_type
from chuk_mcp_scales.models import build_exercise
from chuk_mcp_scales.notation import render_exercise


def main() -> None:
    """Generate drills for every key on the circle."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    root = Note.parse("C")
    for _ in range(12):
        minor_type = relative_scale_type(ScaleType.MAJOR)
        for note, scale_type in (
            (root, ScaleType.MAJOR),
            (relative_note(root, ScaleType.MAJOR), minor_type),
        ):
            exercise = build_exercise(note, scale_type)
            print(f"% {exercise.key} {scale_type.value}")
            print(render_exercise(exercise))

            path = output_dir / f"{exercise.key.replace('#', 'sharp')}.mid"
            exercise_to_midi(exercise).save(str(path))

        root = next_fifth(root)

    print(f"MIDI files written to {output_dir}")


if __name__ == "__main__":
    main()
