"""
Models for the drill system.

This module provides:
- ExerciseLayout: Pydantic layout (meter, unit length, chord lengths)
- Exercise: Complete two-staff drill
- Part: One staff (scale runs and cadence)
- Chord: Simultaneous notes with a length
"""

from chuk_mcp_scales.models.exercise import Chord, Exercise, Part, build_exercise
from chuk_mcp_scales.models.layout import DEFAULT_LAYOUT, ExerciseLayout

__all__ = [
    "DEFAULT_LAYOUT",
    "Chord",
    "Exercise",
    "ExerciseLayout",
    "Part",
    "build_exercise",
]
