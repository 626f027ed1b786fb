"""
Layout models - how a drill is laid out in time.

A layout doesn't change which notes are played, only the meter, the
unit note length, how scale runs are beamed and how long the cadence
chords last. The default layout reproduces the classic drill: two
bars of sixteenths in 2/4 followed by a four-chord cadence.
"""

from __future__ import annotations

import re
from fractions import Fraction

from pydantic import BaseModel, Field, field_validator

_FRACTION_PATTERN = re.compile(r"^(\d+)/(\d+)$")


class ExerciseLayout(BaseModel):
    """Meter, note lengths and grouping for one drill."""

    name: str = Field(default="standard", description="Layout identifier")
    description: str = Field(default="", description="Human-readable description")
    meter: str = Field(default="2/4", description="Time signature (M: field)")
    unit_length: str = Field(default="1/16", description="Default note length (L: field)")
    group_size: int = Field(default=4, ge=1, le=8, description="Scale notes per beamed group")
    chord_length: int = Field(default=4, ge=1, description="Cadence chord length in units")
    final_chord_length: int = Field(default=8, ge=1, description="Final chord length in units")
    tempo_bpm: int = Field(default=100, ge=20, le=300, description="Quarter-note tempo for playback")
    bass_octave_shift: int = Field(default=-1, ge=-3, le=0, description="Bass scale transposition")

    model_config = {"frozen": True}

    @field_validator("meter", "unit_length")
    @classmethod
    def validate_fraction(cls, v: str) -> str:
        v = v.strip()
        match = _FRACTION_PATTERN.match(v)
        if not match:
            raise ValueError(f"Expected a fraction like '2/4', got {v!r}")
        numerator, denominator = (int(g) for g in match.groups())
        if numerator <= 0 or denominator <= 0:
            raise ValueError(f"Expected a positive fraction, got {v!r}")
        # MIDI time signatures and ABC note lengths need power-of-two denominators
        if denominator & (denominator - 1):
            raise ValueError(f"Denominator must be a power of two, got {v!r}")
        return v

    @property
    def unit(self) -> Fraction:
        """Unit note length as a fraction of a whole note."""
        return Fraction(self.unit_length)

    @property
    def bar_units(self) -> Fraction:
        """Units per bar."""
        return Fraction(self.meter) / self.unit


DEFAULT_LAYOUT = ExerciseLayout(
    name="standard",
    description="Sixteenth-note scale runs in 2/4 with a closing cadence",
)
