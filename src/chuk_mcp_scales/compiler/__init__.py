"""
Compilation pipeline - transforms drills to MIDI.

The pipeline:
    root + scale type → Exercise → MidiEvent list → MIDI File
"""

from chuk_mcp_scales.compiler.midi import (
    BASS_CHANNEL,
    TICKS_PER_BEAT,
    TREBLE_CHANNEL,
    MidiEvent,
    events_to_midi,
    exercise_to_midi,
    part_to_events,
    unit_ticks,
)

__all__ = [
    "BASS_CHANNEL",
    "TICKS_PER_BEAT",
    "TREBLE_CHANNEL",
    "MidiEvent",
    "events_to_midi",
    "exercise_to_midi",
    "part_to_events",
    "unit_ticks",
]
