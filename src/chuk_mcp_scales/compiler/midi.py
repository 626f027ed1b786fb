"""
MIDI export - play a drill back in any player or DAW.

This module converts an Exercise to a MIDI file using mido.
All operations are deterministic: same exercise → same MIDI file.

The scale runs end on a repeat sign in the notation, so by default
they are played twice before the cadence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_scales.models import Exercise, ExerciseLayout, Part


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

TREBLE_CHANNEL = 0
BASS_CHANNEL = 1

SCALE_VELOCITY = 90
CHORD_VELOCITY = 76


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 100,
    ticks_per_beat: int = TICKS_PER_BEAT,
    time_signature: tuple[int, int] | None = None,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a single-track MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in quarter notes per minute
        ticks_per_beat: Resolution (default 480)
        time_signature: Optional (numerator, denominator) meta event

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Set tempo (microseconds per beat)
    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))
    if time_signature is not None:
        numerator, denominator = time_signature
        track.append(
            MetaMessage("time_signature", numerator=numerator, denominator=denominator, time=0)
        )

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick so repeated pitches re-strike cleanly
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def unit_ticks(layout: ExerciseLayout, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Ticks in one unit note length (a quarter note is one beat)."""
    return int(layout.unit * 4 * ticks_per_beat)


def part_to_events(
    part: Part,
    layout: ExerciseLayout,
    channel: int,
    repeat_scales: bool = True,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay one staff out in time: scale runs (optionally twice), then the cadence.

    Scale notes last one unit each; chords last their own length.
    """
    unit = unit_ticks(layout, ticks_per_beat)
    events: list[MidiEvent] = []
    cursor = 0

    runs = part.ascending + part.descending
    for _ in range(2 if repeat_scales else 1):
        for note in runs:
            events.append(MidiEvent(note.midi, cursor, unit, SCALE_VELOCITY, channel))
            cursor += unit

    for chord in part.cadence:
        duration = chord.length * unit
        for note in chord.notes:
            events.append(MidiEvent(note.midi, cursor, duration, CHORD_VELOCITY, channel))
        cursor += duration

    return events


def exercise_to_midi(
    exercise: Exercise,
    tempo_bpm: int | None = None,
    repeat_scales: bool = True,
) -> MidiFile:
    """
    Compile a drill to MIDI.

    Treble goes on channel 1 and bass on channel 2 (0-indexed 0 and 1),
    both in one track.

    Args:
        exercise: The built drill
        tempo_bpm: Override the layout's tempo
        repeat_scales: Honour the repeat sign after the scale runs

    Returns:
        A mido MidiFile ready to be saved
    """
    layout = exercise.layout
    events = part_to_events(exercise.treble, layout, TREBLE_CHANNEL, repeat_scales)
    events += part_to_events(exercise.bass, layout, BASS_CHANNEL, repeat_scales)

    numerator, denominator = (int(x) for x in layout.meter.split("/"))
    return events_to_midi(
        events,
        tempo_bpm=tempo_bpm or layout.tempo_bpm,
        time_signature=(numerator, denominator),
    )
