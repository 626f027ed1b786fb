"""
Exercise model - the neutral representation of one drill.

Built once from (root, scale type, layout) and consumed by every
output format, so ABC text and MIDI always agree on the notes.

    root + scale type
    → scale runs (treble, then bass an octave down)
    → cadence chords (right hand, left hand)
    → Exercise
    → ABC text / MIDI file
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_scales.core import (
    CADENCE_LH,
    CadenceSpeller,
    Direction,
    KeySignature,
    Note,
    ScaleType,
    key_name,
    right_hand_voicing,
    scale_notes,
)
from chuk_mcp_scales.models.layout import DEFAULT_LAYOUT, ExerciseLayout


@dataclass(frozen=True)
class Chord:
    """Simultaneous notes held for `length` units."""

    notes: tuple[Note, ...]
    length: int

    def __post_init__(self) -> None:
        if not self.notes:
            raise ValueError("Chord must contain at least one note")
        if self.length <= 0:
            raise ValueError(f"Chord length must be > 0, got {self.length}")


@dataclass(frozen=True)
class Part:
    """One staff of the drill: scale up, scale down, cadence."""

    clef: str
    ascending: tuple[Note, ...]
    descending: tuple[Note, ...]
    cadence: tuple[Chord, ...]


@dataclass(frozen=True)
class Exercise:
    """A complete two-staff scale and cadence drill."""

    root: Note
    scale_type: ScaleType
    key_signature: KeySignature
    layout: ExerciseLayout
    treble: Part
    bass: Part

    @property
    def key(self) -> str:
        """Key declaration, e.g. 'Bb' or 'F#m'."""
        return key_name(self.root, self.scale_type.is_minor)

    @property
    def parts(self) -> tuple[Part, Part]:
        return (self.treble, self.bass)


def _cadence(speller: CadenceSpeller, voicing: tuple[tuple[int, ...], ...], layout: ExerciseLayout) -> tuple[Chord, ...]:
    last = len(voicing) - 1
    return tuple(
        Chord(
            notes=speller.chord(offsets),
            length=layout.final_chord_length if i == last else layout.chord_length,
        )
        for i, offsets in enumerate(voicing)
    )


def build_exercise(
    root: Note,
    scale_type: ScaleType,
    layout: ExerciseLayout | None = None,
) -> Exercise:
    """
    Build the drill for a root and scale type.

    The descent starts from the top note of the ascent, so melodic
    minor comes back down with natural-minor spelling from that note.

    Args:
        root: Tonic, at the octave the treble run starts from
        scale_type: Scale to practise
        layout: Timing layout (defaults to the standard drill)

    Returns:
        The Exercise
    """
    layout = layout or DEFAULT_LAYOUT
    key_signature = KeySignature.for_scale(root, scale_type)

    ascending = tuple(scale_notes(root, scale_type, Direction.UP))
    descending = tuple(scale_notes(ascending[-1], scale_type, Direction.DOWN))

    speller = CadenceSpeller(root, scale_type, key_signature)
    shift = layout.bass_octave_shift

    treble = Part(
        clef="treble",
        ascending=ascending,
        descending=descending,
        cadence=_cadence(speller, right_hand_voicing(scale_type), layout),
    )
    bass = Part(
        clef="bass",
        ascending=tuple(n.transpose_octaves(shift) for n in ascending),
        descending=tuple(n.transpose_octaves(shift) for n in descending),
        cadence=_cadence(speller, CADENCE_LH, layout),
    )

    return Exercise(
        root=root,
        scale_type=scale_type,
        key_signature=key_signature,
        layout=layout,
        treble=treble,
        bass=bass,
    )
