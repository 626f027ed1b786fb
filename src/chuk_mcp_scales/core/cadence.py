"""
Cadence voicings - the closing I-IV-I64-V7-I progression of each drill.

Chords are fixed lists of semitone offsets from the root. The right hand
plays close voicings above the root; the left hand plays bass octaves
around it. Only the right hand's 3rds and 6ths change with the mode.
"""

from __future__ import annotations

from .key import KeySignature
from .pitch import Accidental, Letter, Note, note_from_semitone
from .scale import Direction, ScaleType, scale_notes

Voicing = tuple[tuple[int, ...], ...]

CADENCE_RH_MAJOR: Voicing = (
    (0,),
    (2, 9, 12),
    (4, 7, 12),
    (2, 5, 7, 11),
    (0, 4, 7, 12),
)

CADENCE_RH_MINOR: Voicing = (
    (0,),
    (2, 8, 12),
    (3, 7, 12),
    (2, 5, 7, 11),
    (0, 3, 7, 12),
)

CADENCE_LH: Voicing = (
    (-12,),
    (5, -7),
    (7, -5),
    (-5, -17),
    (0, -12),
)


def right_hand_voicing(scale_type: ScaleType) -> Voicing:
    return CADENCE_RH_MINOR if scale_type.is_minor else CADENCE_RH_MAJOR


def prefers_flats(root: Note, key_signature: KeySignature) -> bool:
    """Whether out-of-key pitches should be spelled with flats."""
    return root.accidental.is_flat or root.letter is Letter.F or key_signature.leans_flat


class CadenceSpeller:
    """
    Spells cadence pitches for one key.

    Pitches that belong to the key's harmony (major scale, or harmonic
    minor for minor keys so the leading tone is raised) take their
    diatonic spelling. Anything else falls back to a sharp or flat
    spelling chosen once for the key.
    """

    def __init__(self, root: Note, scale_type: ScaleType, key_signature: KeySignature):
        self.root = root
        harmony = ScaleType.HARMONIC_MINOR if scale_type.is_minor else ScaleType.MAJOR
        self._diatonic: dict[int, tuple[Letter, Accidental]] = {
            note.pitch_class.value: (note.letter, note.accidental)
            for note in scale_notes(root, harmony, Direction.UP)[:7]
        }
        self.prefer_flat = prefers_flats(root, key_signature)

    def resolve(self, offset: int) -> Note:
        """
        Spell the pitch `offset` semitones from the root.

        The octave is chosen so the note's absolute semitone equals the
        target exactly, which keeps B# and Cb in the right octave.
        """
        target = self.root.absolute_semitone + offset
        spelling = self._diatonic.get(target % 12)
        if spelling is None:
            fallback = note_from_semitone(target, prefer_flat=self.prefer_flat)
            spelling = (fallback.letter, fallback.accidental)
        letter, accidental = spelling
        octave = (target - letter.semitone - accidental.offset) // 12
        return Note(letter, accidental, octave)

    def chord(self, offsets: tuple[int, ...]) -> tuple[Note, ...]:
        return tuple(self.resolve(offset) for offset in offsets)
