"""
Pitch primitives - Letter, Accidental, Note and PitchClass.

A Note is a spelled pitch: letter name, accidental and octave.
Spelling matters here (F# and Gb are different notes on the page),
so the letter is never derived from the semitone - it is carried
explicitly and the accidental is solved for.

PitchClass is the octave- and spelling-independent view (0-11).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum, IntEnum

logger = logging.getLogger(__name__)

# Octave used for notes whose octave carries no meaning (circle lookups, parsing)
REFERENCE_OCTAVE = 4


class Letter(str, Enum):
    """The seven letter names in ascending order."""

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"

    @property
    def semitone(self) -> int:
        """Semitones above C of the natural note with this letter."""
        return _LETTER_SEMITONES[self]

    @property
    def index(self) -> int:
        """Position in the letter cycle (C=0 .. B=6)."""
        return _LETTER_ORDER.index(self)

    def step(self, steps: int) -> Letter:
        """Move forward (positive) or backward (negative) through the letter cycle."""
        return _LETTER_ORDER[(self.index + steps) % len(_LETTER_ORDER)]


_LETTER_ORDER: tuple[Letter, ...] = tuple(Letter)

_LETTER_SEMITONES: dict[Letter, int] = {
    Letter.C: 0,
    Letter.D: 2,
    Letter.E: 4,
    Letter.F: 5,
    Letter.G: 7,
    Letter.A: 9,
    Letter.B: 11,
}


class Accidental(str, Enum):
    """
    Accidentals, valued by their text spelling.

    The legacy explicit-natural spelling "n" parses to NATURAL.
    """

    NATURAL = ""
    SHARP = "#"
    DOUBLE_SHARP = "##"
    FLAT = "b"
    DOUBLE_FLAT = "bb"

    @property
    def offset(self) -> int:
        """Signed semitone alteration."""
        return _ACCIDENTAL_OFFSETS[self]

    @property
    def is_flat(self) -> bool:
        return self.offset < 0

    @classmethod
    def parse(cls, text: str) -> Accidental:
        """Parse an accidental from '', 'n', '#', '##', 'b' or 'bb'."""
        if text == "n":
            return cls.NATURAL
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown accidental: {text!r}") from None

    @classmethod
    def from_offset(cls, offset: int) -> Accidental:
        """
        Map a signed alteration to an accidental.

        Offsets beyond a double sharp/flat never come out of scale or
        cadence spelling; they fall back to NATURAL rather than raising.
        """
        for accidental, value in _ACCIDENTAL_OFFSETS.items():
            if value == offset:
                return accidental
        logger.debug("No accidental for offset %d, using natural", offset)
        return cls.NATURAL


_ACCIDENTAL_OFFSETS: dict[Accidental, int] = {
    Accidental.NATURAL: 0,
    Accidental.SHARP: 1,
    Accidental.DOUBLE_SHARP: 2,
    Accidental.FLAT: -1,
    Accidental.DOUBLE_FLAT: -2,
}


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent and spelling-independent: C# and Db are both
    PitchClass.Cs. Use Note when the spelling matters.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11


_NOTE_PATTERN = re.compile(r"^([A-Ga-g])(##|bb|#|b|n)?(-?\d+)?$")


@dataclass(frozen=True)
class Note:
    """
    A spelled note: letter, accidental and octave.

    The octave follows scientific pitch notation and changes at C,
    so B#3 and C4 sound the same while belonging to different octaves.

    Examples:
        Note(Letter.C) = middle C
        Note(Letter.F, Accidental.SHARP, 5) = F#5
    """

    letter: Letter
    accidental: Accidental = Accidental.NATURAL
    octave: int = REFERENCE_OCTAVE

    @property
    def semitone(self) -> int:
        """Semitones above C of this octave's C; not normalised (B# = 12, Cb = -1)."""
        return self.letter.semitone + self.accidental.offset

    @property
    def pitch_class(self) -> PitchClass:
        """Pitch class (0-11) ignoring octave."""
        return PitchClass(self.semitone % 12)

    @property
    def absolute_semitone(self) -> int:
        """Semitone count across octaves: octave * 12 + semitone."""
        return self.octave * 12 + self.semitone

    @property
    def midi(self) -> int:
        """MIDI note number. C4 = 60."""
        return self.absolute_semitone + 12

    @property
    def name(self) -> str:
        """Letter plus accidental, no octave (e.g. 'F#')."""
        return f"{self.letter.value}{self.accidental.value}"

    def is_pitch_equal(self, other: Note) -> bool:
        """Same pitch class, regardless of spelling and octave."""
        return self.pitch_class == other.pitch_class

    def is_same_spelling(self, other: Note) -> bool:
        """Same letter and accidental, regardless of octave."""
        return self.letter == other.letter and self.accidental == other.accidental

    def transpose_octaves(self, octaves: int) -> Note:
        """Same spelling, shifted by whole octaves."""
        return replace(self, octave=self.octave + octaves)

    def __str__(self) -> str:
        return f"{self.name}{self.octave}"

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse a note from text like 'C', 'F#4', 'Bb3' or 'Cn5'.

        The octave defaults to 4 when omitted.
        """
        match = _NOTE_PATTERN.match(text.strip())
        if not match:
            raise ValueError(f"Invalid note: {text!r}. Expected a letter A-G, optional accidental and octave.")
        letter, accidental, octave = match.groups()
        return cls(
            Letter(letter.upper()),
            Accidental.parse(accidental or ""),
            int(octave) if octave is not None else REFERENCE_OCTAVE,
        )


def accidental_for_target(target: int, letter: Letter) -> Accidental:
    """
    Solve for the accidental that makes `letter` sound at `target`.

    The difference from the natural letter is taken modulo 12 into the
    range [-6, 6], so only the octave-nearest alteration is considered.

    Args:
        target: Desired semitone (any octave; only the pitch class matters)
        letter: The fixed letter name

    Returns:
        The accidental (natural if no single/double alteration fits)
    """
    diff = target - letter.semitone
    while diff > 6:
        diff -= 12
    while diff < -6:
        diff += 12
    return Accidental.from_offset(diff)


# Enharmonic choices for each pitch class: (sharp spelling, flat spelling)
_ENHARMONIC_SPELLINGS: dict[int, tuple[tuple[Letter, Accidental], ...]] = {
    0: ((Letter.C, Accidental.NATURAL),),
    1: ((Letter.C, Accidental.SHARP), (Letter.D, Accidental.FLAT)),
    2: ((Letter.D, Accidental.NATURAL),),
    3: ((Letter.D, Accidental.SHARP), (Letter.E, Accidental.FLAT)),
    4: ((Letter.E, Accidental.NATURAL),),
    5: ((Letter.F, Accidental.NATURAL),),
    6: ((Letter.F, Accidental.SHARP), (Letter.G, Accidental.FLAT)),
    7: ((Letter.G, Accidental.NATURAL),),
    8: ((Letter.G, Accidental.SHARP), (Letter.A, Accidental.FLAT)),
    9: ((Letter.A, Accidental.NATURAL),),
    10: ((Letter.A, Accidental.SHARP), (Letter.B, Accidental.FLAT)),
    11: ((Letter.B, Accidental.NATURAL),),
}


def note_from_semitone(
    semitone: int,
    prefer_flat: bool = False,
    octave: int = REFERENCE_OCTAVE,
) -> Note:
    """
    Spell a semitone without any key context.

    Naturals are used where they exist; black keys are spelled with a
    sharp, or with a flat when `prefer_flat` is set. The octave of the
    result is `octave`, whatever octave `semitone` came from.
    """
    options = _ENHARMONIC_SPELLINGS[semitone % 12]
    letter, accidental = options[-1] if prefer_flat else options[0]
    return Note(letter, accidental, octave)
