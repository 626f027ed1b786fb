"""
Scale primitives - ScaleType, Direction and scale construction.

Scales are interval patterns from a root. Construction steps through
the letter names one at a time and solves each accidental from a
running semitone count, so every scale is spelled with each of the
seven letters exactly once.
"""

from __future__ import annotations

from enum import Enum

from .pitch import Note, accidental_for_target


class Direction(str, Enum):
    """Direction of a scale run."""

    UP = "up"
    DOWN = "down"


class ScaleType(str, Enum):
    """
    The practised scale types, valued by their display name.

    Melodic minor is the only asymmetric type: it ascends with a raised
    6th and 7th and descends as the natural minor.
    """

    MAJOR = "Major"
    NATURAL_MINOR = "Minor (Natural)"
    HARMONIC_MINOR = "Minor (Harmonic)"
    MELODIC_MINOR = "Minor (Melodic)"

    @property
    def is_minor(self) -> bool:
        return self is not ScaleType.MAJOR

    def intervals(self, direction: Direction = Direction.UP) -> tuple[int, ...]:
        """
        Semitone steps between consecutive degrees, in the order they are walked.

        Args:
            direction: UP for the ascending pattern, DOWN for the descending one

        Returns:
            Seven intervals summing to an octave
        """
        if direction is Direction.UP:
            return _ASCENDING_INTERVALS[self]
        if self is ScaleType.MELODIC_MINOR:
            return tuple(reversed(_ASCENDING_INTERVALS[ScaleType.NATURAL_MINOR]))
        return tuple(reversed(_ASCENDING_INTERVALS[self]))

    @classmethod
    def parse(cls, name: str) -> ScaleType:
        """
        Parse a scale type from its display value, enum name or a short alias.

        Accepts 'Minor (Harmonic)', 'HARMONIC_MINOR', 'harmonic_minor', 'major', etc.
        """
        text = name.strip()
        for member in cls:
            if text == member.value:
                return member

        key = text.lower().replace("-", "_").replace(" ", "_")
        if key in _ALIASES:
            return _ALIASES[key]

        raise ValueError(f"Unknown scale type: {name}")


_ASCENDING_INTERVALS: dict[ScaleType, tuple[int, ...]] = {
    ScaleType.MAJOR: (2, 2, 1, 2, 2, 2, 1),
    ScaleType.NATURAL_MINOR: (2, 1, 2, 2, 1, 2, 2),
    ScaleType.HARMONIC_MINOR: (2, 1, 2, 2, 1, 3, 1),
    ScaleType.MELODIC_MINOR: (2, 1, 2, 2, 2, 2, 1),
}

_ALIASES: dict[str, ScaleType] = {
    "major": ScaleType.MAJOR,
    "minor": ScaleType.NATURAL_MINOR,
    "natural_minor": ScaleType.NATURAL_MINOR,
    "minor_natural": ScaleType.NATURAL_MINOR,
    "harmonic_minor": ScaleType.HARMONIC_MINOR,
    "minor_harmonic": ScaleType.HARMONIC_MINOR,
    "melodic_minor": ScaleType.MELODIC_MINOR,
    "minor_melodic": ScaleType.MELODIC_MINOR,
}


def scale_notes(
    root: Note,
    scale_type: ScaleType,
    direction: Direction = Direction.UP,
) -> list[Note]:
    """
    Build one octave of a scale, unison to octave inclusive.

    Going up, the octave number increments when the letter wraps B -> C;
    going down it decrements when the letter wraps C -> B. The eighth
    note has the root's letter and sits one octave away.

    Args:
        root: Starting note (its octave is the starting octave)
        scale_type: Interval pattern to use
        direction: UP or DOWN

    Returns:
        Eight notes

    Example:
        scale_notes(Note(Letter.G), ScaleType.MAJOR)
        -> G4 A4 B4 C5 D5 E5 F#5 G5
    """
    step = 1 if direction is Direction.UP else -1
    letter = root.letter
    octave = root.octave
    semitone = root.semitone

    notes = [root]
    for interval in scale_type.intervals(direction):
        semitone += step * interval
        next_letter = letter.step(step)
        if step > 0 and next_letter.index < letter.index:
            octave += 1
        elif step < 0 and next_letter.index > letter.index:
            octave -= 1
        letter = next_letter
        notes.append(Note(letter, accidental_for_target(semitone, letter), octave))
    return notes
