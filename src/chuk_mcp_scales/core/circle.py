"""
Circle of fifths - key navigation and relative keys.

Navigation is a table lookup, never a runtime enharmonic decision: the
spelling of every key (F# major not Gb major, Bb minor not A# minor)
is fixed in the two circles below. The circles are position-aligned,
so index i holds a relative major/minor pair in both.
"""

from __future__ import annotations

import logging
import random

from .pitch import Accidental, Letter, Note, note_from_semitone
from .scale import ScaleType

logger = logging.getLogger(__name__)

_N = Accidental.NATURAL
_S = Accidental.SHARP
_F = Accidental.FLAT

# Sharp side up to F#, flat side from Db
CIRCLE_OF_FIFTHS: tuple[Note, ...] = (
    Note(Letter.C, _N),
    Note(Letter.G, _N),
    Note(Letter.D, _N),
    Note(Letter.A, _N),
    Note(Letter.E, _N),
    Note(Letter.B, _N),
    Note(Letter.F, _S),
    Note(Letter.D, _F),
    Note(Letter.A, _F),
    Note(Letter.E, _F),
    Note(Letter.B, _F),
    Note(Letter.F, _N),
)

# Relative minors of CIRCLE_OF_FIFTHS, index for index; sharp side up to D#
MINOR_CIRCLE_OF_FIFTHS: tuple[Note, ...] = (
    Note(Letter.A, _N),
    Note(Letter.E, _N),
    Note(Letter.B, _N),
    Note(Letter.F, _S),
    Note(Letter.C, _S),
    Note(Letter.G, _S),
    Note(Letter.D, _S),
    Note(Letter.B, _F),
    Note(Letter.F, _N),
    Note(Letter.C, _N),
    Note(Letter.G, _N),
    Note(Letter.D, _N),
)

# One root per pitch class, in chromatic order
SELECTABLE_ROOTS: tuple[Note, ...] = tuple(sorted(CIRCLE_OF_FIFTHS, key=lambda n: n.pitch_class))

_PERFECT_FIFTH = 7
_MINOR_THIRD = 3


def _circle_for(scale_type: ScaleType) -> tuple[Note, ...]:
    return MINOR_CIRCLE_OF_FIFTHS if scale_type.is_minor else CIRCLE_OF_FIFTHS


def circle_index(note: Note, circle: tuple[Note, ...] = CIRCLE_OF_FIFTHS) -> int | None:
    """Position of the circle entry pitch-equal to `note`, or None."""
    for i, entry in enumerate(circle):
        if entry.is_pitch_equal(note):
            return i
    return None


def _fallback_fifth(note: Note, up: bool) -> Note:
    # Every pitch class is in both circles, so lookups cannot miss.
    # Kept for malformed input: compute the fifth and guess a spelling.
    logger.debug("%s not found in circle of fifths, computing fifth", note)
    if up:
        return note_from_semitone(note.semitone + _PERFECT_FIFTH, prefer_flat=note.accidental.is_flat)
    return note_from_semitone(note.semitone - _PERFECT_FIFTH, prefer_flat=True)


def next_fifth(note: Note, scale_type: ScaleType = ScaleType.MAJOR) -> Note:
    """
    The key a perfect fifth above, as spelled in the circle.

    Args:
        note: Current root (octave ignored)
        scale_type: Minor types navigate the minor circle

    Returns:
        Next root clockwise (octave 4)
    """
    circle = _circle_for(scale_type)
    idx = circle_index(note, circle)
    if idx is None:
        return _fallback_fifth(note, up=True)
    return circle[(idx + 1) % len(circle)]


def prev_fifth(note: Note, scale_type: ScaleType = ScaleType.MAJOR) -> Note:
    """The key a perfect fifth below (counter-clockwise), as spelled in the circle."""
    circle = _circle_for(scale_type)
    idx = circle_index(note, circle)
    if idx is None:
        return _fallback_fifth(note, up=False)
    return circle[(idx - 1) % len(circle)]


def relative_note(root: Note, scale_type: ScaleType) -> Note:
    """
    Root of the relative key.

    Major roots map to their relative minor, minor roots (any minor type)
    to their relative major, always landing on the circle's spelling.

    Example:
        relative_note(Note(Letter.E, Accidental.FLAT), ScaleType.MAJOR) -> C4
    """
    source, target = (
        (MINOR_CIRCLE_OF_FIFTHS, CIRCLE_OF_FIFTHS)
        if scale_type.is_minor
        else (CIRCLE_OF_FIFTHS, MINOR_CIRCLE_OF_FIFTHS)
    )
    idx = circle_index(root, source)
    if idx is not None:
        return target[idx]

    # Unreachable for valid notes; mirrors _fallback_fifth
    logger.debug("%s not found in circle of fifths, computing relative key", root)
    if scale_type.is_minor:
        return note_from_semitone(root.semitone + _MINOR_THIRD, prefer_flat=root.accidental.is_flat)
    return note_from_semitone(
        root.semitone - _MINOR_THIRD,
        prefer_flat=root.accidental.is_flat or root.letter is Letter.F,
    )


def relative_scale_type(scale_type: ScaleType) -> ScaleType:
    """Scale type practised in the relative key: majors go harmonic minor, minors go major."""
    return ScaleType.MAJOR if scale_type.is_minor else ScaleType.HARMONIC_MINOR


def random_root(exclude: Note | None = None, rng: random.Random | None = None) -> Note:
    """
    Pick a random selectable root, never pitch-equal to `exclude`.

    Args:
        exclude: Current root to move away from
        rng: Random source (defaults to the module-level generator)
    """
    choices = [r for r in SELECTABLE_ROOTS if exclude is None or not r.is_pitch_equal(exclude)]
    return (rng or random).choice(choices)
