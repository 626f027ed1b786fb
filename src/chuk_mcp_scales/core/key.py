"""
Key signatures - which accidental each letter carries by default.

The signature is read off the key's own scale rather than looked up:
major keys use the major scale, minor keys the natural minor. Any note
whose accidental matches the signature is written without one.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from .pitch import Accidental, Letter, Note
from .scale import Direction, ScaleType, scale_notes


@dataclass(frozen=True)
class KeySignature(Mapping[Letter, Accidental]):
    """
    Implied accidental for each of the seven letters.

    Immutable; behaves as a read-only mapping Letter -> Accidental.
    """

    accidentals: tuple[Accidental, ...]  # indexed by Letter.index

    def __post_init__(self) -> None:
        if len(self.accidentals) != len(Letter):
            raise ValueError(f"Key signature needs 7 accidentals, got {len(self.accidentals)}")

    def __getitem__(self, letter: Letter) -> Accidental:
        return self.accidentals[letter.index]

    def __iter__(self) -> Iterator[Letter]:
        return iter(Letter)

    def __len__(self) -> int:
        return len(self.accidentals)

    def implied(self, letter: Letter) -> Accidental:
        """The accidental a note with this letter gets from the signature."""
        return self[letter]

    def is_implied(self, note: Note) -> bool:
        """True if the note's accidental needs no written sign in this key."""
        return self[note.letter] == note.accidental

    @property
    def sharps(self) -> int:
        return sum(1 for a in self.accidentals if a.offset > 0)

    @property
    def flats(self) -> int:
        return sum(1 for a in self.accidentals if a.offset < 0)

    @property
    def leans_flat(self) -> bool:
        return self.flats > 0

    @classmethod
    def from_notes(cls, notes: list[Note]) -> KeySignature:
        """Build a signature from one octave of a seven-letter scale."""
        by_letter = {note.letter: note.accidental for note in notes}
        return cls(tuple(by_letter.get(letter, Accidental.NATURAL) for letter in Letter))

    @classmethod
    def for_scale(cls, root: Note, scale_type: ScaleType) -> KeySignature:
        """Signature of the key a scale is written in (major or natural minor)."""
        return key_signature_map(root, scale_type.is_minor)


def key_signature_map(root: Note, is_minor: bool) -> KeySignature:
    """
    Derive the key signature of `root` major or `root` minor.

    Args:
        root: Tonic of the key
        is_minor: Use the natural minor scale instead of the major scale

    Returns:
        The KeySignature for the key
    """
    scale_type = ScaleType.NATURAL_MINOR if is_minor else ScaleType.MAJOR
    return KeySignature.from_notes(scale_notes(root, scale_type, Direction.UP)[:7])


def key_name(root: Note, is_minor: bool) -> str:
    """Key declaration text: root spelling plus 'm' for minor keys (e.g. 'F#m')."""
    return f"{root.name}{'m' if is_minor else ''}"
