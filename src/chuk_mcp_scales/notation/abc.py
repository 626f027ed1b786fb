"""
ABC notation emitter.

Renders an Exercise as ABC text for a grand staff:

    M: 2/4
    L: 1/16
    K: G
    V: 1 treble
    GABc defg | gfed cBAG :|] [G]4 [Aeg]4 | [Bdg]4 [Acdf]4 | [GBdg]8 |]
    V: 2 bass
    ...

Accidentals are written only where a note departs from the key
signature, including naturals that cancel a sharp or flat in the key.

Octaves use ABC's case convention around middle C: octave 4 is upper
case (C), octave 5 lower case (c), each octave above that adds an
apostrophe (c') and each octave below 4 adds a comma (C,).
"""

from __future__ import annotations

import re
from fractions import Fraction

from chuk_mcp_scales.core import REFERENCE_OCTAVE, Accidental, KeySignature, Letter, Note, ScaleType
from chuk_mcp_scales.models import Chord, Exercise, ExerciseLayout, Part, build_exercise

_ABC_ACCIDENTALS: dict[Accidental, str] = {
    Accidental.NATURAL: "=",
    Accidental.SHARP: "^",
    Accidental.DOUBLE_SHARP: "^^",
    Accidental.FLAT: "_",
    Accidental.DOUBLE_FLAT: "__",
}

_PITCH_PATTERN = re.compile(r"^(\^\^|\^|__|_|=)?([A-Ga-g])([',]*)$")


def encode_octave(letter: Letter, octave: int) -> str:
    """
    Letter with ABC case and octave markers.

    Examples:
        encode_octave(Letter.C, 4) -> "C"
        encode_octave(Letter.C, 6) -> "c'"
        encode_octave(Letter.C, 2) -> "C,,"
    """
    if octave > REFERENCE_OCTAVE:
        return letter.value.lower() + "'" * (octave - REFERENCE_OCTAVE - 1)
    return letter.value + "," * (REFERENCE_OCTAVE - octave)


def decode_octave(text: str) -> tuple[Letter, int]:
    """
    Inverse of encode_octave; a leading accidental is ignored.

    Mixed forms ABC allows, such as "c," for middle C, decode too.

    Raises:
        ValueError: If the text is not a single ABC pitch
    """
    match = _PITCH_PATTERN.match(text)
    if not match:
        raise ValueError(f"Not an ABC pitch: {text!r}")
    _, letter, markers = match.groups()
    base = REFERENCE_OCTAVE + 1 if letter.islower() else REFERENCE_OCTAVE
    return Letter(letter.upper()), base + markers.count("'") - markers.count(",")


def accidental_text(note: Note, key_signature: KeySignature) -> str:
    """Explicit accidental for a note, or '' when the key signature implies it."""
    if key_signature.is_implied(note):
        return ""
    return _ABC_ACCIDENTALS[note.accidental]


def note_to_abc(note: Note, key_signature: KeySignature) -> str:
    """A single note in ABC, e.g. '^F', '=f', '_B,'."""
    return accidental_text(note, key_signature) + encode_octave(note.letter, note.octave)


def chord_to_abc(chord: Chord, key_signature: KeySignature) -> str:
    """A bracketed chord with its length, e.g. '[CEGc]8'."""
    pitches = "".join(note_to_abc(n, key_signature) for n in chord.notes)
    return f"[{pitches}]{chord.length}"


def _run_to_abc(notes: tuple[Note, ...], key_signature: KeySignature, group_size: int) -> str:
    groups = [notes[i : i + group_size] for i in range(0, len(notes), group_size)]
    return " ".join("".join(note_to_abc(n, key_signature) for n in group) for group in groups)


def _cadence_to_abc(chords: tuple[Chord, ...], key_signature: KeySignature, layout: ExerciseLayout) -> str:
    bar_units = layout.bar_units
    tokens: list[str] = []
    filled = Fraction(0)
    for chord in chords:
        if filled >= bar_units:
            tokens.append("|")
            filled = Fraction(0)
        tokens.append(chord_to_abc(chord, key_signature))
        filled += chord.length
    return " ".join(tokens)


def part_to_abc(part: Part, key_signature: KeySignature, layout: ExerciseLayout) -> str:
    """One staff's music line: ascent | descent :|] cadence |]"""
    up = _run_to_abc(part.ascending, key_signature, layout.group_size)
    down = _run_to_abc(part.descending, key_signature, layout.group_size)
    cadence = _cadence_to_abc(part.cadence, key_signature, layout)
    return f"{up} | {down} :|] {cadence} |]"


def render_exercise(exercise: Exercise) -> str:
    """Render a built Exercise as ABC text."""
    layout = exercise.layout
    lines = [
        f"M: {layout.meter}",
        f"L: {layout.unit_length}",
        f"K: {exercise.key}",
    ]
    for voice, part in enumerate(exercise.parts, start=1):
        lines.append(f"V: {voice} {part.clef}")
        lines.append(part_to_abc(part, exercise.key_signature, layout))
    return "\n".join(lines) + "\n"


def generate_notation(
    root: Note,
    scale_type: ScaleType,
    layout: ExerciseLayout | None = None,
) -> str:
    """
    Generate the ABC grand-staff drill for a root and scale type.

    Args:
        root: Tonic (octave 4 puts the treble run from middle C upward)
        scale_type: Scale to practise
        layout: Timing layout (defaults to the standard 2/4 sixteenth drill)

    Returns:
        ABC notation text

    Example:
        generate_notation(Note(Letter.C), ScaleType.MAJOR)
    """
    return render_exercise(build_exercise(root, scale_type, layout))
