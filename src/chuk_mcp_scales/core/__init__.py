"""
Core music-theory primitives.

Everything here is pure and immutable:
- Letter, Accidental, Note: spelled pitches
- PitchClass: the 12 chromatic pitch classes (0-11)
- ScaleType, Direction: interval patterns and scale construction
- KeySignature: implied accidentals of a key
- Circle of fifths: key navigation and relative keys
- Cadence voicings: the closing progression of each drill
"""

from chuk_mcp_scales.core.cadence import (
    CADENCE_LH,
    CADENCE_RH_MAJOR,
    CADENCE_RH_MINOR,
    CadenceSpeller,
    right_hand_voicing,
)
from chuk_mcp_scales.core.circle import (
    CIRCLE_OF_FIFTHS,
    MINOR_CIRCLE_OF_FIFTHS,
    SELECTABLE_ROOTS,
    next_fifth,
    prev_fifth,
    random_root,
    relative_note,
    relative_scale_type,
)
from chuk_mcp_scales.core.key import KeySignature, key_name, key_signature_map
from chuk_mcp_scales.core.pitch import (
    REFERENCE_OCTAVE,
    Accidental,
    Letter,
    Note,
    PitchClass,
    accidental_for_target,
    note_from_semitone,
)
from chuk_mcp_scales.core.scale import Direction, ScaleType, scale_notes

__all__ = [
    # Pitch
    "REFERENCE_OCTAVE",
    "Accidental",
    "Letter",
    "Note",
    "PitchClass",
    "accidental_for_target",
    "note_from_semitone",
    # Scale
    "Direction",
    "ScaleType",
    "scale_notes",
    # Key
    "KeySignature",
    "key_name",
    "key_signature_map",
    # Circle
    "CIRCLE_OF_FIFTHS",
    "MINOR_CIRCLE_OF_FIFTHS",
    "SELECTABLE_ROOTS",
    "next_fifth",
    "prev_fifth",
    "random_root",
    "relative_note",
    "relative_scale_type",
    # Cadence
    "CADENCE_LH",
    "CADENCE_RH_MAJOR",
    "CADENCE_RH_MINOR",
    "CadenceSpeller",
    "right_hand_voicing",
]
