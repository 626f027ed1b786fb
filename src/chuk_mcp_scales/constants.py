"""
Constants for the drill server.

No magic strings - shared messages live here.
"""


class ErrorMessages:
    """Standardized error messages."""

    INVALID_ROOT = "Invalid root: '{root}'. Expected a note name like 'C', 'F#' or 'Bb'."
    INVALID_SCALE_TYPE = (
        "Invalid scale type: '{scale_type}'. Expected one of: {choices}."
    )
    LAYOUT_NOT_FOUND = "Layout '{layout}' not found."


class SuccessMessages:
    """Standardized success messages."""

    NOTATION_GENERATED = "Generated {key} {scale_type} drill."
    MIDI_COMPILED = "Compiled {key} {scale_type} drill to {path}."
