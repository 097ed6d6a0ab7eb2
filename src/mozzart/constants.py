"""
Constants for the pitch system.

No magic numbers - MIDI bounds, octave size and message templates live here.
"""

# MIDI note range (inclusive)
MIDI_MIN = 0
MIDI_MAX = 127

SEMITONES_PER_OCTAVE = 12

# Conventional MIDI octave numbering: pitch 0 is C-1, pitch 60 is C4
MIDI_OCTAVE_OFFSET = 1
MIN_OCTAVE = -1
MAX_OCTAVE = 9


class ErrorMessages:
    """Standardized error messages."""

    PITCH_OUT_OF_RANGE = "Pitch {value} is outside the MIDI range {low}-{high}."
    SHIFT_OUT_OF_RANGE = (
        "Shifting pitch {pitch} by {semitones} semitones gives {value}, "
        "outside the MIDI range {low}-{high}."
    )
    UNKNOWN_PITCH_CLASS = "Unknown pitch class: '{name}'."
    INVALID_PITCH_NAME = "Invalid pitch name: '{name}'. Expected a form like 'C4', 'F#3' or 'Bb-1'."
    UNKNOWN_SCALE_QUALITY = "Unknown scale quality: '{name}'."
    UNKNOWN_CHORD_QUALITY = "Unknown chord quality: '{name}'."
    EMPTY_STEP_PATTERN = "Step pattern must contain at least one step."
    INVALID_STEP = "Step pattern steps must be positive semitone counts, got {step}."
    ARITY_MISMATCH = "{kind} expects {expected} pitches, got {actual}."
    ROOT_MISMATCH = "{kind} must start on its root {root}, got {first}."
    QUALITY_MISMATCH = "{kind} quality '{quality}' does not match the given {rule}."
    STEP_MISMATCH = "Scale pitches do not follow the step pattern {pattern}."
    CHORD_TONE_MISMATCH = "Chord pitch {pitch!r} is not {interval} above the root {root!r}."
    DEGREE_OUT_OF_RANGE = "Degree must be 1-{high}, got {number}."
    EMPTY_SCALE_QUALITIES = "At least one scale quality is required."
    OCTAVE_RANGE_ORDER = "min_octave ({low}) must not exceed max_octave ({high})."
    SETTINGS_NOT_MAPPING = "Catalog settings YAML must be a mapping, got {kind}."
