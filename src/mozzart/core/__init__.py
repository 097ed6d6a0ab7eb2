"""
Core music primitives.

These are the numeric invariants everything else composes on:
- Pitch: MIDI note number, bounded to 0-127
- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Signed distance between pitches in semitones
- StepPattern / ScaleQuality / Scale: Step patterns applied cumulatively from a root
- IntervalSet / ChordQuality / Chord: Interval sets applied from a root
- into_intervals / into_pitches: Exact conversions between the two views
"""

from mozzart.core.chord import Chord, ChordQuality, IntervalSet, generate_chord
from mozzart.core.interval import Interval, between, compose
from mozzart.core.pitch import Pitch, PitchClass, RangeError
from mozzart.core.scale import (
    CANONICAL_SCALE_QUALITIES,
    Scale,
    ScaleQuality,
    StepPattern,
    generate_scale,
)
from mozzart.core.sequence import into_intervals, into_pitches, relocate, transpose_sequence

__all__ = [
    # Pitch
    "Pitch",
    "PitchClass",
    "RangeError",
    # Interval
    "Interval",
    "between",
    "compose",
    # Scale
    "StepPattern",
    "ScaleQuality",
    "Scale",
    "CANONICAL_SCALE_QUALITIES",
    "generate_scale",
    # Chord
    "IntervalSet",
    "ChordQuality",
    "Chord",
    "generate_chord",
    # Sequence
    "into_intervals",
    "into_pitches",
    "transpose_sequence",
    "relocate",
]
