"""
mozzart - pitch and interval algebra for music theory.

Pitches are MIDI note numbers, intervals are signed semitone counts.
Scales and chords are generated from a root and a rule (a step pattern or
an interval set); sequences convert exactly between pitches and intervals.

    >>> from mozzart import Pitch, Chord, ChordQuality, into_intervals
    >>> c_major = Chord.build(Pitch(60), ChordQuality.MAJOR_TRIAD)
    >>> [p.name() for p in c_major]
    ['C4', 'E4', 'G4']
    >>> into_intervals(c_major.pitches)
    [Interval(4), Interval(3)]
"""

from mozzart.catalog import ConstantsCatalog, get_catalog
from mozzart.core import (
    CANONICAL_SCALE_QUALITIES,
    Chord,
    ChordQuality,
    Interval,
    IntervalSet,
    Pitch,
    PitchClass,
    RangeError,
    Scale,
    ScaleQuality,
    StepPattern,
    between,
    compose,
    generate_chord,
    generate_scale,
    into_intervals,
    into_pitches,
    relocate,
    transpose_sequence,
)
from mozzart.settings import CatalogSettings

__version__ = "0.1.0"

__all__ = [
    # Pitch and interval algebra
    "Pitch",
    "PitchClass",
    "Interval",
    "RangeError",
    "between",
    "compose",
    # Generators
    "StepPattern",
    "ScaleQuality",
    "Scale",
    "CANONICAL_SCALE_QUALITIES",
    "generate_scale",
    "IntervalSet",
    "ChordQuality",
    "Chord",
    "generate_chord",
    # Sequences
    "into_intervals",
    "into_pitches",
    "transpose_sequence",
    "relocate",
    # Catalog
    "ConstantsCatalog",
    "CatalogSettings",
    "get_catalog",
]
