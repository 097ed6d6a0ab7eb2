"""
Chord primitives - IntervalSet, ChordQuality, Chord.

Chords are interval sets measured from a root. Unlike scales, every
interval is applied to the root itself, not to the previous note, so the
caller controls the voicing: the order of the set is the order of the notes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from mozzart.constants import ErrorMessages
from mozzart.core.interval import Interval
from mozzart.core.pitch import Pitch, PitchClass

# Ordered intervals from a common root
IntervalSet = tuple[Interval, ...]


class ChordQuality(str, Enum):
    """
    Named chord qualities, each bound to an interval set.

    The root is implied and not part of the set: a major triad is
    {M3, P5}, giving root, third and fifth.
    """

    MAJOR_TRIAD = "major_triad"
    MINOR_TRIAD = "minor_triad"
    DIMINISHED_TRIAD = "diminished_triad"
    AUGMENTED_TRIAD = "augmented_triad"
    SUS2 = "sus2"
    SUS4 = "sus4"
    MAJOR_SIXTH = "major_sixth"
    MINOR_SIXTH = "minor_sixth"
    MAJOR_SIXTH_NINTH = "major_sixth_ninth"
    MINOR_SIXTH_NINTH = "minor_sixth_ninth"
    DOMINANT_SEVENTH = "dominant_seventh"
    MAJOR_SEVENTH = "major_seventh"
    MINOR_SEVENTH = "minor_seventh"
    MINOR_MAJOR_SEVENTH = "minor_major_seventh"
    DIMINISHED_SEVENTH = "diminished_seventh"
    HALF_DIMINISHED_SEVENTH = "half_diminished_seventh"
    AUGMENTED_SEVENTH = "augmented_seventh"
    DOMINANT_SEVENTH_NINTH = "dominant_seventh_ninth"
    MINOR_SEVENTH_NINTH = "minor_seventh_ninth"
    DOMINANT_NINTH = "dominant_ninth"
    MINOR_NINTH = "minor_ninth"
    MAJOR_NINTH = "major_ninth"
    DOMINANT_ELEVENTH = "dominant_eleventh"
    MINOR_ELEVENTH = "minor_eleventh"
    MAJOR_ELEVENTH = "major_eleventh"
    DOMINANT_THIRTEENTH = "dominant_thirteenth"
    MINOR_THIRTEENTH = "minor_thirteenth"
    MAJOR_THIRTEENTH = "major_thirteenth"

    @property
    def intervals(self) -> IntervalSet:
        """The intervals from the root that define this quality."""
        return _QUALITY_INTERVALS[self]

    @property
    def size(self) -> int:
        """Number of notes, root included."""
        return len(self.intervals) + 1

    @classmethod
    def parse(cls, name: str | ChordQuality) -> ChordQuality:
        """Parse a quality from a string like 'major_triad', 'Dominant Seventh', 'm7'."""
        if isinstance(name, ChordQuality):
            return name
        if not isinstance(name, str):
            raise ValueError(ErrorMessages.UNKNOWN_CHORD_QUALITY.format(name=name))
        key = name.strip()
        if key in _SYMBOLS:
            return _SYMBOLS[key]
        key = key.lower().replace(" ", "_").replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(ErrorMessages.UNKNOWN_CHORD_QUALITY.format(name=name)) from None


_M3 = Interval.MAJOR_THIRD
_m3 = Interval.MINOR_THIRD
_P5 = Interval.PERFECT_FIFTH
_d5 = Interval.DIMINISHED_FIFTH
_A5 = Interval.AUGMENTED_FIFTH
_M6 = Interval.MAJOR_SIXTH
_d7 = Interval.DIMINISHED_SEVENTH
_m7 = Interval.MINOR_SEVENTH
_M7 = Interval.MAJOR_SEVENTH
_M9 = Interval.MAJOR_NINTH
_P11 = Interval.PERFECT_ELEVENTH
_M13 = Interval.MAJOR_THIRTEENTH

_QUALITY_INTERVALS: dict[ChordQuality, IntervalSet] = {
    ChordQuality.MAJOR_TRIAD: (_M3, _P5),
    ChordQuality.MINOR_TRIAD: (_m3, _P5),
    ChordQuality.DIMINISHED_TRIAD: (_m3, _d5),
    ChordQuality.AUGMENTED_TRIAD: (_M3, _A5),
    ChordQuality.SUS2: (Interval.MAJOR_SECOND, _P5),
    ChordQuality.SUS4: (Interval.PERFECT_FOURTH, _P5),
    ChordQuality.MAJOR_SIXTH: (_M3, _P5, _M6),
    ChordQuality.MINOR_SIXTH: (_m3, _P5, _M6),
    ChordQuality.MAJOR_SIXTH_NINTH: (_M3, _P5, _M6, _M9),
    ChordQuality.MINOR_SIXTH_NINTH: (_m3, _P5, _M6, _M9),
    ChordQuality.DOMINANT_SEVENTH: (_M3, _P5, _m7),
    ChordQuality.MAJOR_SEVENTH: (_M3, _P5, _M7),
    ChordQuality.MINOR_SEVENTH: (_m3, _P5, _m7),
    ChordQuality.MINOR_MAJOR_SEVENTH: (_m3, _P5, _M7),
    ChordQuality.DIMINISHED_SEVENTH: (_m3, _d5, _d7),
    ChordQuality.HALF_DIMINISHED_SEVENTH: (_m3, _d5, _m7),
    ChordQuality.AUGMENTED_SEVENTH: (_M3, _A5, _m7),
    ChordQuality.DOMINANT_SEVENTH_NINTH: (_M3, _P5, _m7, _M9),
    ChordQuality.MINOR_SEVENTH_NINTH: (_m3, _P5, _m7, _M9),
    # Ninth chords without an explicit seventh qualifier are voiced the same
    ChordQuality.DOMINANT_NINTH: (_M3, _P5, _m7, _M9),
    ChordQuality.MINOR_NINTH: (_m3, _P5, _m7, _M9),
    ChordQuality.MAJOR_NINTH: (_M3, _P5, _M7, _M9),
    ChordQuality.DOMINANT_ELEVENTH: (_M3, _P5, _m7, _M9, _P11),
    ChordQuality.MINOR_ELEVENTH: (_m3, _P5, _m7, _M9, _P11),
    ChordQuality.MAJOR_ELEVENTH: (_M3, _P5, _M7, _M9, _P11),
    ChordQuality.DOMINANT_THIRTEENTH: (_M3, _P5, _m7, _M9, _P11, _M13),
    ChordQuality.MINOR_THIRTEENTH: (_m3, _P5, _m7, _M9, _P11, _M13),
    ChordQuality.MAJOR_THIRTEENTH: (_M3, _P5, _M7, _M9, _P11, _M13),
}

# Common chord symbols (case-sensitive: 'M7' is not 'm7')
_SYMBOLS: dict[str, ChordQuality] = {
    "maj": ChordQuality.MAJOR_TRIAD,
    "m": ChordQuality.MINOR_TRIAD,
    "dim": ChordQuality.DIMINISHED_TRIAD,
    "aug": ChordQuality.AUGMENTED_TRIAD,
    "6": ChordQuality.MAJOR_SIXTH,
    "m6": ChordQuality.MINOR_SIXTH,
    "7": ChordQuality.DOMINANT_SEVENTH,
    "maj7": ChordQuality.MAJOR_SEVENTH,
    "M7": ChordQuality.MAJOR_SEVENTH,
    "m7": ChordQuality.MINOR_SEVENTH,
    "mM7": ChordQuality.MINOR_MAJOR_SEVENTH,
    "dim7": ChordQuality.DIMINISHED_SEVENTH,
    "m7b5": ChordQuality.HALF_DIMINISHED_SEVENTH,
    "aug7": ChordQuality.AUGMENTED_SEVENTH,
    "9": ChordQuality.DOMINANT_NINTH,
    "m9": ChordQuality.MINOR_NINTH,
    "maj9": ChordQuality.MAJOR_NINTH,
    "11": ChordQuality.DOMINANT_ELEVENTH,
    "m11": ChordQuality.MINOR_ELEVENTH,
    "maj11": ChordQuality.MAJOR_ELEVENTH,
    "13": ChordQuality.DOMINANT_THIRTEENTH,
    "m13": ChordQuality.MINOR_THIRTEENTH,
    "maj13": ChordQuality.MAJOR_THIRTEENTH,
}


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: an interval set placed on a root pitch.

    Pitches are the root followed by one pitch per interval, in the order
    the intervals were given.
    """

    root: Pitch
    pitches: tuple[Pitch, ...]
    intervals: IntervalSet
    quality: ChordQuality | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "pitches", tuple(self.pitches))
        object.__setattr__(self, "intervals", tuple(self.intervals))

        expected = len(self.intervals) + 1
        if len(self.pitches) != expected:
            raise ValueError(
                ErrorMessages.ARITY_MISMATCH.format(
                    kind="Chord", expected=expected, actual=len(self.pitches)
                )
            )
        if self.pitches[0] != self.root:
            raise ValueError(
                ErrorMessages.ROOT_MISMATCH.format(
                    kind="Chord", root=self.root, first=self.pitches[0]
                )
            )
        for pitch, interval in zip(self.pitches[1:], self.intervals):
            if Interval.between(self.root, pitch) != interval:
                raise ValueError(
                    ErrorMessages.CHORD_TONE_MISMATCH.format(
                        pitch=pitch, interval=interval, root=self.root
                    )
                )
        if self.quality is not None and self.quality.intervals != self.intervals:
            raise ValueError(
                ErrorMessages.QUALITY_MISMATCH.format(
                    kind="Chord", quality=self.quality.value, rule="interval set"
                )
            )

    @classmethod
    def build(cls, root: Pitch, quality: ChordQuality | str) -> Chord:
        """
        Build the chord of a named quality on a root.

        Raises:
            RangeError: If any chord tone leaves the MIDI range
        """
        quality = ChordQuality.parse(quality)
        return generate_chord(root, quality.intervals, quality)

    def pitch_classes(self) -> list[PitchClass]:
        """Distinct pitch classes in voicing order."""
        return list(dict.fromkeys(pitch.pitch_class for pitch in self.pitches))

    def transpose(self, interval: Interval) -> Chord:
        """The same chord moved by an interval. Raises RangeError if it no longer fits."""
        return generate_chord(self.root.add_interval(interval), self.intervals, self.quality)

    def __len__(self) -> int:
        return len(self.pitches)

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self.pitches)

    def __getitem__(self, position: int) -> Pitch:
        return self.pitches[position]

    def __contains__(self, item: object) -> bool:
        """Membership by pitch class."""
        if isinstance(item, Pitch):
            item = item.pitch_class
        if not isinstance(item, PitchClass):
            return False
        return any(pitch.pitch_class == item for pitch in self.pitches)

    def __str__(self) -> str:
        label = self.quality.value.replace("_", " ") if self.quality else "chord"
        return f"{self.root.name()} {label}"


def generate_chord(
    root: Pitch,
    intervals: IntervalSet | list[Interval],
    quality: ChordQuality | None = None,
) -> Chord:
    """
    Generate a chord by applying each interval to the root.

    Args:
        root: The chord root, always the first pitch
        intervals: Intervals from the root, in voicing order (not sorted)
        quality: Optional quality tag (must match the intervals)

    Returns:
        Chord of len(intervals) + 1 pitches

    Raises:
        RangeError: If any chord tone leaves 0-127; no partial chord is returned
    """
    intervals = tuple(intervals)
    pitches = (root, *(root.add_interval(interval) for interval in intervals))
    return Chord(root, pitches, intervals, quality)
