"""
Interval primitives - the interval algebra.

An Interval is a signed distance in semitones. Positive values ascend,
negative values descend, zero is the unison. Intervals are unbounded:
compound intervals wider than an octave are ordinary values.
"""

from __future__ import annotations

from functools import total_ordering
from operator import index
from typing import TYPE_CHECKING, ClassVar

from mozzart.constants import SEMITONES_PER_OCTAVE

if TYPE_CHECKING:
    from mozzart.core.pitch import Pitch

# Short names for the simple and compound intervals up to two octaves
_SHORT_NAMES: dict[int, str] = {
    0: "P1",
    1: "m2",
    2: "M2",
    3: "m3",
    4: "M3",
    5: "P4",
    6: "TT",
    7: "P5",
    8: "m6",
    9: "M6",
    10: "m7",
    11: "M7",
    12: "P8",
    13: "m9",
    14: "M9",
    15: "m10",
    16: "M10",
    17: "P11",
    18: "A11",
    19: "P12",
    20: "m13",
    21: "M13",
    22: "m14",
    23: "M14",
    24: "P15",
}


@total_ordering
class Interval:
    """
    Signed distance between pitches in semitones.

    Scales are step patterns, chords are interval sets measured from a root,
    melodies are interval sequences - all of them built from this type.

    Immutable and hashable. Ordered by semitone count.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Compound intervals
    MINOR_NINTH: ClassVar[Interval]
    MAJOR_NINTH: ClassVar[Interval]
    MINOR_TENTH: ClassVar[Interval]
    MAJOR_TENTH: ClassVar[Interval]
    PERFECT_ELEVENTH: ClassVar[Interval]
    AUGMENTED_ELEVENTH: ClassVar[Interval]
    PERFECT_TWELFTH: ClassVar[Interval]
    MINOR_THIRTEENTH: ClassVar[Interval]
    MAJOR_THIRTEENTH: ClassVar[Interval]
    MINOR_FOURTEENTH: ClassVar[Interval]
    MAJOR_FOURTEENTH: ClassVar[Interval]
    DOUBLE_OCTAVE: ClassVar[Interval]

    # Enharmonic aliases
    SEMITONE: ClassVar[Interval]
    TONE: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    AUGMENTED_FIFTH: ClassVar[Interval]
    DIMINISHED_SEVENTH: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", index(semitones))

    @classmethod
    def between(cls, start: Pitch, end: Pitch) -> Interval:
        """
        Get the interval from one pitch to another.

        Never range-checked: the result of two valid pitches is always a
        valid interval, from -127 to +127 semitones.

        Args:
            start: The pitch measured from
            end: The pitch measured to

        Returns:
            Interval of ``end - start`` semitones (negative when descending)
        """
        return cls(int(end) - int(start))

    @classmethod
    def from_octaves(cls, octaves: int) -> Interval:
        """Interval spanning a whole number of octaves."""
        return cls(octaves * SEMITONES_PER_OCTAVE)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @property
    def octaves(self) -> int:
        """Number of whole octaves spanned (ignoring direction)."""
        return abs(self._semitones) // SEMITONES_PER_OCTAVE

    @property
    def is_compound(self) -> bool:
        """True if the interval spans more than an octave."""
        return abs(self._semitones) > SEMITONES_PER_OCTAVE

    @property
    def is_ascending(self) -> bool:
        return self._semitones > 0

    @property
    def is_descending(self) -> bool:
        return self._semitones < 0

    def compose(self, other: Interval) -> Interval:
        """Stack another interval on top of this one."""
        return Interval(self._semitones + other._semitones)

    def shift_octaves(self, octaves: int) -> Interval:
        """
        Widen the interval by whole octaves.

        M3.shift_octaves(1) -> M10 (16)
        """
        return Interval(self._semitones + octaves * SEMITONES_PER_OCTAVE)

    def simple(self) -> Interval:
        """
        Reduce a compound interval to its simple form, keeping direction.

        M10 (16) -> M3 (4)
        P15 (24) -> P8 (12)
        """
        size = abs(self._semitones)
        if size == 0:
            return self
        reduced = size % SEMITONES_PER_OCTAVE or SEMITONES_PER_OCTAVE
        return Interval(reduced if self._semitones > 0 else -reduced)

    def invert(self) -> Interval:
        """
        Invert the interval within an octave, keeping direction.

        Compound intervals are reduced first. Unison and octave invert
        into each other.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        P8 (12) -> P1 (0)
        -M3 (-4) -> -m6 (-8)
        """
        inverted = SEMITONES_PER_OCTAVE - abs(self.simple()._semitones)
        return Interval(-inverted if self._semitones < 0 else inverted)

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals."""
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compose(other)

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval from another."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones)

    def __neg__(self) -> Interval:
        """Negate the interval (descending instead of ascending)."""
        return Interval(-self._semitones)

    def __abs__(self) -> Interval:
        return Interval(abs(self._semitones))

    def __mul__(self, n: int) -> Interval:
        """Multiply an interval (e.g., two octaves)."""
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return Interval(self._semitones * n)

    def __rmul__(self, n: int) -> Interval:
        """Right multiply."""
        return self.__mul__(n)

    def __int__(self) -> int:
        return self._semitones

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Interval is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Interval is immutable")

    def __reduce__(self) -> tuple[type[Interval], tuple[int]]:
        return (Interval, (self._semitones,))

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Human-readable interval name, e.g. 'M3', '-P5', 'M3+2oct'."""
        sign = "-" if self._semitones < 0 else ""
        size = abs(self._semitones)
        if size in _SHORT_NAMES:
            return f"{sign}{_SHORT_NAMES[size]}"
        octaves, mod = divmod(size, SEMITONES_PER_OCTAVE)
        return f"{sign}{_SHORT_NAMES[mod]}+{octaves}oct"


def between(start: Pitch, end: Pitch) -> Interval:
    """Interval from ``start`` to ``end`` (see Interval.between)."""
    return Interval.between(start, end)


def compose(first: Interval, second: Interval) -> Interval:
    """Sum of two intervals."""
    return first.compose(second)


# Initialize class constants after class is defined
Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)

Interval.MINOR_NINTH = Interval(13)
Interval.MAJOR_NINTH = Interval(14)
Interval.MINOR_TENTH = Interval(15)
Interval.MAJOR_TENTH = Interval(16)
Interval.PERFECT_ELEVENTH = Interval(17)
Interval.AUGMENTED_ELEVENTH = Interval(18)
Interval.PERFECT_TWELFTH = Interval(19)
Interval.MINOR_THIRTEENTH = Interval(20)
Interval.MAJOR_THIRTEENTH = Interval(21)
Interval.MINOR_FOURTEENTH = Interval(22)
Interval.MAJOR_FOURTEENTH = Interval(23)
Interval.DOUBLE_OCTAVE = Interval(24)

Interval.SEMITONE = Interval.MINOR_SECOND
Interval.TONE = Interval.MAJOR_SECOND
Interval.AUGMENTED_FOURTH = Interval.TRITONE
Interval.DIMINISHED_FIFTH = Interval.TRITONE
Interval.AUGMENTED_FIFTH = Interval.MINOR_SIXTH
Interval.DIMINISHED_SEVENTH = Interval.MAJOR_SIXTH

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.TRITONE
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE

# Long names, ordered by size, used by the constants catalog
NAMED_INTERVALS: tuple[str, ...] = (
    "UNISON",
    "MINOR_SECOND",
    "MAJOR_SECOND",
    "MINOR_THIRD",
    "MAJOR_THIRD",
    "PERFECT_FOURTH",
    "TRITONE",
    "PERFECT_FIFTH",
    "MINOR_SIXTH",
    "MAJOR_SIXTH",
    "MINOR_SEVENTH",
    "MAJOR_SEVENTH",
    "OCTAVE",
    "MINOR_NINTH",
    "MAJOR_NINTH",
    "MINOR_TENTH",
    "MAJOR_TENTH",
    "PERFECT_ELEVENTH",
    "AUGMENTED_ELEVENTH",
    "PERFECT_TWELFTH",
    "MINOR_THIRTEENTH",
    "MAJOR_THIRTEENTH",
    "MINOR_FOURTEENTH",
    "MAJOR_FOURTEENTH",
    "DOUBLE_OCTAVE",
    "SEMITONE",
    "TONE",
    "AUGMENTED_FOURTH",
    "DIMINISHED_FIFTH",
    "AUGMENTED_FIFTH",
    "DIMINISHED_SEVENTH",
)

SHORT_INTERVALS: tuple[str, ...] = (
    "P1",
    "m2",
    "M2",
    "m3",
    "M3",
    "P4",
    "TT",
    "P5",
    "m6",
    "M6",
    "m7",
    "M7",
    "P8",
)
