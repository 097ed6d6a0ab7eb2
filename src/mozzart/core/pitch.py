"""
Pitch primitives - PitchClass, Pitch and RangeError.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
Pitch is an absolute MIDI note number, bounded to 0-127.

Every operation that produces a Pitch checks the MIDI range first and raises
RangeError instead of wrapping or clamping.
"""

from __future__ import annotations

import re
from enum import IntEnum
from functools import total_ordering
from operator import index

from mozzart.constants import (
    MIDI_MAX,
    MIDI_MIN,
    MIDI_OCTAVE_OFFSET,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from mozzart.core.interval import Interval

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Note letter, optional accidental, signed octave: C4, F#3, Bb-1, Cs4
_PITCH_NAME = re.compile(r"^([A-Ga-g](?:#|b|s)?)(-?\d+)$")


class RangeError(ValueError):
    """
    A pitch-producing operation left the MIDI range 0-127.

    Always caused by the inputs (a root too high or too low, a pattern too
    wide for the chosen root), never by internal state.
    """

    def __init__(self, value: int, message: str | None = None) -> None:
        self.value = value
        super().__init__(
            message
            or ErrorMessages.PITCH_OUT_OF_RANGE.format(value=value, low=MIDI_MIN, high=MIDI_MAX)
        )


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled at serialization.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the interval from this pitch class to another (ascending)."""
        return Interval((other.value - self.value) % SEMITONES_PER_OCTAVE)

    def in_octave(self, octave: int) -> Pitch:
        """The absolute pitch of this class in an octave. C in octave 4 is 60."""
        return Pitch(self.value + (octave + MIDI_OCTAVE_OFFSET) * SEMITONES_PER_OCTAVE)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db', 'Cs'."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Enum names (C, Cs, D, Ds, etc.), case-insensitive
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(ErrorMessages.UNKNOWN_PITCH_CLASS.format(name=name))


def split_pitch_name(name: str) -> tuple[PitchClass, int]:
    """
    Split a pitch name into pitch class and octave without range-checking.

    'C#4' -> (PitchClass.Cs, 4), 'Bb-1' -> (PitchClass.As, -1)
    """
    match = _PITCH_NAME.match(name.strip())
    if not match:
        raise ValueError(ErrorMessages.INVALID_PITCH_NAME.format(name=name))
    letter, octave = match.groups()
    # 'b' alone is the note B; as a suffix it is a flat
    letter = letter[0].upper() + letter[1:]
    return PitchClass.parse(letter), int(octave)


def _check_range(value: int) -> int:
    if not MIDI_MIN <= value <= MIDI_MAX:
        raise RangeError(value)
    return value


@total_ordering
class Pitch:
    """
    An absolute pitch as a MIDI note number (0-127), middle C = 60.

    Immutable and hashable. Equality and ordering are numeric.
    Constructing a pitch outside 0-127 raises RangeError.
    """

    __slots__ = ("_midi",)
    _midi: int

    def __init__(self, midi: int) -> None:
        """Create a pitch from a MIDI note number."""
        object.__setattr__(self, "_midi", _check_range(index(midi)))

    @classmethod
    def from_name(cls, pitch_class: PitchClass | str, octave: int) -> Pitch:
        """
        Build a pitch from a pitch class and a MIDI octave number.

        Args:
            pitch_class: PitchClass or a name such as 'C#' / 'Db'
            octave: Octave number, -1 to 9 (C4 = 60)

        Returns:
            The pitch, if it lies inside the MIDI range
        """
        if isinstance(pitch_class, str):
            pitch_class = PitchClass.parse(pitch_class)
        return pitch_class.in_octave(octave)

    @classmethod
    def parse(cls, name: str) -> Pitch:
        """Parse a pitch from a string like 'C4', 'F#3', 'Db5' or 'C-1'."""
        pitch_class, octave = split_pitch_name(name)
        return pitch_class.in_octave(octave)

    @property
    def midi(self) -> int:
        """The MIDI note number."""
        return self._midi

    @property
    def pitch_class(self) -> PitchClass:
        """Pitch class (0-11), independent of octave."""
        return PitchClass(self._midi % SEMITONES_PER_OCTAVE)

    @property
    def octave(self) -> int:
        """Conventional MIDI octave number (60 = C4, 0 = C-1)."""
        return self._midi // SEMITONES_PER_OCTAVE - MIDI_OCTAVE_OFFSET

    def name(self, prefer_flats: bool = False) -> str:
        """Note name with octave, e.g. 'C4', 'C#4' or 'Db4'."""
        return f"{self.pitch_class.spell(prefer_flats)}{self.octave}"

    def _shift(self, semitones: int) -> Pitch:
        value = self._midi + semitones
        if not MIDI_MIN <= value <= MIDI_MAX:
            raise RangeError(
                value,
                ErrorMessages.SHIFT_OUT_OF_RANGE.format(
                    pitch=self._midi,
                    semitones=semitones,
                    value=value,
                    low=MIDI_MIN,
                    high=MIDI_MAX,
                ),
            )
        return Pitch(value)

    def transpose_up(self, octaves: int = 1) -> Pitch:
        """Shift up by whole octaves. Raises RangeError above 127."""
        return self._shift(octaves * SEMITONES_PER_OCTAVE)

    def transpose_down(self, octaves: int = 1) -> Pitch:
        """Shift down by whole octaves. Raises RangeError below 0."""
        return self._shift(-octaves * SEMITONES_PER_OCTAVE)

    def add_interval(self, interval: Interval) -> Pitch:
        """
        Apply an interval to this pitch.

        Args:
            interval: Signed interval (negative moves down)

        Returns:
            The pitch ``interval.semitones`` away

        Raises:
            RangeError: If the result falls outside 0-127
        """
        return self._shift(interval.semitones)

    def subtract_interval(self, interval: Interval) -> Pitch:
        """Apply an interval downwards. Raises RangeError outside 0-127."""
        return self._shift(-interval.semitones)

    def interval_to(self, other: Pitch) -> Interval:
        """The interval from this pitch up (or down) to another."""
        return Interval.between(self, other)

    def __add__(self, other: Interval) -> Pitch:
        """Pitch + Interval, same contract as add_interval."""
        if not isinstance(other, Interval):
            return NotImplemented
        return self.add_interval(other)

    def __sub__(self, other: Interval | Pitch) -> Pitch | Interval:
        """Pitch - Interval gives a Pitch, Pitch - Pitch gives an Interval."""
        if isinstance(other, Interval):
            return self.subtract_interval(other)
        if isinstance(other, Pitch):
            return Interval.between(other, self)
        return NotImplemented

    def __int__(self) -> int:
        return self._midi

    def __index__(self) -> int:
        return self._midi

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return bool(self._midi == other._midi)

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return bool(self._midi < other._midi)

    def __hash__(self) -> int:
        return hash(self._midi)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Pitch is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Pitch is immutable")

    def __reduce__(self) -> tuple[type[Pitch], tuple[int]]:
        return (Pitch, (self._midi,))

    def __repr__(self) -> str:
        return f"Pitch({self._midi})"

    def __str__(self) -> str:
        return self.name()
