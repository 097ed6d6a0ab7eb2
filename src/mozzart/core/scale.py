"""
Scale primitives - StepPattern, ScaleQuality, Scale.

Scales are step patterns applied cumulatively from a root pitch.
A step pattern is the shape; a scale is that shape placed on a concrete root.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from mozzart.constants import ErrorMessages
from mozzart.core.interval import Interval
from mozzart.core.pitch import Pitch, PitchClass
from mozzart.core.sequence import into_intervals


@dataclass(frozen=True)
class StepPattern:
    """
    A scale shape defined by its semitone steps.

    The steps are from one degree to the next (not cumulative).
    A major scale is: W W H W W W H (2 2 1 2 2 2 1 semitones)

    Steps must be positive. The span need not be an octave, but every
    named pattern below spans exactly 12 semitones.

    Immutable and hashable. The name is a label only and does not take part
    in equality.
    """

    steps: tuple[int, ...]
    name: str = field(default="", compare=False)

    # Common step patterns (defined after class)
    MAJOR: ClassVar[StepPattern]
    NATURAL_MINOR: ClassVar[StepPattern]
    HARMONIC_MINOR: ClassVar[StepPattern]
    MELODIC_MINOR: ClassVar[StepPattern]
    DORIAN: ClassVar[StepPattern]
    PHRYGIAN: ClassVar[StepPattern]
    LYDIAN: ClassVar[StepPattern]
    MIXOLYDIAN: ClassVar[StepPattern]
    LOCRIAN: ClassVar[StepPattern]
    MAJOR_PENTATONIC: ClassVar[StepPattern]
    MINOR_PENTATONIC: ClassVar[StepPattern]

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))
        if not self.steps:
            raise ValueError(ErrorMessages.EMPTY_STEP_PATTERN)
        for step in self.steps:
            if not isinstance(step, int) or isinstance(step, bool) or step <= 0:
                raise ValueError(ErrorMessages.INVALID_STEP.format(step=step))

    @property
    def span(self) -> int:
        """Total semitones covered by the pattern."""
        return sum(self.steps)

    def intervals(self) -> tuple[Interval, ...]:
        """The steps as intervals."""
        return tuple(Interval(step) for step in self.steps)

    def offsets(self) -> tuple[int, ...]:
        """Semitones from the root to each degree, starting with 0."""
        offsets = [0]
        for step in self.steps:
            offsets.append(offsets[-1] + step)
        return tuple(offsets)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[int]:
        return iter(self.steps)

    def __str__(self) -> str:
        return self.name or "-".join(str(step) for step in self.steps)


StepPattern.MAJOR = StepPattern((2, 2, 1, 2, 2, 2, 1), "major")
StepPattern.NATURAL_MINOR = StepPattern((2, 1, 2, 2, 1, 2, 2), "natural minor")
StepPattern.HARMONIC_MINOR = StepPattern((2, 1, 2, 2, 1, 3, 1), "harmonic minor")
StepPattern.MELODIC_MINOR = StepPattern((2, 1, 2, 2, 2, 2, 1), "melodic minor")
StepPattern.DORIAN = StepPattern((2, 1, 2, 2, 2, 1, 2), "dorian")
StepPattern.PHRYGIAN = StepPattern((1, 2, 2, 2, 1, 2, 2), "phrygian")
StepPattern.LYDIAN = StepPattern((2, 2, 2, 1, 2, 2, 1), "lydian")
StepPattern.MIXOLYDIAN = StepPattern((2, 2, 1, 2, 2, 1, 2), "mixolydian")
StepPattern.LOCRIAN = StepPattern((1, 2, 2, 1, 2, 2, 2), "locrian")
StepPattern.MAJOR_PENTATONIC = StepPattern((2, 2, 3, 2, 3), "major pentatonic")
StepPattern.MINOR_PENTATONIC = StepPattern((3, 2, 2, 3, 2), "minor pentatonic")


class ScaleQuality(str, Enum):
    """Named scale qualities, each bound to one step pattern."""

    MAJOR = "major"
    NATURAL_MINOR = "natural_minor"
    HARMONIC_MINOR = "harmonic_minor"
    MELODIC_MINOR = "melodic_minor"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    LOCRIAN = "locrian"
    MAJOR_PENTATONIC = "major_pentatonic"
    MINOR_PENTATONIC = "minor_pentatonic"

    @property
    def pattern(self) -> StepPattern:
        """The step pattern that defines this quality."""
        return _QUALITY_PATTERNS[self]

    @classmethod
    def parse(cls, name: str | ScaleQuality) -> ScaleQuality:
        """
        Parse a quality from a string like 'major', 'minor', 'Harmonic Minor'.

        Spaces and hyphens are read as underscores.
        """
        if isinstance(name, ScaleQuality):
            return name
        if not isinstance(name, str):
            raise ValueError(ErrorMessages.UNKNOWN_SCALE_QUALITY.format(name=name))
        key = name.strip().lower().replace(" ", "_").replace("-", "_")
        key = _QUALITY_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(ErrorMessages.UNKNOWN_SCALE_QUALITY.format(name=name)) from None


_QUALITY_PATTERNS: dict[ScaleQuality, StepPattern] = {
    ScaleQuality.MAJOR: StepPattern.MAJOR,
    ScaleQuality.NATURAL_MINOR: StepPattern.NATURAL_MINOR,
    ScaleQuality.HARMONIC_MINOR: StepPattern.HARMONIC_MINOR,
    ScaleQuality.MELODIC_MINOR: StepPattern.MELODIC_MINOR,
    ScaleQuality.DORIAN: StepPattern.DORIAN,
    ScaleQuality.PHRYGIAN: StepPattern.PHRYGIAN,
    ScaleQuality.LYDIAN: StepPattern.LYDIAN,
    ScaleQuality.MIXOLYDIAN: StepPattern.MIXOLYDIAN,
    ScaleQuality.LOCRIAN: StepPattern.LOCRIAN,
    ScaleQuality.MAJOR_PENTATONIC: StepPattern.MAJOR_PENTATONIC,
    ScaleQuality.MINOR_PENTATONIC: StepPattern.MINOR_PENTATONIC,
}

_QUALITY_ALIASES: dict[str, str] = {
    "ionian": "major",
    "minor": "natural_minor",
    "aeolian": "natural_minor",
    "harmonic": "harmonic_minor",
    "melodic": "melodic_minor",
}

# The four qualities the constants catalog is built from
CANONICAL_SCALE_QUALITIES: tuple[ScaleQuality, ...] = (
    ScaleQuality.MAJOR,
    ScaleQuality.NATURAL_MINOR,
    ScaleQuality.HARMONIC_MINOR,
    ScaleQuality.MELODIC_MINOR,
)


@dataclass(frozen=True)
class Scale:
    """
    A concrete scale: a step pattern placed on a root pitch.

    Pitches run from the root through every step, so a seven-step pattern
    gives eight pitches (the octave is included). Construction validates
    the arity, the root and the steps against the pattern and quality.

    Examples:
        Scale.build(Pitch(60), ScaleQuality.MAJOR) = C4 D4 E4 F4 G4 A4 B4 C5
    """

    root: Pitch
    pitches: tuple[Pitch, ...]
    pattern: StepPattern
    quality: ScaleQuality | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "pitches", tuple(self.pitches))

        expected = len(self.pattern) + 1
        if len(self.pitches) != expected:
            raise ValueError(
                ErrorMessages.ARITY_MISMATCH.format(
                    kind="Scale", expected=expected, actual=len(self.pitches)
                )
            )
        if self.pitches[0] != self.root:
            raise ValueError(
                ErrorMessages.ROOT_MISMATCH.format(
                    kind="Scale", root=self.root, first=self.pitches[0]
                )
            )
        steps = tuple(interval.semitones for interval in into_intervals(self.pitches))
        if steps != self.pattern.steps:
            raise ValueError(ErrorMessages.STEP_MISMATCH.format(pattern=self.pattern))
        if self.quality is not None and self.quality.pattern != self.pattern:
            raise ValueError(
                ErrorMessages.QUALITY_MISMATCH.format(
                    kind="Scale", quality=self.quality.value, rule="step pattern"
                )
            )

    @classmethod
    def build(cls, root: Pitch, quality: ScaleQuality | str) -> Scale:
        """
        Build the scale of a named quality on a root.

        Raises:
            RangeError: If the scale does not fit below MIDI 127
        """
        quality = ScaleQuality.parse(quality)
        return generate_scale(root, quality.pattern, quality)

    @property
    def last(self) -> Pitch:
        """The top pitch of the scale."""
        return self.pitches[-1]

    def degree(self, number: int) -> Pitch:
        """
        Get a scale degree, 1-based (1 = root).

        Args:
            number: Degree from 1 to len(scale)

        Returns:
            The pitch at that degree
        """
        if not 1 <= number <= len(self.pitches):
            raise ValueError(
                ErrorMessages.DEGREE_OUT_OF_RANGE.format(high=len(self.pitches), number=number)
            )
        return self.pitches[number - 1]

    def pitch_classes(self) -> list[PitchClass]:
        """Distinct pitch classes in scale order."""
        return list(dict.fromkeys(pitch.pitch_class for pitch in self.pitches))

    def steps(self) -> list[Interval]:
        """The intervals between consecutive pitches."""
        return into_intervals(self.pitches)

    def transpose(self, interval: Interval) -> Scale:
        """The same scale moved by an interval. Raises RangeError if it no longer fits."""
        return generate_scale(self.root.add_interval(interval), self.pattern, self.quality)

    def __len__(self) -> int:
        return len(self.pitches)

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self.pitches)

    def __getitem__(self, position: int) -> Pitch:
        return self.pitches[position]

    def __contains__(self, item: object) -> bool:
        """Membership by pitch class: E5 is in C4 major."""
        if isinstance(item, Pitch):
            item = item.pitch_class
        if not isinstance(item, PitchClass):
            return False
        return any(pitch.pitch_class == item for pitch in self.pitches)

    def __str__(self) -> str:
        label = self.quality.value.replace("_", " ") if self.quality else str(self.pattern)
        return f"{self.root.name()} {label}"


def generate_scale(
    root: Pitch,
    pattern: StepPattern | Sequence[int],
    quality: ScaleQuality | None = None,
) -> Scale:
    """
    Generate a scale by applying a step pattern cumulatively from a root.

    Args:
        root: The first pitch
        pattern: Steps applied in order, each from the previous pitch.
            A plain sequence of ints is validated as a StepPattern.
        quality: Optional quality tag (must match the pattern)

    Returns:
        Scale of len(pattern) + 1 strictly ascending pitches

    Raises:
        ValueError: If the steps are empty or not positive
        RangeError: If any pitch would exceed 127; no partial scale is returned
    """
    if not isinstance(pattern, StepPattern):
        pattern = StepPattern(tuple(pattern))
    pitches = [root]
    current = root
    for step in pattern:
        current = current.add_interval(Interval(step))
        pitches.append(current)
    return Scale(root, tuple(pitches), pattern, quality)
