"""
Constants catalog - named pitches, intervals, scales and chord shapes.

The catalog is derived entirely from the core generators. It is built once,
exposed through read-only mappings, and never mutated afterwards, so it can
be shared between threads without locking.

The process-wide default catalog is built when this module is first
imported; get_catalog() returns it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from mozzart.core.chord import ChordQuality, IntervalSet
from mozzart.core.interval import NAMED_INTERVALS, SHORT_INTERVALS, Interval
from mozzart.core.pitch import Pitch, PitchClass, RangeError, split_pitch_name
from mozzart.core.scale import Scale, ScaleQuality
from mozzart.settings import CatalogSettings

logger = logging.getLogger(__name__)

# (key, quality, octave of the root)
ScaleKey = tuple[PitchClass, ScaleQuality, int]


class ConstantsCatalog:
    """
    Read-only lookup tables of named musical constants.

    Pitches are named like 'C4', 'C#4' (and 'Db4', 'Cs4' when enharmonic
    aliases are enabled). Intervals are named like 'major_third' or 'M3'.
    Scales are keyed by (pitch class, quality, octave).
    """

    def __init__(
        self,
        pitches: Mapping[str, Pitch],
        intervals: Mapping[str, Interval],
        scales: Mapping[ScaleKey, Scale],
        chords: Mapping[ChordQuality, IntervalSet],
        settings: CatalogSettings,
    ) -> None:
        """
        Initialize the catalog from pre-built tables.

        Use ConstantsCatalog.build() rather than calling this directly.
        """
        self._pitches = MappingProxyType(dict(pitches))
        self._intervals = MappingProxyType(dict(intervals))
        self._scales = MappingProxyType(dict(scales))
        self._chords = MappingProxyType(dict(chords))
        self._settings = settings

    @classmethod
    def build(cls, settings: CatalogSettings | None = None) -> ConstantsCatalog:
        """
        Build a catalog by running the generators.

        Args:
            settings: Octave range, scale qualities and naming options

        Returns:
            A fully populated, read-only catalog
        """
        settings = settings or CatalogSettings()

        pitches = _build_pitches(settings)
        intervals = _build_intervals()
        scales = _build_scales(settings)
        chords = {quality: quality.intervals for quality in ChordQuality}

        logger.debug(
            f"Built constants catalog: {len(pitches)} pitch names, "
            f"{len(intervals)} interval names, {len(scales)} scales, "
            f"{len(chords)} chord qualities (octaves {settings.min_octave}..{settings.max_octave})"
        )
        return cls(pitches, intervals, scales, chords, settings)

    @property
    def settings(self) -> CatalogSettings:
        """Settings the catalog was built with."""
        return self._settings

    @property
    def pitches(self) -> Mapping[str, Pitch]:
        return self._pitches

    @property
    def intervals(self) -> Mapping[str, Interval]:
        return self._intervals

    @property
    def scales(self) -> Mapping[ScaleKey, Scale]:
        return self._scales

    @property
    def chords(self) -> Mapping[ChordQuality, IntervalSet]:
        return self._chords

    def get_pitch(self, name: str, octave: int | None = None) -> Pitch | None:
        """
        Get a named pitch.

        Args:
            name: Full name ('C4', 'F#3') or, with octave, a pitch class ('C#')
            octave: Optional octave number appended to name

        Returns:
            The pitch, or None if the name is well formed but not in the catalog

        Raises:
            ValueError: If the name cannot be parsed as a pitch name
        """
        key = name.strip() if octave is None else f"{name.strip()}{octave}"
        key = key[:1].upper() + key[1:]
        pitch = self._pitches.get(key)
        if pitch is None:
            split_pitch_name(key)
        return pitch

    def get_interval(self, name: str) -> Interval | None:
        """
        Get a named interval.

        Short names are case-sensitive ('m3' is a minor third, 'M3' a major
        third); long names are not ('Major_Third', 'major third').
        """
        name = name.strip()
        if name in self._intervals:
            return self._intervals[name]
        return self._intervals.get(name.lower().replace(" ", "_").replace("-", "_"))

    def get_scale(
        self,
        key: PitchClass | str,
        quality: ScaleQuality | str,
        octave: int,
    ) -> Scale | None:
        """
        Get a pre-built scale.

        Args:
            key: Pitch class of the root ('C', 'F#', PitchClass.D)
            quality: Scale quality ('major', ScaleQuality.HARMONIC_MINOR)
            octave: Octave of the root

        Returns:
            The scale, or None if it was not built (out of range or not configured)

        Raises:
            ValueError: If the key or quality name is unknown
        """
        if isinstance(key, str):
            key = PitchClass.parse(key)
        return self._scales.get((key, ScaleQuality.parse(quality), octave))

    def get_chord_intervals(self, quality: ChordQuality | str) -> IntervalSet:
        """Interval set of a chord quality. Raises ValueError for unknown names."""
        return self._chords[ChordQuality.parse(quality)]

    def __repr__(self) -> str:
        return (
            f"ConstantsCatalog(pitches={len(self._pitches)}, "
            f"intervals={len(self._intervals)}, scales={len(self._scales)})"
        )


def _build_pitches(settings: CatalogSettings) -> dict[str, Pitch]:
    """Name every pitch in the configured octaves that fits in 0-127."""
    pitches: dict[str, Pitch] = {}
    for octave in settings.octaves:
        for pitch_class in PitchClass:
            try:
                pitch = pitch_class.in_octave(octave)
            except RangeError:
                # Octave 9 stops at G9 (127)
                continue
            pitches[f"{pitch_class.spell()}{octave}"] = pitch
            if settings.include_enharmonic_aliases:
                pitches.setdefault(f"{pitch_class.spell(prefer_flats=True)}{octave}", pitch)
                pitches.setdefault(f"{pitch_class.name}{octave}", pitch)
    return pitches


def _build_intervals() -> dict[str, Interval]:
    """Name the standard intervals by long and short name."""
    intervals: dict[str, Interval] = {}
    for name in NAMED_INTERVALS:
        intervals[name.lower()] = getattr(Interval, name)
    for name in SHORT_INTERVALS:
        intervals[name] = getattr(Interval, name)
    return intervals


def _build_scales(settings: CatalogSettings) -> dict[ScaleKey, Scale]:
    """Build every (key, quality, octave) scale that fits in the MIDI range."""
    scales: dict[ScaleKey, Scale] = {}
    for quality in settings.scale_qualities:
        for octave in settings.octaves:
            for pitch_class in PitchClass:
                try:
                    root = pitch_class.in_octave(octave)
                    scales[(pitch_class, quality, octave)] = Scale.build(root, quality)
                except RangeError:
                    logger.debug(
                        f"Skipping {pitch_class.spell()}{octave} {quality.value}: "
                        "scale leaves the MIDI range"
                    )
    return scales


# Built once, at import time, before any caller can share it
_DEFAULT_CATALOG = ConstantsCatalog.build()


def get_catalog() -> ConstantsCatalog:
    """Get the process-wide default catalog."""
    return _DEFAULT_CATALOG
