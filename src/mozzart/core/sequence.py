"""
Sequence analysis - converting between pitch sequences and interval sequences.

into_intervals and into_pitches are exact inverses:

    into_pitches(S[0], into_intervals(S)) == S

for every non-empty sequence S of valid pitches. Reconstruction is
cumulative (each interval is applied to the previous pitch), matching how
scales are generated and unlike chords, which are measured from the root.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

from mozzart.core.interval import Interval
from mozzart.core.pitch import Pitch


def into_intervals(pitches: Iterable[Pitch]) -> list[Interval]:
    """
    Get the intervals between consecutive pitches.

    Args:
        pitches: Pitch sequence of length n

    Returns:
        n-1 intervals; empty for an empty or single-pitch input
    """
    return [Interval.between(a, b) for a, b in pairwise(pitches)]


def into_pitches(root: Pitch, intervals: Iterable[Interval]) -> list[Pitch]:
    """
    Rebuild a pitch sequence from a root and consecutive intervals.

    Args:
        root: First pitch of the result
        intervals: Intervals applied cumulatively, each from the previous pitch

    Returns:
        len(intervals) + 1 pitches starting with root

    Raises:
        RangeError: If any pitch would fall outside 0-127
    """
    pitches = [root]
    for interval in intervals:
        pitches.append(pitches[-1].add_interval(interval))
    return pitches


def transpose_sequence(pitches: Iterable[Pitch], interval: Interval) -> list[Pitch]:
    """
    Shift every pitch by the same interval.

    All or nothing: if any pitch would leave the MIDI range, RangeError is
    raised and no pitches are returned.
    """
    return [pitch.add_interval(interval) for pitch in pitches]


def relocate(pitches: Sequence[Pitch], root: Pitch) -> list[Pitch]:
    """
    Rebuild the same melodic shape starting from a new root.

    relocate([C4, E4, G4], E4) -> [E4, G#4, B4]
    """
    if not pitches:
        return []
    return into_pitches(root, into_intervals(pitches))
