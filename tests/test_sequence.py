"""
Tests for converting between pitch and interval sequences.
"""

import pytest

from mozzart import (
    Interval,
    Pitch,
    RangeError,
    into_intervals,
    into_pitches,
    relocate,
    transpose_sequence,
)


class TestIntoIntervals:
    """Tests for into_intervals."""

    def test_triad(self, c_major_triad: list[Pitch]) -> None:
        """C4-E4-G4 is a major third then a minor third."""
        assert into_intervals(c_major_triad) == [Interval(4), Interval(3)]

    def test_descending(self) -> None:
        """Falling lines give negative intervals."""
        assert into_intervals([Pitch(67), Pitch(64), Pitch(60)]) == [Interval(-3), Interval(-4)]

    def test_repeated_pitch(self) -> None:
        assert into_intervals([Pitch(60), Pitch(60)]) == [Interval.UNISON]

    def test_empty_and_single(self) -> None:
        """Empty or single-pitch input gives no intervals."""
        assert into_intervals([]) == []
        assert into_intervals([Pitch(60)]) == []

    def test_accepts_iterators(self, c_major_triad: list[Pitch]) -> None:
        """Any iterable of pitches is accepted."""
        assert into_intervals(iter(c_major_triad)) == [Interval(4), Interval(3)]


class TestIntoPitches:
    """Tests for into_pitches."""

    def test_cumulative(self) -> None:
        """Intervals are applied to the previous pitch, not the root."""
        result = into_pitches(Pitch(64), [Interval.MAJOR_THIRD, Interval.MINOR_THIRD])
        assert result == [Pitch(64), Pitch(68), Pitch(71)]

    def test_no_intervals(self) -> None:
        """Root alone when there are no intervals."""
        assert into_pitches(Pitch(60), []) == [Pitch(60)]

    def test_out_of_range(self) -> None:
        """Leaving 0-127 at any point raises."""
        with pytest.raises(RangeError):
            into_pitches(Pitch(120), [Interval(5), Interval(5)])
        with pytest.raises(RangeError):
            into_pitches(Pitch(5), [Interval(-3), Interval(-3)])

    def test_round_trip(self) -> None:
        """into_pitches undoes into_intervals."""
        melodies = [
            [Pitch(60)],
            [Pitch(60), Pitch(62), Pitch(64), Pitch(60)],
            [Pitch(0), Pitch(127), Pitch(0)],
            [Pitch(72), Pitch(71), Pitch(71), Pitch(55), Pitch(79)],
        ]
        for melody in melodies:
            assert into_pitches(melody[0], into_intervals(melody)) == melody


class TestTransposeSequence:
    """Tests for transpose_sequence and relocate."""

    def test_transpose(self, c_major_triad: list[Pitch]) -> None:
        """Every pitch moves by the same interval."""
        assert transpose_sequence(c_major_triad, Interval.PERFECT_FOURTH) == [
            Pitch(65),
            Pitch(69),
            Pitch(72),
        ]

    def test_transpose_all_or_nothing(self) -> None:
        """One pitch out of range fails the whole sequence."""
        with pytest.raises(RangeError):
            transpose_sequence([Pitch(60), Pitch(120)], Interval.OCTAVE)

    def test_relocate(self, c_major_triad: list[Pitch], e4: Pitch) -> None:
        """Same shape on a new root."""
        assert relocate(c_major_triad, e4) == [Pitch(64), Pitch(68), Pitch(71)]

    def test_relocate_empty(self, c4: Pitch) -> None:
        assert relocate([], c4) == []
