"""
Tests for pitch primitives.

Tests cover:
- PitchClass (transposition, parsing, spelling)
- Pitch construction and range validation
- Octave shifts and interval application
- Naming and parsing
"""

import copy
import pickle

import pytest

from mozzart import Interval, Pitch, PitchClass, RangeError


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.D == 2
        assert PitchClass.E == 4
        assert PitchClass.F == 5
        assert PitchClass.G == 7
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B
        assert PitchClass.G.transpose(7) == PitchClass.D

    def test_interval_to(self) -> None:
        """Interval between pitch classes is ascending within an octave."""
        assert PitchClass.C.interval_to(PitchClass.G) == Interval(7)
        assert PitchClass.G.interval_to(PitchClass.C) == Interval(5)

    def test_in_octave(self) -> None:
        """Place a pitch class in an octave."""
        assert PitchClass.C.in_octave(4) == Pitch(60)
        assert PitchClass.A.in_octave(4) == Pitch(69)
        assert PitchClass.C.in_octave(-1) == Pitch(0)
        assert PitchClass.G.in_octave(9) == Pitch(127)

    def test_in_octave_out_of_range(self) -> None:
        """G#9 does not exist in MIDI."""
        with pytest.raises(RangeError):
            PitchClass.Gs.in_octave(9)

    def test_parse(self) -> None:
        """Parse pitch class from string."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("C#") == PitchClass.Cs
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse("fs") == PitchClass.Fs

    def test_parse_unknown(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError):
            PitchClass.parse("H")

    def test_spell(self) -> None:
        """Spell pitch class as string."""
        assert PitchClass.Cs.spell() == "C#"
        assert PitchClass.Cs.spell(prefer_flats=True) == "Db"


class TestPitchConstruction:
    """Tests for creating pitches."""

    def test_bounds(self) -> None:
        """0 and 127 are valid pitches."""
        assert Pitch(0).midi == 0
        assert Pitch(127).midi == 127

    @pytest.mark.parametrize("value", [-1, 128, 200, -60])
    def test_out_of_range(self, value: int) -> None:
        """Values outside 0-127 raise RangeError."""
        with pytest.raises(RangeError) as exc_info:
            Pitch(value)
        assert exc_info.value.value == value

    def test_range_error_is_value_error(self) -> None:
        """RangeError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Pitch(128)

    def test_rejects_float(self) -> None:
        """Pitches are whole MIDI numbers."""
        with pytest.raises(TypeError):
            Pitch(60.5)  # type: ignore[arg-type]

    def test_immutable(self, c4: Pitch) -> None:
        """Pitches cannot be modified."""
        with pytest.raises(AttributeError):
            c4._midi = 61  # type: ignore[misc]

    def test_copy_and_pickle(self, c4: Pitch) -> None:
        """Pitches survive copying and pickling."""
        assert copy.deepcopy(c4) == c4
        assert pickle.loads(pickle.dumps(c4)) == c4


class TestPitchAttributes:
    """Tests for derived attributes and ordering."""

    def test_pitch_class(self) -> None:
        """Pitch class is the MIDI number modulo 12."""
        assert Pitch(60).pitch_class == PitchClass.C
        assert Pitch(61).pitch_class == PitchClass.Cs
        assert Pitch(71).pitch_class == PitchClass.B
        for value in range(128):
            assert 0 <= Pitch(value).pitch_class <= 11

    def test_octave(self) -> None:
        """Conventional MIDI octave numbering."""
        assert Pitch(60).octave == 4
        assert Pitch(59).octave == 3
        assert Pitch(0).octave == -1
        assert Pitch(12).octave == 0
        assert Pitch(127).octave == 9

    def test_ordering(self, c4: Pitch, e4: Pitch, g4: Pitch) -> None:
        """Pitches are ordered numerically."""
        assert c4 < e4 < g4
        assert g4 > c4
        assert sorted([g4, c4, e4]) == [c4, e4, g4]
        assert max(c4, g4) == g4

    def test_equality_and_hash(self) -> None:
        """Equal pitches hash equally."""
        assert Pitch(60) == Pitch(60)
        assert Pitch(60) != Pitch(61)
        assert len({Pitch(60), Pitch(60), Pitch(64)}) == 2

    def test_int_conversion(self, c4: Pitch) -> None:
        """Pitches convert to their MIDI number."""
        assert int(c4) == 60
        assert [0, 1, 2][Pitch(2)] == 2


class TestOctaveShift:
    """Tests for transpose_up / transpose_down."""

    def test_transpose_up(self, c4: Pitch) -> None:
        """Shifting up adds 12 semitones per octave."""
        assert c4.transpose_up() == Pitch(72)
        assert c4.transpose_up(2) == Pitch(84)

    def test_transpose_down(self, c4: Pitch) -> None:
        """Shifting down removes 12 semitones per octave."""
        assert c4.transpose_down() == Pitch(48)
        assert c4.transpose_down(5) == Pitch(0)

    def test_zero_octaves(self, c4: Pitch) -> None:
        """A zero shift is the identity."""
        assert c4.transpose_up(0) == c4

    def test_up_out_of_range(self) -> None:
        """Shifting past 127 fails instead of wrapping."""
        with pytest.raises(RangeError):
            Pitch(116).transpose_up()
        with pytest.raises(RangeError):
            Pitch(60).transpose_up(6)

    def test_down_out_of_range(self) -> None:
        """Shifting below 0 fails instead of clamping."""
        with pytest.raises(RangeError):
            Pitch(11).transpose_down()

    def test_round_trip(self) -> None:
        """transpose_down undoes transpose_up for every valid shift."""
        for value in range(128):
            pitch = Pitch(value)
            for octaves in range(0, 11):
                if value + 12 * octaves > 127:
                    break
                assert pitch.transpose_up(octaves).transpose_down(octaves) == pitch


class TestIntervalApplication:
    """Tests for add_interval / subtract_interval and operators."""

    def test_add_interval(self, c4: Pitch) -> None:
        """Adding a major third to C4 gives E4."""
        assert c4.add_interval(Interval.MAJOR_THIRD) == Pitch(64)

    def test_add_negative_interval(self, c4: Pitch) -> None:
        """Negative intervals move down."""
        assert c4.add_interval(Interval(-7)) == Pitch(53)

    def test_add_interval_upper_bound(self) -> None:
        """127 + 1 is out of range."""
        with pytest.raises(RangeError):
            Pitch(127).add_interval(Interval(1))

    def test_add_interval_lower_bound(self) -> None:
        """0 - 1 is out of range."""
        with pytest.raises(RangeError):
            Pitch(0).add_interval(Interval(-1))

    def test_subtract_interval(self, g4: Pitch) -> None:
        """Subtracting a fifth from G4 gives C4."""
        assert g4.subtract_interval(Interval.PERFECT_FIFTH) == Pitch(60)

    def test_operators(self, c4: Pitch, g4: Pitch) -> None:
        """Operators delegate to the named methods."""
        assert c4 + Interval.PERFECT_FIFTH == g4
        assert g4 - Interval.PERFECT_FIFTH == c4
        assert g4 - c4 == Interval.PERFECT_FIFTH
        assert c4 - g4 == Interval(-7)

    def test_operator_range_error(self) -> None:
        """Operators keep the failure contract."""
        with pytest.raises(RangeError):
            Pitch(120) + Interval.OCTAVE

    def test_operator_type_error(self, c4: Pitch) -> None:
        """Adding a plain integer is not supported."""
        with pytest.raises(TypeError):
            c4 + 4  # type: ignore[operator]

    def test_interval_to(self, c4: Pitch, e4: Pitch) -> None:
        """interval_to measures from self to other."""
        assert c4.interval_to(e4) == Interval(4)
        assert e4.interval_to(c4) == Interval(-4)


class TestPitchNames:
    """Tests for naming and parsing pitches."""

    def test_name(self) -> None:
        """Names include the octave."""
        assert Pitch(60).name() == "C4"
        assert Pitch(61).name() == "C#4"
        assert Pitch(61).name(prefer_flats=True) == "Db4"
        assert Pitch(0).name() == "C-1"
        assert str(Pitch(69)) == "A4"
        assert repr(Pitch(69)) == "Pitch(69)"

    def test_parse(self) -> None:
        """Parse names with sharps, flats and negative octaves."""
        assert Pitch.parse("C4") == Pitch(60)
        assert Pitch.parse("C#4") == Pitch(61)
        assert Pitch.parse("Db4") == Pitch(61)
        assert Pitch.parse("Cs4") == Pitch(61)
        assert Pitch.parse("b3") == Pitch(59)
        assert Pitch.parse("Bb-1") == Pitch(10)
        assert Pitch.parse("G9") == Pitch(127)

    def test_parse_round_trip(self) -> None:
        """Every pitch parses back from its own name."""
        for value in range(128):
            pitch = Pitch(value)
            assert Pitch.parse(pitch.name()) == pitch
            assert Pitch.parse(pitch.name(prefer_flats=True)) == pitch

    @pytest.mark.parametrize("name", ["", "H4", "C", "C#", "4C", "C##4"])
    def test_parse_invalid(self, name: str) -> None:
        """Malformed names raise ValueError."""
        with pytest.raises(ValueError):
            Pitch.parse(name)

    def test_parse_out_of_range(self) -> None:
        """Well-formed names above G9 raise RangeError."""
        with pytest.raises(RangeError):
            Pitch.parse("A9")

    def test_from_name(self) -> None:
        """Build from pitch class and octave."""
        assert Pitch.from_name(PitchClass.E, 4) == Pitch(64)
        assert Pitch.from_name("F#", 2) == Pitch(42)
