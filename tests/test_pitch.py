"""Unit tests for pitch parsing, ordering and string numbers."""

import pytest

from guitar_arranger.errors import FretboardConfigError
from guitar_arranger.pitch import NUM_PITCHES, Pitch, split_pitch_names
from guitar_arranger.string_number import StringNumber


def test_from_name_natural() -> None:
    assert Pitch.from_name("E4").index == 52
    assert str(Pitch.from_name("E4")) == "E4"


def test_from_name_flat_maps_to_sharp() -> None:
    assert Pitch.from_name("Eb4") == Pitch.from_name("D#4")
    assert str(Pitch.from_name("Eb4")) == "D#4"


def test_from_name_is_case_insensitive_on_letter() -> None:
    assert Pitch.from_name("bb2") == Pitch.from_name("A#2")


def test_from_name_crosses_octave_boundary() -> None:
    assert Pitch.from_name("Cb1") == Pitch.from_name("B0")
    assert Pitch.from_name("B#3") == Pitch.from_name("C4")


@pytest.mark.parametrize("name", ["H4", "E", "E10", "Cb0", "???", ""])
def test_from_name_invalid(name: str) -> None:
    with pytest.raises(ValueError):
        Pitch.from_name(name)


def test_midi_conversion() -> None:
    assert Pitch.from_midi(64) == Pitch.from_name("E4")
    assert Pitch.from_name("C0").midi == 12
    with pytest.raises(ValueError):
        Pitch.from_midi(11)


def test_all_pitches_are_ordered() -> None:
    pitches = Pitch.all()
    assert len(pitches) == NUM_PITCHES
    assert str(pitches[0]) == "C0"
    assert str(pitches[-1]) == "B9"
    assert pitches == sorted(pitches)
    assert Pitch.from_name("E2") < Pitch.from_name("E4")


def test_transpose_out_of_range() -> None:
    with pytest.raises(ValueError):
        Pitch.from_name("B9").transpose(1)


def test_split_pitch_names() -> None:
    assert split_pitch_names("A2A3") == ["A2", "A3"]
    assert split_pitch_names("E3 Bb3") == ["E3", "Bb3"]


def test_string_number_valid() -> None:
    assert int(StringNumber(1)) == 1
    assert int(StringNumber(12)) == 12


def test_string_number_zero() -> None:
    with pytest.raises(FretboardConfigError) as exc:
        StringNumber(0)
    assert str(exc.value) == (
        "A guitar cannot have a string number of zero (0). "
        "Guitar string numbering commences at one (1)."
    )


def test_string_number_too_high() -> None:
    with pytest.raises(FretboardConfigError) as exc:
        StringNumber(15)
    assert str(exc.value) == "The string number (15) is too high. The maximum is 12."


def test_string_number_negative() -> None:
    with pytest.raises(FretboardConfigError) as exc:
        StringNumber(-1)
    assert str(exc.value) == (
        "The string number (-1) cannot be negative. "
        "Guitar string numbering commences at one (1)."
    )
