"""Unit tests for the text-notation parser."""

import pytest

from guitar_arranger.beats import MeasureBreak, Playable, Rest
from guitar_arranger.errors import InvalidInput, ParseError
from guitar_arranger.parser import beats_to_text, parse_line, parse_lines
from guitar_arranger.pitch import Pitch


def _beat(*names: str) -> Playable:
    return Playable(Pitch.from_name(name) for name in names)


def test_parse_lines_all_variants() -> None:
    beats = parse_lines("E4\n\n---\nA2A3\n  E3 B3  \n-")
    assert beats == [
        _beat("E4"),
        Rest(),
        MeasureBreak(),
        _beat("A2", "A3"),
        _beat("E3", "B3"),
        MeasureBreak(),
    ]


def test_parse_line_flats() -> None:
    assert parse_line("Eb4") == _beat("D#4")


def test_parse_line_duplicates_collapse() -> None:
    assert parse_line("E3E3E3") == _beat("E3")


def test_parse_line_invalid() -> None:
    with pytest.raises(ValueError):
        parse_line("E4?")


def test_parse_errors_are_aggregated() -> None:
    with pytest.raises(ParseError) as exc:
        parse_lines("E4\n???\nH2\nA2")
    assert exc.value.invalid_lines == [
        InvalidInput(value="???", line_number=2),
        InvalidInput(value="H2", line_number=3),
    ]
    assert str(exc.value).splitlines() == [
        "Line 2: '???' is not a valid beat.",
        "Line 3: 'H2' is not a valid beat.",
    ]


def test_beats_to_text() -> None:
    beats = [_beat("A2", "A3"), Rest(), MeasureBreak()]
    assert beats_to_text(beats) == [["A2", "A3"], ["REST"], ["MEASURE_BREAK"]]
