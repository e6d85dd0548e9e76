"""Unit tests for MIDI note extraction and beat grouping."""

from pathlib import Path

import pretty_midi
import pytest

from guitar_arranger.beats import Playable, Rest
from guitar_arranger.midi_parser import extract_notes, load_midi, notes_to_beats, parse_midi
from guitar_arranger.pitch import Pitch


def _beat(*names: str) -> Playable:
    return Playable(Pitch.from_name(name) for name in names)


def _note(pitch: int, start: float, end: float) -> dict:
    return {"pitch": pitch, "start": start, "end": end}


def test_notes_to_beats_groups_chords_and_inserts_rests() -> None:
    notes = [
        _note(45, 0.0, 0.5),
        _note(57, 0.01, 0.5),
        _note(64, 0.5, 1.0),
        _note(64, 2.0, 2.5),
    ]
    assert notes_to_beats(notes) == [
        _beat("A2", "A3"),
        _beat("E4"),
        Rest(),
        _beat("E4"),
    ]


def test_notes_to_beats_respects_rest_gap() -> None:
    notes = [_note(64, 0.0, 0.5), _note(64, 2.0, 2.5)]
    assert notes_to_beats(notes, rest_gap=5.0) == [_beat("E4"), _beat("E4")]


def test_notes_to_beats_empty() -> None:
    assert notes_to_beats([]) == []


def test_notes_to_beats_out_of_range_pitch() -> None:
    with pytest.raises(ValueError):
        notes_to_beats([_note(5, 0.0, 0.5)])


def _write_midi(path: Path) -> None:
    midi = pretty_midi.PrettyMIDI()
    guitar = pretty_midi.Instrument(program=24)
    guitar.notes.append(pretty_midi.Note(velocity=100, pitch=52, start=0.0, end=0.5))
    guitar.notes.append(pretty_midi.Note(velocity=100, pitch=64, start=0.0, end=0.5))
    guitar.notes.append(pretty_midi.Note(velocity=100, pitch=59, start=0.5, end=1.0))
    drums = pretty_midi.Instrument(program=0, is_drum=True)
    drums.notes.append(pretty_midi.Note(velocity=100, pitch=36, start=0.0, end=0.25))
    midi.instruments.extend([guitar, drums])
    midi.write(str(path))


def test_parse_midi_file(tmp_path: Path) -> None:
    path = tmp_path / "riff.mid"
    _write_midi(path)
    notes = extract_notes(load_midi(path))
    assert [n["pitch"] for n in notes] == [52, 64, 59]
    assert parse_midi(path) == [_beat("E3", "E4"), _beat("B3")]


def test_load_midi_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_midi(tmp_path / "missing.mid")


def test_load_midi_invalid_file(tmp_path: Path) -> None:
    path = tmp_path / "broken.mid"
    path.write_bytes(b"not a midi file")
    with pytest.raises(ValueError):
        load_midi(path)
