"""MIDI Parser — load a MIDI file and turn its notes into beats.

Responsibilities:
    - Load a MIDI file via *pretty_midi*.
    - Extract every non-drum note, sorted by ``(start, pitch)``.
    - Group notes with (nearly) identical onsets into Playable beats and
      insert a Rest wherever the music falls silent for longer than
      ``rest_gap`` seconds.

No fingering logic lives here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pretty_midi

from .beats import Beat, Playable, Rest
from .pitch import Pitch

# Onsets closer than this belong to the same chord (MIDI quantisation slack).
CHORD_TOLERANCE: float = 0.03  # seconds
DEFAULT_REST_GAP: float = 0.25  # seconds


def load_midi(midi_path: str | Path) -> pretty_midi.PrettyMIDI:
    """Open *midi_path* with pretty_midi so its notes can be grouped into beats.

    Raises:
        FileNotFoundError: If *midi_path* does not exist.
        ValueError: If the file cannot be parsed as MIDI.
    """
    path = Path(midi_path)
    if not path.exists():
        raise FileNotFoundError(f"MIDI file not found: {path}")

    try:
        midi_data = pretty_midi.PrettyMIDI(str(path))
    except Exception as exc:
        raise ValueError(f"Failed to parse MIDI file '{path.name}': {exc}") from exc

    return midi_data


def extract_notes(midi_data: pretty_midi.PrettyMIDI) -> list[dict[str, Any]]:
    """Flatten the pitched tracks of *midi_data* into one onset-ordered list.

    Percussion tracks carry no pitch a guitar can fret and are skipped.
    Times are rounded to microseconds so chord grouping compares stable
    onsets.

    Returns:
        Dicts with ``pitch`` (MIDI number), ``start`` and ``end`` (seconds),
        sorted by ``(start, pitch)``.
    """
    notes: list[dict[str, Any]] = []

    for instrument in midi_data.instruments:
        if instrument.is_drum:
            continue
        for note in instrument.notes:
            notes.append(
                {
                    "pitch": note.pitch,
                    "start": round(note.start, 6),
                    "end": round(note.end, 6),
                }
            )

    notes.sort(key=lambda n: (n["start"], n["pitch"]))
    return notes


def notes_to_beats(
    notes: list[dict[str, Any]],
    rest_gap: float = DEFAULT_REST_GAP,
) -> list[Beat]:
    """Group sorted notes into beats.

    Args:
        notes: Output of :func:`extract_notes` (must be sorted).
        rest_gap: Silence, in seconds, that produces a Rest beat.

    Returns:
        Playable and Rest beats in time order.

    Raises:
        ValueError: If a MIDI number falls outside the pitch range.
    """
    beats: list[Beat] = []
    group: list[dict[str, Any]] = []
    previous_end: float | None = None

    def flush() -> None:
        nonlocal previous_end
        if not group:
            return
        onset = group[0]["start"]
        if previous_end is not None and onset - previous_end > rest_gap:
            beats.append(Rest())
        beats.append(Playable(Pitch.from_midi(n["pitch"]) for n in group))
        previous_end = max(n["end"] for n in group)
        group.clear()

    for note in notes:
        if group and note["start"] - group[0]["start"] > CHORD_TOLERANCE:
            flush()
        group.append(note)
    flush()

    return beats


def parse_midi(midi_path: str | Path, rest_gap: float = DEFAULT_REST_GAP) -> list[Beat]:
    """Convenience wrapper: load MIDI → extract notes → beats."""
    midi_data = load_midi(midi_path)
    return notes_to_beats(extract_notes(midi_data), rest_gap=rest_gap)
