"""Pitch — the discrete, totally ordered tone enumeration.

Pitches run from ``C0`` (index 0) to ``B9`` (index 119) in semitone steps.
Names use sharps for display; flats are accepted when parsing and map to
their enharmonic sharp (``Eb4`` → ``D#4``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache


NOTE_NAMES: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)
_LETTER_SEMITONES: dict[str, int] = {
    "C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11,
}
_ACCIDENTAL_OFFSETS: dict[str, int] = {"": 0, "#": 1, "b": -1}
SEMITONES_PER_OCTAVE: int = 12
NUM_OCTAVES: int = 10
NUM_PITCHES: int = SEMITONES_PER_OCTAVE * NUM_OCTAVES
MIDI_C0: int = 12  # MIDI note number of C0

PITCH_PATTERN: str = r"[A-Ga-g][#b]?[0-9]"
_PITCH_RE = re.compile(rf"({PITCH_PATTERN})")


@dataclass(frozen=True, order=True)
class Pitch:
    """A single tone identified by its semitone index above ``C0``."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < NUM_PITCHES:
            raise ValueError(
                f"Pitch index {self.index} is out of range (0-{NUM_PITCHES - 1})."
            )

    @classmethod
    def from_name(cls, name: str) -> "Pitch":
        """Parse a pitch name such as ``E4``, ``C#3`` or ``Bb2``.

        Raises:
            ValueError: If *name* is not a valid pitch name.
        """
        return _pitch_from_name(name)

    @classmethod
    def from_midi(cls, midi_number: int) -> "Pitch":
        """Convert a MIDI note number (``C0`` == 12) into a pitch."""
        index = midi_number - MIDI_C0
        if not 0 <= index < NUM_PITCHES:
            raise ValueError(
                f"MIDI note {midi_number} is outside the supported pitch range "
                f"({MIDI_C0}-{MIDI_C0 + NUM_PITCHES - 1})."
            )
        return cls(index)

    @classmethod
    def all(cls) -> list["Pitch"]:
        """All pitches in ascending order."""
        return [cls(i) for i in range(NUM_PITCHES)]

    @property
    def name(self) -> str:
        octave, semitone = divmod(self.index, SEMITONES_PER_OCTAVE)
        return f"{NOTE_NAMES[semitone]}{octave}"

    @property
    def midi(self) -> int:
        return self.index + MIDI_C0

    def transpose(self, semitones: int) -> "Pitch":
        """Return the pitch *semitones* away (raises ``ValueError`` past the range)."""
        return Pitch(self.index + semitones)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Pitch('{self.name}')"


@lru_cache(maxsize=None)
def _pitch_from_name(name: str) -> Pitch:
    match = re.fullmatch(r"([A-Ga-g])([#b]?)([0-9])", name.strip())
    if not match:
        raise ValueError(f"Invalid pitch name: '{name}'")

    letter, accidental, octave = match.groups()
    index = (
        int(octave) * SEMITONES_PER_OCTAVE
        + _LETTER_SEMITONES[letter.upper()]
        + _ACCIDENTAL_OFFSETS[accidental]
    )
    return Pitch(index)


def split_pitch_names(text: str) -> list[str]:
    """Split a run of concatenated pitch names (``"A2A3"``) into names."""
    return _PITCH_RE.findall(text)
