"""Beats — the closed set of time-slice variants.

A beat is one of:
    Rest          – silence; costs nothing to play.
    MeasureBreak  – a bar line; purely positional, removed before the search
                    and reinserted afterwards.
    Playable      – a set of simultaneous notes.  On the input side the notes
                    are :class:`~guitar_arranger.pitch.Pitch` values; in a
                    finished arrangement they are
                    :class:`~guitar_arranger.fretboard.Fingering` values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar, Union

from .fretboard import Fingering
from .pitch import Pitch

T = TypeVar("T")


@dataclass(frozen=True)
class Rest:
    pass


@dataclass(frozen=True)
class MeasureBreak:
    pass


@dataclass(frozen=True, init=False)
class Playable(Generic[T]):
    """Simultaneous notes, kept in first-seen order with duplicates removed."""

    notes: tuple[T, ...]

    def __init__(self, notes: Iterable[T]) -> None:
        unique = tuple(dict.fromkeys(notes))
        if not unique:
            raise ValueError("A playable beat needs at least one note.")
        object.__setattr__(self, "notes", unique)

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self):
        return iter(self.notes)


Beat = Union[Rest, MeasureBreak, Playable[Pitch]]
ArrangedBeat = Union[Rest, MeasureBreak, Playable[Fingering]]


def is_sonorous(beat: object) -> bool:
    """True for beats that occupy a time slot (everything but a measure break)."""
    return not isinstance(beat, MeasureBreak)


def has_playable(beats: Iterable[object]) -> bool:
    return any(isinstance(beat, Playable) for beat in beats)
