"""Fretboard — pitch reachability for a tuning / fret count / capo.

Responsibilities:
    - Validate the instrument configuration (frets, capo, string ranges).
    - Derive, per string, the ordered pitches reachable from the capo
      upward (list position == fret number).
    - Answer ``lookup(pitch)`` with every :class:`Fingering` for a pitch.

A :class:`Fretboard` is immutable once built and is shared read-only by
every candidate-generation step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from .constants import MAX_CAPO, MAX_NUM_FRETS
from .errors import FretboardConfigError
from .pitch import NUM_PITCHES, Pitch
from .string_number import StringNumber

logger = logging.getLogger(__name__)

STANDARD_TUNING_NAMES: tuple[str, ...] = ("E4", "B3", "G3", "D3", "A2", "E2")


@dataclass(frozen=True, order=True)
class Fingering:
    """One playable position for a pitch."""

    pitch: Pitch
    string: StringNumber
    fret: int

    def __str__(self) -> str:
        return f"{self.pitch} | {self.string} ⇒ {self.fret}"


Tuning = Mapping[StringNumber, Pitch]


def tuning_from_pitches(open_pitches: Iterable[Pitch | str]) -> dict[StringNumber, Pitch]:
    """Build a tuning map; the first pitch is string 1.

    Args:
        open_pitches: Open-string pitches (or pitch names), highest string first.

    Returns:
        Ordered ``StringNumber → Pitch`` mapping.
    """
    tuning: dict[StringNumber, Pitch] = {}
    for number, pitch in enumerate(open_pitches, start=1):
        if isinstance(pitch, str):
            pitch = Pitch.from_name(pitch)
        tuning[StringNumber(number)] = pitch
    return tuning


def standard_tuning() -> dict[StringNumber, Pitch]:
    """Standard six-string tuning E4 B3 G3 D3 A2 E2."""
    return tuning_from_pitches(STANDARD_TUNING_NAMES)


def check_fret_count(fret_count: int) -> None:
    if fret_count < 0:
        raise FretboardConfigError(f"The number of frets ({fret_count}) cannot be negative.")
    if fret_count > MAX_NUM_FRETS:
        raise FretboardConfigError(
            f"Too many frets ({fret_count}). The maximum is {MAX_NUM_FRETS}."
        )


def check_capo(capo: int, fret_count: int) -> None:
    if capo < 0:
        raise FretboardConfigError(f"The capo position ({capo}) cannot be negative.")
    if capo > MAX_CAPO:
        raise FretboardConfigError(
            f"Too large capo number ({capo}). The maximum is {MAX_CAPO}."
        )
    if capo > fret_count:
        raise FretboardConfigError(
            f"The capo ({capo}) cannot be placed above the last fret ({fret_count})."
        )


def create_string_range(open_pitch: Pitch, fret_count: int, capo: int = 0) -> tuple[Pitch, ...]:
    """Pitches reachable on one string, indexed by fret number above the capo.

    Args:
        open_pitch: Pitch of the string without a capo.
        fret_count: Number of frets on the neck.
        capo: Capo position; the capo fret becomes fret 0.

    Returns:
        ``fret_count - capo + 1`` ascending pitches.

    Raises:
        FretboardConfigError: If the range runs past the highest pitch.
    """
    lowest = open_pitch.index + capo
    highest = lowest + fret_count - capo
    if highest >= NUM_PITCHES:
        highest_pitch = Pitch(NUM_PITCHES - 1)
        highest_fret = highest_pitch.index - open_pitch.index
        raise FretboardConfigError(
            f"Too many frets ({fret_count}) for string starting at pitch {open_pitch}. "
            f"The highest pitch is {highest_pitch}, which would only exist at "
            f"fret number {highest_fret}."
        )
    return tuple(Pitch(index) for index in range(lowest, highest + 1))


class Fretboard:
    """Immutable pitch-reachability map for one instrument configuration.

    Args:
        tuning: Open pitch per string (without capo).
        fret_count: Number of frets (≤ ``MAX_NUM_FRETS``).
        capo: Capo position (≤ ``MAX_CAPO``), ``0`` for none.
    """

    def __init__(self, tuning: Tuning, fret_count: int, capo: int = 0) -> None:
        check_fret_count(fret_count)
        check_capo(capo, fret_count)
        if not tuning:
            raise FretboardConfigError("A guitar needs at least one string.")

        self._tuning: dict[StringNumber, Pitch] = dict(sorted(tuning.items()))
        self._fret_count = fret_count
        self._capo = capo
        self._string_ranges: dict[StringNumber, tuple[Pitch, ...]] = {
            string: create_string_range(open_pitch, fret_count, capo)
            for string, open_pitch in self._tuning.items()
        }
        self._range: frozenset[Pitch] = frozenset(
            pitch for string_range in self._string_ranges.values() for pitch in string_range
        )
        self._lookup_cache: dict[Pitch, tuple[Fingering, ...]] = {}
        logger.debug(
            "Built fretboard: %d strings, %d frets, capo %d",
            len(self._tuning), fret_count, capo,
        )

    @classmethod
    def build(cls, tuning: Tuning, fret_count: int, capo: int = 0) -> "Fretboard":
        return cls(tuning, fret_count, capo)

    @classmethod
    def standard(cls, fret_count: int = 18, capo: int = 0) -> "Fretboard":
        return cls(standard_tuning(), fret_count, capo)

    # ── Read-only views ───────────────────────────────────────

    @property
    def tuning(self) -> dict[StringNumber, Pitch]:
        return dict(self._tuning)

    @property
    def fret_count(self) -> int:
        return self._fret_count

    @property
    def capo(self) -> int:
        return self._capo

    @property
    def strings(self) -> list[StringNumber]:
        return list(self._tuning)

    @property
    def string_ranges(self) -> dict[StringNumber, tuple[Pitch, ...]]:
        return dict(self._string_ranges)

    @property
    def range(self) -> frozenset[Pitch]:
        return self._range

    # ── Lookup ────────────────────────────────────────────────

    def lookup(self, pitch: Pitch) -> list[Fingering]:
        """Every fingering of *pitch*, ordered by ascending string number.

        An unreachable pitch yields an empty list.
        """
        cached = self._lookup_cache.get(pitch)
        if cached is None:
            fingerings: list[Fingering] = []
            for string, string_range in self._string_ranges.items():
                fret = pitch.index - string_range[0].index
                if 0 <= fret < len(string_range):
                    fingerings.append(Fingering(pitch=pitch, string=string, fret=fret))
            cached = tuple(fingerings)
            self._lookup_cache[pitch] = cached
        return list(cached)

    def __repr__(self) -> str:
        names = " ".join(str(pitch) for pitch in self._tuning.values())
        return f"Fretboard(tuning=[{names}], fret_count={self._fret_count}, capo={self._capo})"
