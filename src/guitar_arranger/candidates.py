"""Candidate Generator — per-beat fingering combinations with derived metrics.

For every Playable beat:
    - query the fretboard for each pitch's fingerings,
    - build the Cartesian product across pitches (pitch order × string order),
    - drop combinations that put two pitches on one string,
    - compute each survivor's average non-open fret and non-open fret span.

Unreachable pitches are collected across the **whole** input and raised as
one :class:`InvalidPitchError` before any graph work happens.

All computations are deterministic: identical inputs enumerate identical
combinations in identical order.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from .beats import Beat, MeasureBreak, Playable, Rest
from .constants import LARGE_COMBO_COUNT
from .errors import InvalidInput, InvalidPitchError
from .fretboard import Fingering, Fretboard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FingeringCombo:
    """One fingering per pitch of a beat, every pitch on its own string.

    Attributes:
        fingerings: One :class:`Fingering` per pitch, in pitch order.
        avg_fret: Mean of the non-open frets (``None`` if all strings are open),
            held at 32-bit float precision.
        fret_span: ``max - min`` of the non-open frets (``0`` for fewer than two).
    """

    fingerings: tuple[Fingering, ...]
    avg_fret: Optional[float]
    fret_span: int

    @classmethod
    def from_fingerings(cls, fingerings: Sequence[Fingering]) -> "FingeringCombo":
        return cls(
            fingerings=tuple(fingerings),
            avg_fret=non_open_avg_fret(fingerings),
            fret_span=non_open_fret_span(fingerings),
        )

    def __len__(self) -> int:
        return len(self.fingerings)


# Candidates for one beat: a marker, or the list of surviving combos.
BeatCandidates = Union[Rest, MeasureBreak, list[FingeringCombo]]


# ── Metrics ───────────────────────────────────────────────────

def non_open_avg_fret(fingerings: Sequence[Fingering]) -> Optional[float]:
    """Average fret of the fretted (non-zero) fingerings, or ``None``."""
    frets = [f.fret for f in fingerings if f.fret != 0]
    if not frets:
        return None
    return float(np.float32(np.mean(np.asarray(frets, dtype=np.float64))))


def non_open_fret_span(fingerings: Sequence[Fingering]) -> int:
    """Distance between the highest and lowest fretted positions."""
    frets = [f.fret for f in fingerings if f.fret != 0]
    if len(frets) < 2:
        return 0
    return max(frets) - min(frets)


def no_duplicate_strings(fingerings: Sequence[Fingering]) -> bool:
    return len(fingerings) == len({f.string for f in fingerings})


# ── Generation ────────────────────────────────────────────────

def generate_fingering_combos(
    fingerings_per_pitch: Sequence[Sequence[Fingering]],
) -> list[FingeringCombo]:
    """Every playable combination of one fingering per pitch.

    Args:
        fingerings_per_pitch: For each pitch of the beat, its fingerings
            in ascending string order.

    Returns:
        Combos in product order with same-string combinations removed.
        May be empty when the pitches cannot share the strings.
    """
    combos = [
        FingeringCombo.from_fingerings(candidate)
        for candidate in itertools.product(*fingerings_per_pitch)
        if no_duplicate_strings(candidate)
    ]
    if len(combos) > LARGE_COMBO_COUNT:
        logger.warning("Beat produced %d fingering combinations", len(combos))
    return combos


def generate_candidates(
    fretboard: Fretboard,
    beats: Sequence[Beat],
) -> list[BeatCandidates]:
    """Turn every beat into its fingering candidates.

    Args:
        fretboard: Shared, read-only fretboard.
        beats: The full input, in order.

    Returns:
        One entry per beat: ``Rest()`` / ``MeasureBreak()`` markers pass
        through unchanged, Playable beats become a list of combos.

    Raises:
        InvalidPitchError: If any pitch anywhere in *beats* has no fingering.
    """
    invalid: list[InvalidInput] = []
    fingerings: list[Union[Rest, MeasureBreak, list[list[Fingering]]]] = []

    for line_index, beat in enumerate(beats):
        if isinstance(beat, Playable):
            per_pitch: list[list[Fingering]] = []
            for pitch in beat.notes:
                pitch_fingerings = fretboard.lookup(pitch)
                if not pitch_fingerings:
                    invalid.append(InvalidInput(value=str(pitch), line_number=line_index + 1))
                per_pitch.append(pitch_fingerings)
            fingerings.append(per_pitch)
        elif isinstance(beat, (Rest, MeasureBreak)):
            fingerings.append(beat)
        else:
            raise TypeError(f"Unsupported beat type: {type(beat).__name__}")

    if invalid:
        logger.debug("%d unplayable pitch(es) in input", len(invalid))
        raise InvalidPitchError(invalid)

    candidates: list[BeatCandidates] = []
    for entry in fingerings:
        if isinstance(entry, (Rest, MeasureBreak)):
            candidates.append(entry)
        else:
            candidates.append(generate_fingering_combos(entry))

    logger.debug(
        "Generated candidates for %d beats (%d combos)",
        len(candidates),
        sum(len(c) for c in candidates if isinstance(c, list)),
    )
    return candidates
