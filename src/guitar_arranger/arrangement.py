"""Arrangement — orchestrate the engine and assemble ranked results.

Pipeline for :func:`generate_arrangements`:
    1. Validate the requested count.
    2. Short-circuit inputs without any Playable beat.
    3. Generate fingering candidates for the whole input (aggregated
       pitch validation).
    4. Drop leading Rest / MeasureBreak beats, split off measure breaks.
    5. Build the layered graph and run the k-shortest-path search.
    6. Convert each path back into an :class:`Arrangement`.

Results are pure functions of ``(fretboard, beats, count)``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .beats import ArrangedBeat, Beat, MeasureBreak, Playable, Rest, has_playable
from .candidates import generate_candidates
from .constants import MAX_NUM_ARRANGEMENTS
from .errors import InvalidRequestError, NoArrangementsError
from .fretboard import Fingering, Fretboard
from .graph import START, ArrangementGraph, GraphNode, NoteNode, RestNode, split_measure_breaks
from .solver import yen

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Arrangement:
    """One complete fingering solution, ranked by difficulty.

    Attributes:
        beats: Arranged beats, measure breaks included.
        difficulty: Summed edge cost of the underlying path.
        max_fret_span: Largest fret span over all played beats.
    """

    beats: tuple[ArrangedBeat, ...]
    difficulty: int
    max_fret_span: int

    @classmethod
    def empty(cls) -> "Arrangement":
        return cls(beats=(), difficulty=0, max_fret_span=0)

    def playable_beats(self) -> list[Playable[Fingering]]:
        return [beat for beat in self.beats if isinstance(beat, Playable)]

    def __len__(self) -> int:
        return len(self.beats)


def check_arrangement_count(count: int) -> None:
    """Reject counts outside ``1..MAX_NUM_ARRANGEMENTS``."""
    if count <= 0:
        raise InvalidRequestError("No arrangements were requested.")
    if count > MAX_NUM_ARRANGEMENTS:
        raise InvalidRequestError(
            f"Too many arrangements to calculate. The maximum is {MAX_NUM_ARRANGEMENTS}."
        )


def process_path(
    path: Sequence[GraphNode],
    difficulty: int,
    measure_break_indices: Sequence[int],
) -> Arrangement:
    """Convert a search path into an :class:`Arrangement`.

    Args:
        path: Nodes from Start to a goal node.
        difficulty: Accumulated edge cost of *path*.
        measure_break_indices: Absolute positions of the removed measure breaks.

    Returns:
        The assembled arrangement.
    """
    beats: list[ArrangedBeat] = []
    spans: list[int] = []
    for node in path:
        if isinstance(node, RestNode):
            beats.append(Rest())
        elif isinstance(node, NoteNode):
            beats.append(Playable(node.combo.fingerings))
            spans.append(node.combo.fret_span)

    for index in sorted(measure_break_indices):
        beats.insert(index, MeasureBreak())

    return Arrangement(
        beats=tuple(beats),
        difficulty=difficulty,
        max_fret_span=max(spans, default=0),
    )


def generate_arrangements(
    fretboard: Fretboard,
    beats: Sequence[Beat],
    count: int,
) -> list[Arrangement]:
    """Find up to *count* arrangements of *beats*, easiest first.

    Args:
        fretboard: Instrument configuration used for every pitch lookup.
        beats: Input beats in playing order.
        count: Number of arrangements wanted (1–20).

    Returns:
        ``min(count, available)`` arrangements in non-decreasing difficulty.

    Raises:
        InvalidRequestError: *count* is out of range.
        InvalidPitchError: Some pitches cannot be played on *fretboard*.
        NoArrangementsError: No path exists through the fingering graph.
    """
    check_arrangement_count(count)
    beats = list(beats)

    if not has_playable(beats):
        logger.debug("No playable beats; returning %d empty arrangements", count)
        return [Arrangement.empty() for _ in range(count)]

    candidates = generate_candidates(fretboard, beats)

    first_playable = next(
        index for index, candidate in enumerate(candidates) if isinstance(candidate, list)
    )
    if first_playable:
        logger.debug("Dropping %d leading rest/measure-break beats", first_playable)
    retained, measure_break_indices = split_measure_breaks(candidates[first_playable:])

    graph = ArrangementGraph(retained)
    paths = yen(START, graph.successors, graph.is_goal, count)
    if not paths:
        raise NoArrangementsError("No arrangements could be calculated.")

    return [process_path(path, cost, measure_break_indices) for path, cost in paths]
