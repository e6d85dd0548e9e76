"""Cost Model — ergonomic difficulty of moving between two beats.

For an edge ``u → v``:

    cost = trunc(|avg(v) - avg(u)| * 100 + span(v) * 10 + avg(v) * 1)

where ``avg`` is the average non-open fret (the difference term is ``0``
unless both sides define it, and a missing ``avg(v)`` counts as ``0``) and
``span`` is the non-open fret span.  Moving to a Rest is free.

The arithmetic runs in 32-bit floats and truncates toward zero.  Weights
are fixed constants and are not configurable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np

from .constants import AVG_FRET_DIFF_WEIGHT, AVG_FRET_WEIGHT, FRET_SPAN_WEIGHT

if TYPE_CHECKING:
    from .graph import GraphNode


class DifficultyCostModel:
    """Transition cost between two graph nodes.

    Components mirror the three ergonomic concerns: hand movement along the
    neck, finger stretch within a beat, and absolute height on the neck.
    """

    avg_fret_diff_weight = np.float32(AVG_FRET_DIFF_WEIGHT)
    fret_span_weight = np.float32(FRET_SPAN_WEIGHT)
    avg_fret_weight = np.float32(AVG_FRET_WEIGHT)

    # ── Individual cost components ────────────────────────────

    def position_shift_cost(
        self, avg_fret_a: Optional[float], avg_fret_b: Optional[float]
    ) -> np.float32:
        """Penalise moving the hand along the neck between beats.

        Zero when either side has no fretted notes.
        """
        if avg_fret_a is None or avg_fret_b is None:
            return np.float32(0.0)
        return abs(np.float32(avg_fret_b) - np.float32(avg_fret_a)) * self.avg_fret_diff_weight

    def stretch_cost(self, fret_span: int) -> np.float32:
        """Penalise the spread of fretted positions within the beat."""
        return np.float32(fret_span) * self.fret_span_weight

    def height_cost(self, avg_fret: Optional[float]) -> np.float32:
        """Small bias toward lower positions on the neck."""
        if avg_fret is None:
            return np.float32(0.0)
        return np.float32(avg_fret) * self.avg_fret_weight

    # ── Aggregate ─────────────────────────────────────────────

    def transition_cost(self, current: "GraphNode", following: "GraphNode") -> int:
        """Integer cost of the edge ``current → following``.

        Args:
            current: Source node (Start, Rest or Note).
            following: Destination node (Rest or Note).

        Returns:
            Non-negative integer cost.
        """
        following_combo = getattr(following, "combo", None)
        if following_combo is None:
            return 0

        current_combo = getattr(current, "combo", None)
        current_avg = current_combo.avg_fret if current_combo is not None else None

        cost = (
            self.position_shift_cost(current_avg, following_combo.avg_fret)
            + self.stretch_cost(following_combo.fret_span)
            + self.height_cost(following_combo.avg_fret)
        )
        return int(cost)
