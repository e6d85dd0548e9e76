"""Graph Builder — beat-ordered layers of fingering nodes.

Layout:
    Start       – virtual source, precedes layer 0, never a destination.
    RestNode    – the single node of a Rest layer.
    NoteNode    – one node per surviving FingeringCombo of a Playable layer.

Measure breaks never become layers; their absolute indices are recorded by
:func:`split_measure_breaks` and restored by the assembler.

Edges only connect layer ``i`` to layer ``i + 1`` (Start → layer 0).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

from .beats import MeasureBreak, Rest
from .candidates import BeatCandidates, FingeringCombo
from .cost_model import DifficultyCostModel

logger = logging.getLogger(__name__)


# ── Node types ────────────────────────────────────────────────

@dataclass(frozen=True)
class StartNode:
    pass


@dataclass(frozen=True)
class RestNode:
    position: int


@dataclass(frozen=True)
class NoteNode:
    position: int
    combo: FingeringCombo


GraphNode = Union[StartNode, RestNode, NoteNode]
LayerNode = Union[RestNode, NoteNode]
START = StartNode()


def split_measure_breaks(
    candidates: Sequence[BeatCandidates],
) -> tuple[list[BeatCandidates], list[int]]:
    """Separate measure breaks from the layers.

    Returns:
        ``(retained, measure_break_indices)`` where *retained* keeps the
        original order and the indices are absolute positions in *candidates*.
    """
    retained: list[BeatCandidates] = []
    measure_break_indices: list[int] = []
    for index, candidate in enumerate(candidates):
        if isinstance(candidate, MeasureBreak):
            measure_break_indices.append(index)
        else:
            retained.append(candidate)
    return retained, measure_break_indices


class ArrangementGraph:
    """Layered fingering graph with a successor rule and goal predicate.

    Args:
        candidates: Per-layer candidates (no measure breaks).
        cost_model: Scores every edge; defaults to :class:`DifficultyCostModel`.
    """

    def __init__(
        self,
        candidates: Sequence[BeatCandidates],
        cost_model: DifficultyCostModel | None = None,
    ) -> None:
        self.cost_model = cost_model or DifficultyCostModel()
        self._layers: list[list[LayerNode]] = []
        self._successor_cache: dict[GraphNode, list[tuple[LayerNode, int]]] = {}

        for position, candidate in enumerate(candidates):
            if isinstance(candidate, MeasureBreak):
                raise ValueError("Measure breaks must be removed before building the graph.")
            if isinstance(candidate, Rest):
                self._layers.append([RestNode(position)])
            else:
                self._layers.append([NoteNode(position, combo) for combo in candidate])

        logger.debug(
            "Built graph: %d layers, %d nodes", self.num_layers, len(self.nodes)
        )

    @property
    def num_layers(self) -> int:
        return len(self._layers)

    @property
    def nodes(self) -> list[LayerNode]:
        """Flat node list in layer order."""
        return [node for layer in self._layers for node in layer]

    def layer(self, position: int) -> list[LayerNode]:
        return list(self._layers[position])

    def successors(self, node: GraphNode) -> list[tuple[LayerNode, int]]:
        """Nodes of the next layer paired with the cost of reaching them."""
        cached = self._successor_cache.get(node)
        if cached is None:
            next_position = 0 if isinstance(node, StartNode) else node.position + 1
            if next_position >= self.num_layers:
                cached = []
            else:
                cached = [
                    (next_node, self.cost_model.transition_cost(node, next_node))
                    for next_node in self._layers[next_position]
                ]
            self._successor_cache[node] = cached
        return list(cached)

    def is_goal(self, node: GraphNode) -> bool:
        if isinstance(node, StartNode):
            return False
        return node.position == self.num_layers - 1
