"""Solver — ranked shortest-path search over the fingering graph.

Two layers:
    dijkstra – single minimum-cost path from a start node to any goal node.
    yen      – Yen's k-shortest loopless paths, deviating from earlier
               results one spur node at a time and calling ``dijkstra``
               on the restricted graph.

Both work on any graph described by a ``successors(node) -> [(node, cost)]``
callable and an ``is_goal(node) -> bool`` predicate; costs must be
non-negative.

Design choices:
    - No randomness; every heap entry carries an insertion counter so
      equal-cost ties resolve in discovery order.
    - A missing path is a normal outcome (``None`` / empty list), never an
      exception.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Callable, Hashable, Iterable, Optional, TypeVar

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)

SuccessorFn = Callable[[N], Iterable[tuple[N, int]]]
GoalFn = Callable[[N], bool]
Path = tuple[N, ...]


def dijkstra(
    start: N,
    successors: SuccessorFn,
    is_goal: GoalFn,
) -> Optional[tuple[Path, int]]:
    """Find one minimum-cost path from *start* to the nearest goal node.

    Args:
        start: Source node.
        successors: Yields ``(neighbour, edge_cost)`` pairs.
        is_goal: Goal predicate.

    Returns:
        ``(path, cost)`` with *path* starting at *start*, or ``None`` when no
        goal is reachable.
    """
    counter = itertools.count()
    best: dict[N, int] = {start: 0}
    parents: dict[N, Optional[N]] = {start: None}
    frontier: list[tuple[int, int, N]] = [(0, next(counter), start)]
    settled: set[N] = set()

    while frontier:
        cost, _, node = heapq.heappop(frontier)
        if node in settled:
            continue
        settled.add(node)

        if is_goal(node):
            path: list[N] = [node]
            parent = parents[node]
            while parent is not None:
                path.append(parent)
                parent = parents[parent]
            path.reverse()
            return tuple(path), cost

        for neighbour, edge_cost in successors(node):
            if neighbour in settled:
                continue
            new_cost = cost + edge_cost
            if new_cost < best.get(neighbour, new_cost + 1):
                best[neighbour] = new_cost
                parents[neighbour] = node
                heapq.heappush(frontier, (new_cost, next(counter), neighbour))

    return None


def _edge_cost(successors: SuccessorFn, node: N, neighbour: N) -> int:
    for candidate, cost in successors(node):
        if candidate == neighbour:
            return cost
    raise ValueError(f"No edge between {node!r} and {neighbour!r}.")


def path_cost(successors: SuccessorFn, path: Path) -> int:
    """Sum the edge costs along *path*."""
    return sum(_edge_cost(successors, u, v) for u, v in zip(path, path[1:]))


def yen(
    start: N,
    successors: SuccessorFn,
    is_goal: GoalFn,
    k: int,
) -> list[tuple[Path, int]]:
    """Find up to *k* distinct loopless paths in non-decreasing cost order.

    The first path is a global minimum; each further path is the cheapest
    path differing from every earlier one by at least one edge.

    Args:
        start: Source node.
        successors: Yields ``(neighbour, edge_cost)`` pairs.
        is_goal: Goal predicate.
        k: Maximum number of paths.

    Returns:
        A list of ``(path, cost)`` pairs; empty when no goal is reachable.
    """
    if k <= 0:
        return []

    first = dijkstra(start, successors, is_goal)
    if first is None:
        logger.debug("No path from %r to any goal", start)
        return []

    found: list[tuple[Path, int]] = [first]
    seen: set[Path] = {first[0]}
    counter = itertools.count()
    candidates: list[tuple[int, int, int, Path]] = []

    while len(found) < k:
        previous_path = found[-1][0]

        for spur_index in range(len(previous_path) - 1):
            spur_node = previous_path[spur_index]
            root_path = previous_path[: spur_index + 1]

            # Edges already taken from this root by earlier results
            removed_edges: set[tuple[N, N]] = {
                (path[spur_index], path[spur_index + 1])
                for path, _ in found
                if len(path) > spur_index + 1 and path[: spur_index + 1] == root_path
            }
            removed_nodes: set[N] = set(root_path[:-1])

            def restricted_successors(node: N) -> list[tuple[N, int]]:
                return [
                    (neighbour, cost)
                    for neighbour, cost in successors(node)
                    if neighbour not in removed_nodes
                    and (node, neighbour) not in removed_edges
                ]

            spur = dijkstra(spur_node, restricted_successors, is_goal)
            if spur is None:
                continue

            spur_path, spur_cost = spur
            total_path = root_path[:-1] + spur_path
            if total_path in seen:
                continue
            total_cost = path_cost(successors, root_path) + spur_cost
            seen.add(total_path)
            heapq.heappush(
                candidates, (total_cost, len(total_path), next(counter), total_path)
            )

        if not candidates:
            break
        cost, _, _, path = heapq.heappop(candidates)
        found.append((path, cost))

    logger.debug("Found %d of %d requested paths", len(found), k)
    return found
