"""Unit tests for the Dijkstra primitive and the Yen k-shortest-path driver."""

from guitar_arranger.solver import dijkstra, path_cost, yen

EDGES = {
    "S": [("A", 1), ("B", 2)],
    "A": [("C", 2), ("D", 1)],
    "B": [("C", 1)],
    "C": [("G", 1)],
    "D": [("G", 3)],
    "G": [],
    "X": [],
}


def _successors(node: str) -> list[tuple[str, int]]:
    return EDGES[node]


def _is_goal(node: str) -> bool:
    return node == "G"


def test_dijkstra_finds_cheapest_path() -> None:
    assert dijkstra("S", _successors, _is_goal) == (("S", "A", "C", "G"), 4)


def test_dijkstra_unreachable_goal() -> None:
    assert dijkstra("X", _successors, _is_goal) is None


def test_path_cost() -> None:
    assert path_cost(_successors, ("S", "A", "D", "G")) == 5
    assert path_cost(_successors, ("S",)) == 0


def test_yen_ranks_all_paths() -> None:
    assert yen("S", _successors, _is_goal, 3) == [
        (("S", "A", "C", "G"), 4),
        (("S", "B", "C", "G"), 4),
        (("S", "A", "D", "G"), 5),
    ]


def test_yen_returns_fewer_when_exhausted() -> None:
    paths = yen("S", _successors, _is_goal, 10)
    assert len(paths) == 3
    assert len({path for path, _ in paths}) == 3


def test_yen_single_path() -> None:
    assert yen("S", _successors, _is_goal, 1) == [(("S", "A", "C", "G"), 4)]


def test_yen_no_path_is_empty() -> None:
    assert yen("X", _successors, _is_goal, 5) == []
    assert yen("S", _successors, _is_goal, 0) == []


def test_yen_costs_non_decreasing() -> None:
    costs = [cost for _, cost in yen("S", _successors, _is_goal, 10)]
    assert costs == sorted(costs)
