"""Unit tests for the transition cost between graph nodes."""

import numpy as np

from guitar_arranger.candidates import FingeringCombo
from guitar_arranger.cost_model import DifficultyCostModel
from guitar_arranger.graph import START, NoteNode, RestNode


def _note(avg_fret, fret_span: int = 0, position: int = 0) -> NoteNode:
    return NoteNode(position, FingeringCombo(fingerings=(), avg_fret=avg_fret, fret_span=fret_span))


def test_rest_destination_is_free() -> None:
    model = DifficultyCostModel()
    assert model.transition_cost(_note(12.0, 3), RestNode(1)) == 0
    assert model.transition_cost(START, RestNode(0)) == 0


def test_from_start_counts_height_only() -> None:
    model = DifficultyCostModel()
    assert model.transition_cost(START, _note(5.0)) == 5
    assert model.transition_cost(START, _note(None)) == 0


def test_from_rest_has_no_position_shift() -> None:
    model = DifficultyCostModel()
    assert model.transition_cost(RestNode(0), _note(9.0, position=1)) == 9


def test_position_shift_dominates() -> None:
    model = DifficultyCostModel()
    assert model.transition_cost(_note(5.0), _note(9.0, position=1)) == 409


def test_open_source_has_no_position_shift() -> None:
    model = DifficultyCostModel()
    assert model.transition_cost(_note(None), _note(3.0, 2, position=1)) == 23


def test_open_destination_costs_nothing() -> None:
    model = DifficultyCostModel()
    assert model.transition_cost(_note(7.0), _note(None, position=1)) == 0


def test_fractional_costs_are_truncated() -> None:
    model = DifficultyCostModel()
    assert model.transition_cost(_note(2.5), _note(3.0, 1, position=1)) == 63
    third = float(np.float32(5 / 3))
    assert model.transition_cost(START, _note(third)) == 1


def test_components_are_non_negative() -> None:
    model = DifficultyCostModel()
    assert model.position_shift_cost(9.0, 5.0) == model.position_shift_cost(5.0, 9.0)
    assert model.stretch_cost(0) == 0
    assert model.height_cost(None) == 0
