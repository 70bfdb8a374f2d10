from __future__ import annotations

from dim_explorer.core.filters import CategoricalFilter, NumericFilter
from dim_explorer.core.model import Node
from dim_explorer.core.selection import (
    SelectionState,
    clear_filter,
    reconcile,
    select_node,
    set_filter,
    toggle_dimension,
)


def test_toggle_blocks_third_dimension_and_recovers():
    state = SelectionState()
    state = toggle_dimension(state, "d1")
    state = toggle_dimension(state, "d2")
    state = toggle_dimension(state, "d3")

    assert state.selected_dimension_ids == ("d1", "d2")
    assert state.selection_blocked is True

    state = toggle_dimension(state, "d1")
    assert state.selected_dimension_ids == ("d2",)
    assert state.selection_blocked is False

    state = toggle_dimension(state, "d3")
    assert state.selected_dimension_ids == ("d2", "d3")


def test_deselecting_dimension_drops_its_filter():
    state = toggle_dimension(SelectionState(), "age")
    state = set_filter(state, "age", NumericFilter(min=1))
    assert "age" in state.filters

    state = toggle_dimension(state, "age")
    assert state.filters == {}


def test_set_filter_ignores_unselected_dimensions():
    state = set_filter(SelectionState(), "age", NumericFilter(min=1))
    assert state.filters == {}


def test_noop_filter_is_equivalent_to_clear():
    state = toggle_dimension(SelectionState(), "c")
    state = set_filter(state, "c", CategoricalFilter(frozenset({"a"})))

    assert set_filter(state, "c", CategoricalFilter()) == clear_filter(state, "c")
    assert set_filter(state, "c", CategoricalFilter()).filters == {}


def test_reconcile_keeps_visible_node_and_reassigns_hidden_one():
    nodes = [Node("a", "A"), Node("b", "B")]

    state = select_node(SelectionState(), "b")
    assert reconcile(state, nodes).selected_node_id == "b"

    state = select_node(state, "zzz")
    assert reconcile(state, nodes).selected_node_id == "a"

    assert reconcile(state, []).selected_node_id is None


def test_dict_round_trip_drops_dangling_and_noop_filters():
    raw = {
        "selected_dimension_ids": ["age", "age", "team", "extra"],
        "selected_node_id": "n1",
        "filters": {
            "age": {"kind": "numeric", "min": 3, "max": None},
            "team": {"kind": "categorical", "allowed": []},
            "other": {"kind": "numeric", "min": 1},
            "bad": "not a dict",
        },
        "selection_blocked": True,
    }
    state = SelectionState.from_dict(raw)

    assert state.selected_dimension_ids == ("age", "team")
    assert state.filters == {"age": NumericFilter(min=3)}
    assert state.selection_blocked is True
    assert SelectionState.from_dict(state.to_dict()) == state


def test_from_dict_handles_empty_store():
    assert SelectionState.from_dict(None) == SelectionState()
    assert SelectionState.from_dict({}) == SelectionState()
