from __future__ import annotations

from datetime import date

import json

import pytest

from dim_explorer.core.exceptions import FilterKindError
from dim_explorer.core.explorer import Explorer
from dim_explorer.core.filters import CategoricalFilter, DatetimeFilter, NumericFilter
from dim_explorer.core.model import Dimension, DimensionKind, Node


def _make_explorer() -> Explorer:
    dimensions = [
        Dimension("age", "Age", DimensionKind.NUMERIC),
        Dimension("joined", "Joined", DimensionKind.DATETIME),
        Dimension("color", "Color", DimensionKind.CATEGORICAL),
    ]
    nodes = [
        Node("A", "Alpha", {"age": 20, "joined": "2020-01-01", "color": "red"}),
        Node("B", "Bravo", {"age": 30, "joined": "2021-06-15", "color": "blue"}),
        Node("C", "Charlie", {"joined": "2022-12-31"}),
    ]
    return Explorer(nodes, dimensions)


def test_initial_state_selects_first_node():
    explorer = _make_explorer()
    assert explorer.state.selected_dimension_ids == ()
    assert explorer.state.selected_node_id == "A"
    assert [n.id for n in explorer.filtered_nodes()] == ["A", "B", "C"]


def test_filter_change_reassigns_hidden_selected_node():
    explorer = _make_explorer()
    explorer.toggle_dimension("age")
    explorer.select_node("A")

    explorer.set_filter("age", NumericFilter(min=25))

    assert [n.id for n in explorer.filtered_nodes()] == ["B"]
    assert explorer.state.selected_node_id == "B"


def test_empty_filtered_set_clears_selected_node():
    explorer = _make_explorer()
    explorer.toggle_dimension("age")
    explorer.set_filter("age", NumericFilter(min=100))

    assert explorer.filtered_nodes() == []
    assert explorer.state.selected_node_id is None
    assert explorer.selected_node() is None

    explorer.clear_filter("age")
    assert explorer.state.selected_node_id == "A"


def test_toggle_returns_false_when_blocked():
    explorer = _make_explorer()
    assert explorer.toggle_dimension("age") is True
    assert explorer.toggle_dimension("color") is True
    assert explorer.toggle_dimension("joined") is False
    assert explorer.state.selection_blocked is True
    assert explorer.state.selected_dimension_ids == ("age", "color")


def test_deselect_removes_filter_and_widens_set():
    explorer = _make_explorer()
    explorer.toggle_dimension("color")
    explorer.set_filter("color", CategoricalFilter(frozenset({"blue"})))
    assert [n.id for n in explorer.filtered_nodes()] == ["B"]

    explorer.toggle_dimension("color")
    assert explorer.state.filters == {}
    assert len(explorer.filtered_nodes()) == 3


def test_set_filter_rejects_mismatched_kind():
    explorer = _make_explorer()
    explorer.toggle_dimension("age")
    with pytest.raises(FilterKindError):
        explorer.set_filter("age", DatetimeFilter(start=date(2020, 1, 1)))
    assert explorer.state.filters == {}


def test_axis_is_computed_over_filtered_set_and_memoised():
    explorer = _make_explorer()
    explorer.toggle_dimension("joined")
    explorer.set_filter("joined", DatetimeFilter(end=date(2021, 12, 31)))

    axis = explorer.axis("joined")
    assert [t.label for t in axis.ticks][0] == "2020-01-01"
    assert [t.label for t in axis.ticks][-1] == "2021-06-15"
    assert explorer.axis("joined") is axis


def test_unknown_dimension_degrades_to_none():
    explorer = _make_explorer()
    explorer.toggle_dimension("ghost")

    assert explorer.state.selected_dimension_ids == ("ghost",)
    assert explorer.dimension("ghost") is None
    assert explorer.axis("ghost") is None
    assert explorer.selected_axes() == [None]


def test_out_of_range_integers_are_filtered_as_missing():
    dimensions = [Dimension("age", "Age", DimensionKind.NUMERIC)]
    nodes = [
        Node("A", "Alpha", {"age": json.loads("1" + "0" * 400)}),
        Node("B", "Bravo", {"age": 5}),
    ]
    explorer = Explorer(nodes, dimensions)
    explorer.toggle_dimension("age")

    explorer.set_filter("age", NumericFilter(min=1))

    assert [n.id for n in explorer.filtered_nodes()] == ["B"]
    assert explorer.axis("age").normalize(5) == 0.5
