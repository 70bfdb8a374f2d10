import pandas as pd
import plotly.graph_objs as go
import pytest

from dim_explorer.core.exceptions import DimensionNotFoundError
from dim_explorer.core.explorer import Explorer
from dim_explorer.core.filters import NumericFilter
from dim_explorer.core.model import Dimension, DimensionKind, Node
from dim_explorer.views.list_view import ListView


def _make_explorer(*selected: str) -> Explorer:
    """
    Tiny catalog with:
    - 3 nodes
    - numeric "age" (one missing) and categorical "team"
    """
    dimensions = [
        Dimension("age", "Age", DimensionKind.NUMERIC),
        Dimension("team", "Team", DimensionKind.CATEGORICAL),
    ]
    nodes = [
        Node("n1", "Cyd", {"age": 40, "team": "core"}),
        Node("n2", "Ada", {"age": 20, "team": "infra"}),
        Node("n3", "Bo", {"team": "core"}),
    ]
    explorer = Explorer(nodes, dimensions)
    for dim_id in selected:
        explorer.toggle_dimension(dim_id)
    return explorer


def test_list_view_compute_data_orders_by_axis():
    explorer = _make_explorer("age")
    view = ListView(explorer)

    data = view.compute_data()

    assert isinstance(data, pd.DataFrame)
    # n2 -> 0.0, n3 (missing) -> 0.5, n1 -> 1.0
    assert list(data["node_id"]) == ["n2", "n3", "n1"]
    assert list(data["position"]) == [0.0, 0.5, 1.0]
    assert list(data["value"]) == ["20", "(no value)", "40"]
    assert data.attrs["dimension"] == "Age (numeric)"
    assert data.attrs["ticks"] == [("20", 0.0), ("30", 0.5), ("40", 1.0)]


def test_list_view_render_figure_highlights_selected_node():
    explorer = _make_explorer("team")
    explorer.select_node("n3")
    view = ListView(explorer)

    data = view.compute_data()
    fig = view.render_figure(data)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    colours = list(fig.data[0].marker.color)
    selected_row = list(data["node_id"]).index("n3")
    assert colours[selected_row] != colours[(selected_row + 1) % len(colours)]
    assert list(fig.layout.xaxis.ticktext) == ["core", "infra"]


def test_list_view_empty_after_filtering():
    explorer = _make_explorer("age")
    explorer.set_filter("age", NumericFilter(min=99))
    view = ListView(explorer)

    data = view.compute_data()
    assert data.empty

    fig = view.render_figure(data)
    assert isinstance(fig, go.Figure)
    assert fig.layout.title.text == "No nodes match the current filters."


def test_list_view_unknown_dimension_raises_not_found():
    explorer = _make_explorer("ghost")
    with pytest.raises(DimensionNotFoundError):
        ListView(explorer).compute_data()
