import pandas as pd
import plotly.graph_objs as go

from dim_explorer.core.axis import PlotFrame
from dim_explorer.core.explorer import Explorer
from dim_explorer.core.model import Dimension, DimensionKind, Node
from dim_explorer.views.scatter_view import ScatterView


def _make_explorer() -> Explorer:
    dimensions = [
        Dimension("age", "Age", DimensionKind.NUMERIC),
        Dimension("joined", "Joined", DimensionKind.DATETIME),
    ]
    nodes = [
        Node("n1", "One", {"age": 10, "joined": "2020-01-01"}),
        Node("n2", "Two", {"age": 30, "joined": "2022-01-01"}),
        Node("n3", "Three", {"age": 20}),
    ]
    explorer = Explorer(nodes, dimensions)
    explorer.toggle_dimension("age")
    explorer.toggle_dimension("joined")
    return explorer


def test_scatter_view_projects_onto_frame():
    frame = PlotFrame(width=200, height=100, pad=10)
    view = ScatterView(_make_explorer(), frame)

    data = view.compute_data()

    assert list(data["node_id"]) == ["n1", "n2", "n3"]
    row = data.set_index("node_id")
    # min X / min Y -> bottom-left, max X / max Y -> top-right
    assert (row.loc["n1", "x"], row.loc["n1", "y"]) == (10, 90)
    assert (row.loc["n2", "x"], row.loc["n2", "y"]) == (190, 10)
    # missing datetime falls back to the neutral midpoint
    assert row.loc["n3", "norm_y"] == 0.5
    assert row.loc["n3", "y_value"] == "(no value)"

    assert data.attrs["x_label"] == "Age (numeric)"
    assert data.attrs["y_label"] == "Joined (datetime)"
    assert [label for label, _ in data.attrs["y_ticks"]] == ["2020-01-01", "2020-12-31", "2022-01-01"]


def test_scatter_view_render_figure():
    frame = PlotFrame(width=200, height=100, pad=10)
    view = ScatterView(_make_explorer(), frame)

    data = view.compute_data()
    fig = view.render_figure(data)

    assert isinstance(fig, go.Figure)
    assert fig.data[0].type == "scatter"
    assert list(fig.layout.yaxis.range) == [100, 0]
    assert list(fig.layout.xaxis.ticktext) == ["10", "20", "30"]
    assert fig.layout.xaxis.title.text == "Age (numeric)"


def test_scatter_view_render_figure_empty():
    view = ScatterView(_make_explorer())
    fig = view.render_figure(pd.DataFrame())
    assert isinstance(fig, go.Figure)
