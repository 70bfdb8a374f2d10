from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from dim_explorer.core.axis import order_nodes
from dim_explorer.core.coercion import to_label
from .base_view import BaseView

LIST_COLUMNS = ["node_id", "label", "value", "position"]


class ListView(BaseView):
    """
    1D list / timeline: visible nodes ordered along the single selected dimension.

    - X = normalised position on the dimension's axis
    - one row per node, in axis order (first row at the top)
    """

    id = "list"
    label = "1D List"
    n_dimensions = 1

    def compute_data(self) -> pd.DataFrame:
        (dimension,) = self.selected_dimensions()
        nodes = self.explorer.filtered_nodes()

        if not nodes:
            return pd.DataFrame(columns=LIST_COLUMNS)

        (axis,) = self.explorer.selected_axes()
        ordered = order_nodes(nodes, axis)

        df = pd.DataFrame(
            {
                "node_id": [n.id for n in ordered],
                "label": [n.label for n in ordered],
                "value": [to_label(n.value(dimension.id)) for n in ordered],
                "position": [axis.normalize(n.value(dimension.id)) for n in ordered],
            }
        )
        df.attrs["dimension"] = dimension.display_name
        df.attrs["ticks"] = [(t.label, t.position) for t in axis.ticks]
        return df

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No nodes match the current filters.")

        selected_id = self.explorer.state.selected_node_id
        ticks = data.attrs.get("ticks", [])

        fig = go.Figure(
            go.Scatter(
                x=data["position"],
                y=list(range(len(data))),
                mode="markers",
                customdata=data[["node_id", "value"]].to_numpy(),
                text=data["label"],
                hovertemplate="%{text}<br>%{customdata[1]}<extra></extra>",
                marker=dict(
                    size=10,
                    color=self.marker_colours(list(data["node_id"]), selected_id),
                ),
            )
        )
        fig.update_xaxes(
            title=data.attrs.get("dimension"),
            range=[-0.05, 1.05],
            tickmode="array",
            tickvals=[pos for _, pos in ticks],
            ticktext=[label for label, _ in ticks],
            zeroline=False,
        )
        # First node in axis order sits at the top
        fig.update_yaxes(
            autorange="reversed",
            tickmode="array",
            tickvals=list(range(len(data))),
            ticktext=list(data["label"]),
        )
        fig.update_layout(
            title=f"1D View: {data.attrs.get('dimension')}",
            margin=dict(l=40, r=40, t=40, b=40),
            clickmode="event",
        )
        return fig
