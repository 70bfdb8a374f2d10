from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from dim_explorer.core.coercion import to_label
from .base_view import BaseView

SCATTER_COLUMNS = ["node_id", "label", "x_value", "y_value", "norm_x", "norm_y", "x", "y"]


class ScatterView(BaseView):
    """
    2D scatter: first selected dimension on X, second on Y.

    Points are projected onto a pixel canvas (PlotFrame) whose origin is the
    top-left corner, like an SVG; the Y axis is therefore drawn reversed so
    larger values still plot higher.
    """

    id = "scatter"
    label = "2D Scatter"
    n_dimensions = 2

    def compute_data(self) -> pd.DataFrame:
        x_dim, y_dim = self.selected_dimensions()
        nodes = self.explorer.filtered_nodes()

        if not nodes:
            return pd.DataFrame(columns=SCATTER_COLUMNS)

        x_axis, y_axis = self.explorer.selected_axes()

        rows = []
        for node in nodes:
            nx = x_axis.normalize(node.value(x_dim.id))
            ny = y_axis.normalize(node.value(y_dim.id))
            px, py = self.frame.project(nx, ny)
            rows.append(
                {
                    "node_id": node.id,
                    "label": node.label,
                    "x_value": to_label(node.value(x_dim.id)),
                    "y_value": to_label(node.value(y_dim.id)),
                    "norm_x": nx,
                    "norm_y": ny,
                    "x": px,
                    "y": py,
                }
            )

        df = pd.DataFrame(rows, columns=SCATTER_COLUMNS)
        df.attrs["x_label"] = x_dim.display_name
        df.attrs["y_label"] = y_dim.display_name
        df.attrs["x_ticks"] = [(t.label, self.frame.project(t.position, 0.0)[0]) for t in x_axis.ticks]
        df.attrs["y_ticks"] = [(t.label, self.frame.project(0.0, t.position)[1]) for t in y_axis.ticks]
        return df

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No nodes match the current filters.")

        selected_id = self.explorer.state.selected_node_id
        x_ticks = data.attrs.get("x_ticks", [])
        y_ticks = data.attrs.get("y_ticks", [])

        fig = go.Figure(
            go.Scatter(
                x=data["x"],
                y=data["y"],
                mode="markers",
                customdata=data[["node_id", "x_value", "y_value"]].to_numpy(),
                text=data["label"],
                hovertemplate=(
                    "%{text}<br>"
                    + f"{data.attrs.get('x_label')}: %{{customdata[1]}}<br>"
                    + f"{data.attrs.get('y_label')}: %{{customdata[2]}}<extra></extra>"
                ),
                marker=dict(
                    size=10,
                    color=self.marker_colours(list(data["node_id"]), selected_id),
                ),
            )
        )
        fig.update_xaxes(
            title=data.attrs.get("x_label"),
            range=[0, self.frame.width],
            tickmode="array",
            tickvals=[pos for _, pos in x_ticks],
            ticktext=[label for label, _ in x_ticks],
            zeroline=False,
        )
        fig.update_yaxes(
            title=data.attrs.get("y_label"),
            range=[self.frame.height, 0],
            tickmode="array",
            tickvals=[pos for _, pos in y_ticks],
            ticktext=[label for label, _ in y_ticks],
            zeroline=False,
        )
        fig.update_layout(
            title="2D View",
            margin=dict(l=40, r=40, t=40, b=40),
            clickmode="event",
        )
        return fig
