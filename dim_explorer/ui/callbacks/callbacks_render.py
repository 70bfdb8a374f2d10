from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from dim_explorer.core.exceptions import DimensionNotFoundError
from dim_explorer.ui.helpers import node_details
from dim_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from dim_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Selection store -> figure, notice, status, node details
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Output(IDs.Control.SELECTION_NOTICE, "is_open"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Output(IDs.Control.NODE_DETAILS, "children"),
        Input(IDs.Store.SELECTION_STATE, "data"),
    )
    def update_view_from_state(store_data: dict[str, Any] | None):
        try:
            explorer = ctx.explorer(store_data)
        except Exception:
            logger.exception("Invalid selection state in render callback: %r", store_data)
            return _error_figure("Internal error: invalid selection state."), False, "", node_details(None, [])

        state = explorer.state
        filtered = explorer.filtered_nodes()
        status = f"{len(filtered)} of {len(explorer.nodes)} nodes"
        details = node_details(explorer.selected_node(), explorer.dimensions)
        notice = state.selection_blocked

        if not state.selected_dimension_ids:
            fig = _message_figure(
                "Select 1 or 2 dimensions to explore the data.",
                "1 dimension → 1D list / timeline<br>2 dimensions → 2D scatter",
            )
            return fig, notice, status, details

        if not filtered:
            fig = _message_figure(
                "No nodes match the current filters.",
                "Try widening or clearing one of the filters.",
            )
            return fig, notice, status, details

        registry = ctx.registry
        if registry is None:
            return _error_figure("View registry is not available."), notice, status, details

        view = registry.for_selection(explorer, ctx.global_config.plot.frame())
        if view is None:
            fig = _message_figure("Select up to two dimensions to visualize.")
            return fig, notice, status, details

        try:
            logger.info(
                "render_start",
                extra={
                    "view_id": view.id,
                    "selected_dimensions": list(state.selected_dimension_ids),
                    "n_filtered": len(filtered),
                },
            )
            data = view.timed_compute()
            fig = view.render_figure(data)

        except DimensionNotFoundError as e:
            fig = _message_figure(str(e), "Deselect it or reload the data.")

        except Exception:
            logger.exception(
                "Error in update_view_from_state",
                extra={"selection_state": store_data},
            )
            fig = _error_figure(
                "The app hit an unexpected error. "
                "If this keeps happening, grab the logs and open an issue."
            )

        return fig, notice, status, details
