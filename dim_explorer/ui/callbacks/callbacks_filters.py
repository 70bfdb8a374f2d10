from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, exceptions, html

from dim_explorer.ui.helpers import build_filter_controls
from dim_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from dim_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Filter controls for the selected dimensions.
    # Rebuilt only when the selected dimensions change, so typing
    # into a bound does not recreate the inputs.
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.FILTER_CONTAINER, "children"),
        Output(IDs.Store.RENDERED_FILTER_DIMS, "data"),
        Input(IDs.Store.SELECTION_STATE, "data"),
        State(IDs.Store.RENDERED_FILTER_DIMS, "data"),
    )
    def update_filter_controls(store_data, rendered_dims):
        explorer = ctx.explorer(store_data)
        state = explorer.state
        selected = list(state.selected_dimension_ids)

        if rendered_dims is not None and list(rendered_dims) == selected:
            raise exceptions.PreventUpdate

        if not selected:
            return html.Div("Select a dimension to filter.", className="text-muted"), selected

        children = []
        for dim_id in selected:
            dimension = explorer.dimension(dim_id)
            if dimension is None:
                logger.warning("Selected dimension not in catalog", extra={"dimension_id": dim_id})
                children.append(
                    html.Div(f"Dimension '{dim_id}' is not available.", className="text-danger mb-3")
                )
                continue
            children.append(build_filter_controls(dimension, state.filter_for(dim_id), explorer.nodes))

        return children, selected
