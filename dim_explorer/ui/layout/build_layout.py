from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from dim_explorer.ui.ids import IDs
from dim_explorer.ui.layout.build_details_panel import build_details_panel
from dim_explorer.ui.layout.build_dimension_panel import build_dimension_panel
from dim_explorer.ui.layout.build_filter_panel import build_filter_panel
from dim_explorer.ui.layout.build_navbar import build_navbar
from dim_explorer.ui.layout.build_plot_panel import build_plot_panel

if TYPE_CHECKING:
    from dim_explorer.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    # Seed the store with the reconciled empty selection (first node selected)
    initial_state = ctx.explorer(None).state

    return dbc.Container(
        fluid=True,
        className="dxe-root",
        children=[
            build_navbar(ctx.global_config),

            # Per-tab stores; nothing outlives the page
            dcc.Store(id=IDs.Store.SELECTION_STATE, storage_type="memory", data=initial_state.to_dict()),
            dcc.Store(id=IDs.Store.RENDERED_FILTER_DIMS, storage_type="memory", data=None),

            dbc.Row(
                [
                    dbc.Col(
                        [
                            build_dimension_panel(ctx.data, initial_state.selected_dimension_ids),
                            build_filter_panel(),
                        ],
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(build_plot_panel(), md=6, className="mt-3"),
                    dbc.Col(build_details_panel(), md=3, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )