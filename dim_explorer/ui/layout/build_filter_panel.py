from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from dim_explorer.ui.ids import IDs


def build_filter_panel() -> dbc.Card:
    # Controls are filled in per selected dimension by the filter callbacks
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                html.Div(
                    id=IDs.Control.FILTER_CONTAINER,
                    children=html.Div("Select a dimension to filter.", className="text-muted"),
                ),
            ),
        ],
        className="dxe-sidebar mt-3",
    )
