from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from dim_explorer.ui.ids import IDs


def build_details_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Node details", className="fw-semibold"),
            dbc.CardBody(
                html.Div(
                    id=IDs.Control.NODE_DETAILS,
                    children=html.Div("No node selected", className="text-muted"),
                )
            ),
        ],
        className="dxe-sidebar",
    )
