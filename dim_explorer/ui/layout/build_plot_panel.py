from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from dim_explorer.ui.ids import IDs


def build_plot_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("View"),
                        html.Small(id=IDs.Control.STATUS_BAR, className="text-muted ms-auto"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dbc.Alert(
                        "3D view not implemented yet: deselect a dimension to choose another.",
                        id=IDs.Control.SELECTION_NOTICE,
                        color="warning",
                        is_open=False,
                        className="py-2",
                    ),
                    dcc.Loading(
                        id="main-graph-loading",
                        type="default",
                        children=dcc.Graph(
                            id=IDs.Control.MAIN_GRAPH,
                            style={"height": "650px"},
                            config={"responsive": True},
                        ),
                    ),
                ],
                className="dxe-main-body",
            ),
        ],
        className="dxe-maincard",
    )
