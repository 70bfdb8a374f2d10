from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from dim_explorer.config.model import LoadedData
from dim_explorer.core.selection import MAX_SELECTED_DIMENSIONS
from dim_explorer.ui.helpers import dimension_options
from dim_explorer.ui.ids import IDs


def build_dimension_panel(data: LoadedData, selected: Sequence[str] = ()) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Dimensions", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.P(
                        f"{len(data.nodes)} nodes · {len(data.dimensions)} dimensions",
                        id=IDs.Control.SIDEBAR_DATA_META,
                        className="card-subtitle text-muted mb-3",
                    ),
                    dcc.Checklist(
                        id=IDs.Control.DIMENSION_CHECKLIST,
                        options=dimension_options(data.dimensions),
                        value=list(selected),
                        labelClassName="d-block",
                        inputClassName="me-2",
                    ),
                    html.Hr(),
                    html.Div(
                        [
                            html.Div(f"Max {MAX_SELECTED_DIMENSIONS} dimensions"),
                            html.Div("3D view: placeholder"),
                        ],
                        className="text-muted small",
                    ),
                ]
            ),
        ],
        className="dxe-sidebar",
    )
