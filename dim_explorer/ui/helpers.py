from __future__ import annotations

from typing import List, Optional, Sequence

from dash import dcc, html

from dim_explorer.core.axis import sort_categories
from dim_explorer.core.coercion import format_number, is_missing, to_label
from dim_explorer.core.filters import CategoricalFilter, DatetimeFilter, Filter, NumericFilter, filter_for_kind
from dim_explorer.core.model import Dimension, Node
from dim_explorer.ui.ids import IDs, filter_control_id


def dimension_options(dimensions: Sequence[Dimension]) -> List[dict]:
    return [{"label": d.display_name, "value": d.id} for d in dimensions]


def category_options(dimension: Dimension, nodes: Sequence[Node]) -> List[dict]:
    labels = sort_categories(to_label(n.value(dimension.id)) for n in nodes)
    return [{"label": label, "value": label} for label in labels]


def _numeric_controls(dimension: Dimension, flt: NumericFilter) -> html.Div:

    def as_text(bound: Optional[float]) -> str:
        return format_number(bound) if bound is not None else ""

    return html.Div(
        [
            dcc.Input(
                id=filter_control_id(IDs.Pattern.NUMERIC_MIN, dimension.id),
                type="text",
                value=as_text(flt.min),
                placeholder="min",
                debounce=True,
                className="form-control form-control-sm me-2",
            ),
            dcc.Input(
                id=filter_control_id(IDs.Pattern.NUMERIC_MAX, dimension.id),
                type="text",
                value=as_text(flt.max),
                placeholder="max",
                debounce=True,
                className="form-control form-control-sm",
            ),
        ],
        className="d-flex mb-3",
    )


def _datetime_controls(dimension: Dimension, flt: DatetimeFilter) -> dcc.DatePickerRange:
    return dcc.DatePickerRange(
        id=filter_control_id(IDs.Pattern.DATE_RANGE, dimension.id),
        start_date=flt.start.isoformat() if flt.start else None,
        end_date=flt.end.isoformat() if flt.end else None,
        display_format="YYYY-MM-DD",
        clearable=True,
        className="mb-3",
    )


def _categorical_controls(
    dimension: Dimension,
    flt: CategoricalFilter,
    nodes: Sequence[Node],
) -> dcc.Dropdown:
    return dcc.Dropdown(
        id=filter_control_id(IDs.Pattern.CATEGORY_SELECT, dimension.id),
        options=category_options(dimension, nodes),
        value=sorted(flt.allowed),
        multi=True,
        placeholder="All values",
        className="mb-3",
    )


def build_filter_controls(
    dimension: Dimension,
    flt: Optional[Filter],
    nodes: Sequence[Node],
) -> html.Div:
    """
    Filter widget for one selected dimension, pre-filled from its active filter.
    Category options come from all loaded nodes so narrowing never hides choices.
    """
    if flt is None or flt.kind is not dimension.kind:
        flt = filter_for_kind(dimension.kind)

    if isinstance(flt, NumericFilter):
        control = _numeric_controls(dimension, flt)
    elif isinstance(flt, DatetimeFilter):
        control = _datetime_controls(dimension, flt)
    else:
        control = _categorical_controls(dimension, flt, nodes)

    return html.Div(
        [
            html.Label(f"Filter {dimension.display_name}", className="form-label"),
            control,
        ]
    )


def node_details(node: Optional[Node], dimensions: Sequence[Dimension]) -> html.Div:
    if node is None:
        return html.Div("No node selected", className="text-muted")

    def display(value) -> str:
        return "–" if is_missing(value) else to_label(value)

    return html.Div(
        [
            html.Div([html.Strong("Label: "), node.label]),
            html.Div([html.Strong("ID: "), node.id]),
            html.Div(html.Strong("Dimensions:"), className="mt-3"),
            html.Ul(
                [
                    html.Li(f"{d.name}: {display(node.value(d.id))}")
                    for d in dimensions
                ]
            ),
        ]
    )
