from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import dash
from dash import ALL, Input, Output, State, exceptions

from dim_explorer.core.exceptions import FilterKindError
from dim_explorer.core.explorer import Explorer
from dim_explorer.core.filters import (
    CategoricalFilter,
    DatetimeFilter,
    NumericFilter,
    update_datetime_filter,
    update_numeric_filter,
)
from dim_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from dim_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _values_by_dimension(entries: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Map pattern-matching inputs ({"id": {"index": dim_id}, "value": ...}) to {dim_id: value}."""
    return {e["id"]["index"]: e.get("value") for e in entries or []}


def _apply_dimension_toggles(explorer: Explorer, checked: Optional[List[str]]) -> None:
    checked = list(checked or [])
    selected = list(explorer.state.selected_dimension_ids)

    removed = [d for d in selected if d not in checked]
    added = [d for d in checked if d not in selected]

    for dim_id in removed + added:
        explorer.toggle_dimension(dim_id)


def _apply_filter_change(explorer: Explorer, triggered: Dict[str, Any], inputs: Dict[str, Dict[str, Any]]) -> None:
    dim_id = triggered["index"]
    kind = triggered["type"]
    previous = explorer.state.filter_for(dim_id)

    if kind in (IDs.Pattern.NUMERIC_MIN, IDs.Pattern.NUMERIC_MAX):
        flt = update_numeric_filter(
            previous if isinstance(previous, NumericFilter) else None,
            inputs["num_min"].get(dim_id),
            inputs["num_max"].get(dim_id),
        )
    elif kind == IDs.Pattern.DATE_RANGE:
        flt = update_datetime_filter(
            previous if isinstance(previous, DatetimeFilter) else None,
            inputs["date_start"].get(dim_id),
            inputs["date_end"].get(dim_id),
        )
    elif kind == IDs.Pattern.CATEGORY_SELECT:
        flt = CategoricalFilter(allowed=frozenset(inputs["categories"].get(dim_id) or []))
    else:
        raise exceptions.PreventUpdate

    explorer.set_filter(dim_id, flt)


def _clicked_node_id(click_data: Optional[Dict[str, Any]]) -> Optional[str]:
    if not click_data:
        return None
    points = click_data.get("points") or []
    if not points:
        return None
    custom = points[0].get("customdata")
    if isinstance(custom, (list, tuple)):
        custom = custom[0] if custom else None
    return str(custom) if custom is not None else None


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Single write path: UI events -> Explorer -> selection store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SELECTION_STATE, "data"),
        Output(IDs.Control.DIMENSION_CHECKLIST, "value"),
        Input(IDs.Control.DIMENSION_CHECKLIST, "value"),
        Input(IDs.Control.MAIN_GRAPH, "clickData"),
        Input({"type": IDs.Pattern.NUMERIC_MIN, "index": ALL}, "value"),
        Input({"type": IDs.Pattern.NUMERIC_MAX, "index": ALL}, "value"),
        Input({"type": IDs.Pattern.DATE_RANGE, "index": ALL}, "start_date"),
        Input({"type": IDs.Pattern.DATE_RANGE, "index": ALL}, "end_date"),
        Input({"type": IDs.Pattern.CATEGORY_SELECT, "index": ALL}, "value"),
        State(IDs.Store.SELECTION_STATE, "data"),
        prevent_initial_call=True,
    )
    def sync_selection(checked, click_data, _num_min, _num_max, _date_start, _date_end, _categories, store_data):
        triggered = dash.ctx.triggered_id
        if triggered is None:
            raise exceptions.PreventUpdate

        explorer = ctx.explorer(store_data)

        if triggered == IDs.Control.DIMENSION_CHECKLIST:
            _apply_dimension_toggles(explorer, checked)

        elif triggered == IDs.Control.MAIN_GRAPH:
            node_id = _clicked_node_id(click_data)
            if node_id is None:
                raise exceptions.PreventUpdate
            explorer.select_node(node_id)

        elif isinstance(triggered, dict):
            inputs_list = dash.ctx.inputs_list
            inputs = {
                "num_min": _values_by_dimension(inputs_list[2]),
                "num_max": _values_by_dimension(inputs_list[3]),
                "date_start": _values_by_dimension(inputs_list[4]),
                "date_end": _values_by_dimension(inputs_list[5]),
                "categories": _values_by_dimension(inputs_list[6]),
            }
            try:
                _apply_filter_change(explorer, triggered, inputs)
            except FilterKindError:
                logger.warning("Rejected filter update", exc_info=True, extra={"control": triggered})
                raise exceptions.PreventUpdate

        state = explorer.state
        logger.info(
            "selection_updated",
            extra={
                "trigger": str(triggered),
                "selected_dimensions": list(state.selected_dimension_ids),
                "n_filters": len(state.filters),
                "selected_node_id": state.selected_node_id,
                "selection_blocked": state.selection_blocked,
            },
        )
        return state.to_dict(), list(state.selected_dimension_ids)
