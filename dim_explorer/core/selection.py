from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .filters import Filter, filter_from_dict, filter_to_dict
from .model import Node

logger = logging.getLogger(__name__)

MAX_SELECTED_DIMENSIONS = 2


@dataclass(frozen=True)
class SelectionState:
    """
    Represents the current user selection.

    Fields:

    - selected_dimension_ids: up to two dimension ids, in selection order (X then Y)
    - selected_node_id: the node shown in the details panel, or None
    - filters: active filters keyed by dimension id; only selected dimensions may carry one
    - selection_blocked: advisory flag raised when a third dimension was requested,
      cleared by the next successful toggle

    Instances are immutable; the transition functions below return new states.
    """

    selected_dimension_ids: Tuple[str, ...] = ()
    selected_node_id: Optional[str] = None
    filters: Mapping[str, Filter] = field(default_factory=dict)
    selection_blocked: bool = False

    def filter_for(self, dimension_id: str) -> Optional[Filter]:
        return self.filters.get(dimension_id)

    def cache_key(self) -> Tuple[Tuple[str, ...], Tuple[Tuple[str, Filter], ...]]:
        """Hashable key of everything that determines the filtered node set."""
        return (
            self.selected_dimension_ids,
            tuple(sorted(self.filters.items(), key=lambda item: item[0])),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selected_dimension_ids": list(self.selected_dimension_ids),
            "selected_node_id": self.selected_node_id,
            "filters": {k: filter_to_dict(v) for k, v in self.filters.items()},
            "selection_blocked": self.selection_blocked,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> SelectionState:
        if not data:
            return cls()

        selected = tuple(dict.fromkeys(str(d) for d in data.get("selected_dimension_ids") or []))
        selected = selected[:MAX_SELECTED_DIMENSIONS]

        filters: Dict[str, Filter] = {}
        for dim_id, raw in (data.get("filters") or {}).items():
            if dim_id not in selected:
                continue
            try:
                flt = filter_from_dict(raw)
            except (ValueError, AttributeError):
                logger.warning("Dropping malformed filter", extra={"dimension_id": dim_id, "filter": raw})
                continue
            if not flt.is_noop:
                filters[dim_id] = flt

        return cls(
            selected_dimension_ids=selected,
            selected_node_id=data.get("selected_node_id"),
            filters=filters,
            selection_blocked=bool(data.get("selection_blocked", False)),
        )


# -----------------------------------------------------------------------------
# Transitions
# -----------------------------------------------------------------------------
def toggle_dimension(state: SelectionState, dimension_id: str) -> SelectionState:
    """
    Add or remove a dimension.

    - already selected: removed together with its filter
    - not selected, fewer than two selected: appended
    - not selected, two already selected: unchanged, selection_blocked raised
    """
    if dimension_id in state.selected_dimension_ids:
        return replace(
            state,
            selected_dimension_ids=tuple(d for d in state.selected_dimension_ids if d != dimension_id),
            filters={k: v for k, v in state.filters.items() if k != dimension_id},
            selection_blocked=False,
        )

    if len(state.selected_dimension_ids) >= MAX_SELECTED_DIMENSIONS:
        logger.info(
            "Dimension selection blocked",
            extra={"dimension_id": dimension_id, "selected": list(state.selected_dimension_ids)},
        )
        return replace(state, selection_blocked=True)

    return replace(
        state,
        selected_dimension_ids=state.selected_dimension_ids + (dimension_id,),
        selection_blocked=False,
    )


def set_filter(state: SelectionState, dimension_id: str, flt: Optional[Filter]) -> SelectionState:
    """
    Set or clear the filter of a selected dimension.

    A filter with no constraint is stored as "no filter". Requests for
    dimensions outside the selection are ignored.
    """
    if dimension_id not in state.selected_dimension_ids:
        logger.debug("Ignoring filter for unselected dimension", extra={"dimension_id": dimension_id})
        return state

    filters = {k: v for k, v in state.filters.items() if k != dimension_id}
    if flt is not None and not flt.is_noop:
        filters[dimension_id] = flt
    return replace(state, filters=filters)


def clear_filter(state: SelectionState, dimension_id: str) -> SelectionState:
    return set_filter(state, dimension_id, None)


def select_node(state: SelectionState, node_id: Optional[str]) -> SelectionState:
    return replace(state, selected_node_id=node_id)


def reconcile(state: SelectionState, filtered_nodes: Sequence[Node]) -> SelectionState:
    """Keep selected_node_id pointing at a visible node (or None if nothing is visible)."""
    if not filtered_nodes:
        if state.selected_node_id is None:
            return state
        return replace(state, selected_node_id=None)

    if any(n.id == state.selected_node_id for n in filtered_nodes):
        return state
    return replace(state, selected_node_id=filtered_nodes[0].id)
