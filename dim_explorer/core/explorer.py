from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .axis import Axis, build_axis
from .exceptions import FilterKindError
from .filters import Filter, filter_nodes
from . import selection as sel
from .model import Dimension, Node
from .selection import SelectionState

logger = logging.getLogger(__name__)


class Explorer:
    """
    Single controller for one exploration session.

    Includes:
    - Read-only node and dimension catalogs (as loaded)
    - The current SelectionState; the mutation methods are the only write path
    - Memoised filtered node set and per-dimension axes

    After every mutation the selected node is re-derived from the filtered
    set (see selection.reconcile).
    """

    MAX_FILTER_CACHE = 64
    MAX_AXIS_CACHE = 64

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(
        self,
        nodes: Sequence[Node],
        dimensions: Sequence[Dimension],
        state: Optional[SelectionState] = None,
    ) -> None:
        self._nodes: Tuple[Node, ...] = tuple(nodes)
        self._dimensions: Tuple[Dimension, ...] = tuple(dimensions)
        self._dimension_by_id: Dict[str, Dimension] = {d.id: d for d in self._dimensions}
        self._node_by_id: Dict[str, Node] = {n.id: n for n in self._nodes}

        # Cache of filtered node lists, keyed by SelectionState.cache_key()
        self._filter_cache: Dict[tuple, List[Node]] = {}
        # Cache of axes, keyed by (dimension id, filtered node ids)
        self._axis_cache: Dict[Tuple[str, Tuple[str, ...]], Axis] = {}

        self._state = self._reconciled(state or SelectionState())

    # -------------------------------------------------------------------------
    # Read-only accessors
    # -------------------------------------------------------------------------
    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def dimensions(self) -> Tuple[Dimension, ...]:
        return self._dimensions

    def dimension(self, dimension_id: str) -> Optional[Dimension]:
        """None when the id has no matching dimension; callers degrade to 'not available'."""
        return self._dimension_by_id.get(dimension_id)

    def node(self, node_id: Optional[str]) -> Optional[Node]:
        if node_id is None:
            return None
        return self._node_by_id.get(node_id)

    def selected_dimensions(self) -> List[Optional[Dimension]]:
        return [self.dimension(d) for d in self._state.selected_dimension_ids]

    def selected_node(self) -> Optional[Node]:
        return self.node(self._state.selected_node_id)

    # -------------------------------------------------------------------------
    # Memoised recomputation
    # -------------------------------------------------------------------------
    def _filtered_for(self, state: SelectionState) -> List[Node]:
        key = state.cache_key()
        cached = self._filter_cache.get(key)
        if cached is not None:
            return cached

        result = filter_nodes(self._nodes, state.filters, state.selected_dimension_ids)

        if len(self._filter_cache) >= self.MAX_FILTER_CACHE:
            self._filter_cache.clear()
        self._filter_cache[key] = result

        logger.debug(
            "Filtered nodes",
            extra={"n_nodes": len(self._nodes), "n_filtered": len(result), "n_filters": len(state.filters)},
        )
        return result

    def filtered_nodes(self) -> List[Node]:
        return list(self._filtered_for(self._state))

    def axis(self, dimension_id: str) -> Optional[Axis]:
        """Axis for a dimension over the current filtered set, or None if the dimension is unknown."""
        dimension = self.dimension(dimension_id)
        if dimension is None:
            return None

        filtered = self._filtered_for(self._state)
        key = (dimension_id, tuple(n.id for n in filtered))
        cached = self._axis_cache.get(key)
        if cached is not None:
            return cached

        axis = build_axis(dimension, filtered)
        if len(self._axis_cache) >= self.MAX_AXIS_CACHE:
            self._axis_cache.clear()
        self._axis_cache[key] = axis
        return axis

    def selected_axes(self) -> List[Optional[Axis]]:
        return [self.axis(d) for d in self._state.selected_dimension_ids]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def _reconciled(self, state: SelectionState) -> SelectionState:
        return sel.reconcile(state, self._filtered_for(state))

    def _apply(self, state: SelectionState) -> SelectionState:
        self._state = self._reconciled(state)
        return self._state

    def toggle_dimension(self, dimension_id: str) -> bool:
        """
        Toggle a dimension in the selection.

        :return: False if the toggle was blocked (two dimensions already selected)
        """
        state = self._apply(sel.toggle_dimension(self._state, dimension_id))
        return not state.selection_blocked

    def set_filter(self, dimension_id: str, flt: Optional[Filter]) -> SelectionState:
        """
        Set (or with None, clear) the filter of a selected dimension.

        Raises:
            FilterKindError: if the filter variant does not match the dimension kind
        """
        dimension = self.dimension(dimension_id)
        if flt is not None and dimension is not None and flt.kind is not dimension.kind:
            raise FilterKindError(
                f"Cannot apply a {flt.kind.value} filter to "
                f"{dimension.kind.value} dimension '{dimension_id}'"
            )
        return self._apply(sel.set_filter(self._state, dimension_id, flt))

    def clear_filter(self, dimension_id: str) -> SelectionState:
        return self._apply(sel.clear_filter(self._state, dimension_id))

    def select_node(self, node_id: Optional[str]) -> SelectionState:
        return self._apply(sel.select_node(self._state, node_id))
