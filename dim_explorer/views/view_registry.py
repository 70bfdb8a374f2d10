from __future__ import annotations

from typing import Dict, Optional, Type

from dim_explorer.core.axis import PlotFrame
from dim_explorer.core.explorer import Explorer
from .base_view import BaseView


class ViewRegistry:
    """
    Registry for view classes so the app can pick the layout for the current selection

    Purpose:
    - Decouples UI/Dash layer from hardcoded view implementations by exposing {@link create(view_id, explorer)}
    - Maps the number of selected dimensions to the view that lays them out (1 -> list, 2 -> scatter)

    Design Notes:
    - Stores the subclasses of {@link BaseView}, not instances, so that each view can be instantiated on demand
    - Enforces variants:
        * only {@link BaseView} subclasses can be registered
        * each view 'id' is unique across the registry
        * at most one view per dimension count
    """

    def __init__(self):
        self._views: Dict[str, Type[BaseView]] = {}
        self._by_dimensions: Dict[int, Type[BaseView]] = {}

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        Register a {@link BaseView} with the registry

        :param view_cls: the subclass of {@link BaseView}

        Raises:
            TypeError: if view_cls is not a subclass of {@link BaseView}
            ValueError: if a view with same 'id' or dimension count already exists
        """
        if not isinstance(view_cls, type) or not issubclass(view_cls, BaseView):
            raise TypeError(f"View '{getattr(view_cls, 'id', view_cls)}' must be a subclass of BaseView")

        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        if view_cls.n_dimensions in self._by_dimensions:
            raise ValueError(
                f"A view for {view_cls.n_dimensions} dimension(s) is already registered: "
                f"'{self._by_dimensions[view_cls.n_dimensions].id}'"
            )

        self._views[view_cls.id] = view_cls
        self._by_dimensions[view_cls.n_dimensions] = view_cls

    def create(self, view_id: str, explorer: Explorer, frame: PlotFrame | None = None) -> BaseView:
        """
        Instantiate a view for the given view_id.

        Raises:
            KeyError: if no view with the given id exists in the registry
        """
        try:
            cls = self._views[view_id]
        except KeyError:
            raise KeyError(f"View '{view_id}' not found")
        return cls(explorer, frame)

    def for_selection(self, explorer: Explorer, frame: PlotFrame | None = None) -> Optional[BaseView]:
        """
        The view matching the number of selected dimensions, or None (nothing selected).
        """
        n = len(explorer.state.selected_dimension_ids)
        cls = self._by_dimensions.get(n)
        return cls(explorer, frame) if cls is not None else None
