from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, List

import plotly.graph_objs as go

from dim_explorer.core.axis import PlotFrame
from dim_explorer.core.exceptions import DimensionNotFoundError
from dim_explorer.core.explorer import Explorer
from dim_explorer.core.model import Dimension

logger = logging.getLogger(__name__)

SELECTED_COLOUR = "#e74c3c"
DEFAULT_COLOUR = "#2c3e50"


class BaseView(ABC):
    """
    Abstract base class for all plot views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - expose 'n_dimensions' - how many selected dimensions the view lays out
    - implement 'compute_data' - used to compute the data for the Explorer's current selection
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None
    n_dimensions: int = 0

    def __init__(self, explorer: Explorer, frame: PlotFrame | None = None):
        self.explorer = explorer
        # Canvas geometry; only views that project to pixels use it
        self.frame = frame or PlotFrame()

    @abstractmethod
    def compute_data(self) -> Any:
        """
        Compute the data for the current selection of the {@link Explorer}
        :return: data: a dataframe with one row per visible node
        :raises DimensionNotFoundError: if a selected dimension is not in the catalog
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :return: the Plotly figure
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def timed_compute(self) -> Any:
        """compute_data() with its duration logged."""
        start = time.perf_counter()
        data = self.compute_data()
        logger.info(
            "compute_data_done",
            extra={
                "view_id": self.id,
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                "n_rows": len(data) if data is not None else 0,
            },
        )
        return data

    def selected_dimensions(self) -> List[Dimension]:
        """
        The dimensions this view lays out, in selection order.
        """
        ids = self.explorer.state.selected_dimension_ids[: self.n_dimensions]
        dimensions: List[Dimension] = []
        for dim_id in ids:
            dimension = self.explorer.dimension(dim_id)
            if dimension is None:
                raise DimensionNotFoundError(dim_id)
            dimensions.append(dimension)
        return dimensions

    @staticmethod
    def marker_colours(node_ids: List[str], selected_id: str | None) -> List[str]:
        return [SELECTED_COLOUR if nid == selected_id else DEFAULT_COLOUR for nid in node_ids]

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
