"""
Core domain layer: data model, value coercion, filters, axes, selection
state and the Explorer controller
"""

from .axis import Axis, PlotFrame, Tick, build_axis, order_nodes
from .coercion import MISSING_LABEL, to_label, to_number, to_timestamp
from .explorer import Explorer
from .filters import (
    CategoricalFilter,
    DatetimeFilter,
    Filter,
    NumericFilter,
    filter_nodes,
    matches,
)
from .model import Dimension, DimensionKind, Node
from .selection import SelectionState

__all__ = [
    "Axis",
    "PlotFrame",
    "Tick",
    "build_axis",
    "order_nodes",
    "MISSING_LABEL",
    "to_label",
    "to_number",
    "to_timestamp",
    "Explorer",
    "CategoricalFilter",
    "DatetimeFilter",
    "Filter",
    "NumericFilter",
    "filter_nodes",
    "matches",
    "Dimension",
    "DimensionKind",
    "Node",
    "SelectionState",
]
