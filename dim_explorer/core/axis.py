"""
Axis construction: map attribute values onto [0, 1] with tick marks.

An Axis is always computed over a concrete node set (normally the filtered
set), so its domain is exactly the values present in that set.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .coercion import format_date, format_number, to_label, to_number, to_timestamp
from .model import Dimension, DimensionKind, Node, Value

NEUTRAL = 0.5


@dataclass(frozen=True)
class Tick:
    label: str
    position: float


@dataclass(frozen=True)
class Axis:
    """
    Normalisation function plus tick marks for one dimension.

    - normalize: raw value -> position in [0, 1]
    - ticks: ordered tick marks (label, position)
    - categories: sorted category labels (categorical axes only)
    """
    dimension: Dimension
    normalize: Callable[[Value], float]
    ticks: Tuple[Tick, ...] = ()
    categories: Tuple[str, ...] = field(default=())


def _constant_axis(dimension: Dimension, label: Optional[str] = None) -> Axis:
    ticks = (Tick(label, NEUTRAL),) if label is not None else ()
    return Axis(dimension=dimension, normalize=lambda _value: NEUTRAL, ticks=ticks)


def _midpoint_label(value: float) -> str:
    if float(value).is_integer():
        return format_number(value)
    return format_number(round(value, 2))


def _continuous_axis(
    dimension: Dimension,
    values: List[float],
    coerce: Callable[[Value], Optional[float]],
    fmt: Callable[[float], str],
    mid_fmt: Callable[[float], str],
) -> Axis:
    if not values:
        return _constant_axis(dimension)

    lo, hi = min(values), max(values)
    if lo == hi:
        return _constant_axis(dimension, fmt(lo))

    span = hi - lo

    def normalize(value: Value) -> float:
        v = coerce(value)
        if v is None:
            return NEUTRAL
        return min(1.0, max(0.0, (v - lo) / span))

    mid = (lo + hi) / 2
    ticks = (
        Tick(fmt(lo), 0.0),
        Tick(mid_fmt(mid), 0.5),
        Tick(fmt(hi), 1.0),
    )
    return Axis(dimension=dimension, normalize=normalize, ticks=ticks)


def sort_categories(labels: Iterable[str]) -> List[str]:
    """Case-insensitive ordering; the raw string breaks ties deterministically."""
    return sorted(set(labels), key=lambda s: (s.casefold(), s))


def _categorical_axis(dimension: Dimension, nodes: Sequence[Node]) -> Axis:
    categories = sort_categories(to_label(n.value(dimension.id)) for n in nodes)

    if not categories:
        return _constant_axis(dimension)
    if len(categories) == 1:
        axis = _constant_axis(dimension, categories[0])
        return Axis(dimension, axis.normalize, axis.ticks, tuple(categories))

    last = len(categories) - 1
    positions: Dict[str, float] = {
        label: rank / last for rank, label in enumerate(categories)
    }

    def normalize(value: Value) -> float:
        return positions.get(to_label(value), NEUTRAL)

    ticks = tuple(Tick(label, positions[label]) for label in categories)
    return Axis(
        dimension=dimension,
        normalize=normalize,
        ticks=ticks,
        categories=tuple(categories),
    )


def build_axis(dimension: Dimension, nodes: Sequence[Node]) -> Axis:
    """Build the axis for `dimension` over `nodes`, specialised by dimension kind."""
    if dimension.kind is DimensionKind.NUMERIC:
        values = [v for v in (to_number(n.value(dimension.id)) for n in nodes) if v is not None]
        return _continuous_axis(dimension, values, to_number, format_number, _midpoint_label)

    if dimension.kind is DimensionKind.DATETIME:
        values = [v for v in (to_timestamp(n.value(dimension.id)) for n in nodes) if v is not None]
        return _continuous_axis(dimension, values, to_timestamp, format_date, format_date)

    if dimension.kind is DimensionKind.CATEGORICAL:
        return _categorical_axis(dimension, nodes)

    raise TypeError(f"Unsupported dimension kind: {dimension.kind!r}")


def order_nodes(nodes: Sequence[Node], axis: Axis) -> List[Node]:
    """1D ordering: by normalised value, then by node label."""
    dim_id = axis.dimension.id
    return sorted(
        nodes,
        key=lambda n: (axis.normalize(n.value(dim_id)), n.label.casefold()),
    )


@dataclass(frozen=True)
class PlotFrame:
    """
    Pixel canvas for the 2D view. Origin is top-left, so Y is inverted:
    larger normalised values plot higher.
    """
    width: float = 640.0
    height: float = 480.0
    pad: float = 40.0

    @property
    def inner_width(self) -> float:
        return self.width - 2 * self.pad

    @property
    def inner_height(self) -> float:
        return self.height - 2 * self.pad

    def project(self, norm_x: float, norm_y: float) -> Tuple[float, float]:
        x = self.pad + norm_x * self.inner_width
        y = self.height - self.pad - norm_y * self.inner_height
        return x, y
