from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Union

from .coercion import day_start, to_label, to_number, to_timestamp
from .model import DimensionKind, Node, Value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumericFilter:
    """Inclusive numeric bounds; None means unbounded on that side."""
    min: Optional[float] = None
    max: Optional[float] = None

    kind = DimensionKind.NUMERIC

    @property
    def is_noop(self) -> bool:
        return self.min is None and self.max is None


@dataclass(frozen=True)
class DatetimeFilter:
    """Inclusive date range at day resolution; None means unbounded on that side."""
    start: Optional[date] = None
    end: Optional[date] = None

    kind = DimensionKind.DATETIME

    @property
    def is_noop(self) -> bool:
        return self.start is None and self.end is None


@dataclass(frozen=True)
class CategoricalFilter:
    """
    Set of accepted display labels (see coercion.to_label), including the
    "(no value)" sentinel. An empty set imposes no constraint.
    """
    allowed: FrozenSet[str] = field(default_factory=frozenset)

    kind = DimensionKind.CATEGORICAL

    @property
    def is_noop(self) -> bool:
        return not self.allowed


Filter = Union[NumericFilter, DatetimeFilter, CategoricalFilter]


def _within(value: Optional[float], lower: Optional[float], upper: Optional[float]) -> bool:
    # A set bound is never satisfied by a missing value
    if lower is not None and (value is None or value < lower):
        return False
    if upper is not None and (value is None or value > upper):
        return False
    return True


def matches(value: Value, flt: Filter) -> bool:
    """Return True if a raw attribute value satisfies the filter."""
    if isinstance(flt, NumericFilter):
        return _within(to_number(value), flt.min, flt.max)

    if isinstance(flt, DatetimeFilter):
        ts = to_timestamp(value)
        return _within(
            day_start(ts) if ts is not None else None,
            to_timestamp(flt.start) if flt.start is not None else None,
            to_timestamp(flt.end) if flt.end is not None else None,
        )

    if isinstance(flt, CategoricalFilter):
        if not flt.allowed:
            return True
        return to_label(value) in flt.allowed

    raise TypeError(f"Unsupported filter type: {type(flt).__name__}")


def filter_nodes(
    nodes: Iterable[Node],
    filters: Mapping[str, Filter],
    selected_dimension_ids: Sequence[str],
) -> List[Node]:
    """
    Stable filter: keep nodes that satisfy every active filter.

    Only filters keyed to a selected dimension are evaluated; anything else
    in `filters` is ignored.
    """
    active = [
        (dim_id, filters[dim_id])
        for dim_id in selected_dimension_ids
        if dim_id in filters
    ]
    if not active:
        return list(nodes)

    return [
        node
        for node in nodes
        if all(matches(node.value(dim_id), flt) for dim_id, flt in active)
    ]


# -----------------------------------------------------------------------------
# Construction helpers
# -----------------------------------------------------------------------------
def filter_for_kind(kind: DimensionKind) -> Filter:
    """The empty (no constraint) filter for a dimension kind."""
    if kind is DimensionKind.NUMERIC:
        return NumericFilter()
    if kind is DimensionKind.DATETIME:
        return DatetimeFilter()
    if kind is DimensionKind.CATEGORICAL:
        return CategoricalFilter()
    raise TypeError(f"Unsupported dimension kind: {kind!r}")


def _is_blank(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and raw.strip() == "")


def _parse_date(raw: Any) -> Optional[date]:
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return date.fromisoformat(raw.strip()[:10])
    except ValueError:
        return None


def update_numeric_filter(
    previous: Optional[NumericFilter],
    raw_min: Any,
    raw_max: Any,
) -> NumericFilter:
    """
    Build a NumericFilter from raw user input.

    - blank input clears that bound
    - unparsable input is ignored and the previous bound is kept
    """
    previous = previous or NumericFilter()

    def bound(raw: Any, old: Optional[float], side: str) -> Optional[float]:
        if _is_blank(raw):
            return None
        number = to_number(raw)
        if number is None:
            logger.debug("Ignoring invalid numeric %s bound %r", side, raw)
            return old
        return number

    return NumericFilter(
        min=bound(raw_min, previous.min, "min"),
        max=bound(raw_max, previous.max, "max"),
    )


def update_datetime_filter(
    previous: Optional[DatetimeFilter],
    raw_start: Any,
    raw_end: Any,
) -> DatetimeFilter:
    """Same policy as update_numeric_filter, for 'YYYY-MM-DD' inputs."""
    previous = previous or DatetimeFilter()

    def bound(raw: Any, old: Optional[date], side: str) -> Optional[date]:
        if _is_blank(raw):
            return None
        parsed = _parse_date(raw)
        if parsed is None:
            logger.debug("Ignoring invalid date %s bound %r", side, raw)
            return old
        return parsed

    return DatetimeFilter(
        start=bound(raw_start, previous.start, "start"),
        end=bound(raw_end, previous.end, "end"),
    )


# -----------------------------------------------------------------------------
# Serialisation (tagged dicts, used by the Dash store)
# -----------------------------------------------------------------------------
def filter_to_dict(flt: Filter) -> Dict[str, Any]:
    if isinstance(flt, NumericFilter):
        return {"kind": flt.kind.value, "min": flt.min, "max": flt.max}
    if isinstance(flt, DatetimeFilter):
        return {
            "kind": flt.kind.value,
            "start": flt.start.isoformat() if flt.start else None,
            "end": flt.end.isoformat() if flt.end else None,
        }
    if isinstance(flt, CategoricalFilter):
        return {"kind": flt.kind.value, "allowed": sorted(flt.allowed)}
    raise TypeError(f"Unsupported filter type: {type(flt).__name__}")


def filter_from_dict(data: Dict[str, Any]) -> Filter:
    """
    Rebuild a filter from its tagged dict.

    :raises ValueError: if the "kind" tag is missing or unknown
    """
    kind = DimensionKind.parse(data.get("kind"))
    if kind is DimensionKind.NUMERIC:
        return NumericFilter(min=to_number(data.get("min")), max=to_number(data.get("max")))
    if kind is DimensionKind.DATETIME:
        return DatetimeFilter(start=_parse_date(data.get("start")), end=_parse_date(data.get("end")))
    if kind is DimensionKind.CATEGORICAL:
        return CategoricalFilter(allowed=frozenset(str(v) for v in data.get("allowed") or []))
    raise ValueError(f"Unknown filter kind: {data.get('kind')!r}")
