from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

# Raw attribute value as found in the data document
Value = Union[float, int, str, None]


class DimensionKind(str, Enum):
    NUMERIC = "numeric"
    DATETIME = "datetime"
    CATEGORICAL = "categorical"

    @classmethod
    def parse(cls, raw: Any) -> Optional[DimensionKind]:
        """Return the matching kind, or None for anything unrecognised."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Dimension:
    """
    A named, typed attribute along which nodes can be filtered and plotted.

    Fields:

    - id: unique across the dimension catalog, used as the attribute key on nodes
    - name: human-readable name for the UI
    - kind: numeric, datetime or categorical
    """
    id: str
    name: str
    kind: DimensionKind

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.kind.value})"

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "kind": self.kind.value}


@dataclass(frozen=True)
class Node:
    """
    A single record: id, display label and raw attribute values keyed by dimension id.

    Attribute values are kept exactly as loaded; interpretation happens in
    dim_explorer.core.coercion according to the dimension kind.
    """
    id: str
    label: str
    attributes: Mapping[str, Value] = field(default_factory=dict)

    def value(self, dimension_id: str) -> Value:
        return self.attributes.get(dimension_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "label": self.label, "dimensions": dict(self.attributes)}
