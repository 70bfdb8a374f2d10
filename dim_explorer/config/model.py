from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from dim_explorer.core.axis import PlotFrame
from dim_explorer.core.model import Dimension, Node


@dataclass(frozen=True)
class PlotConfig:
    """
    Canvas geometry for the 2D view (pixels).
    """
    width: float = 640.0
    height: float = 480.0
    pad: float = 40.0

    @classmethod
    def from_raw(cls, raw: Dict[str, Any] | None) -> PlotConfig:
        raw = raw or {}
        return cls(
            width=float(raw.get("width", cls.width)),
            height=float(raw.get("height", cls.height)),
            pad=float(raw.get("pad", cls.pad)),
        )

    def frame(self) -> PlotFrame:
        return PlotFrame(width=self.width, height=self.height, pad=self.pad)


@dataclass
class GlobalConfig:
    ui_title: str
    subtitle: str
    data_file: Path
    plot: PlotConfig = field(default_factory=PlotConfig)


@dataclass
class LoadedData:
    """
    Result of loading the data document: immutable node and dimension catalogs.
    """
    nodes: List[Node] = field(default_factory=list)
    dimensions: List[Dimension] = field(default_factory=list)
