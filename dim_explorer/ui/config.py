from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from dim_explorer.config.model import GlobalConfig, LoadedData
from dim_explorer.core.explorer import Explorer
from dim_explorer.core.selection import SelectionState
from dim_explorer.views.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Holds shared, read-only state for the Dash app: config, loaded data and
    the view registry. This is passed into layout + callback registration
    functions instead of using module-level globals.

    Per-user selection state lives in the browser store, never here.
    """
    config_root: Path
    global_config: GlobalConfig
    data: LoadedData = field(default_factory=LoadedData)
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")

    def explorer(self, store_data: Optional[Dict[str, Any]]) -> Explorer:
        """Rebuild the session controller from the serialised selection in the store."""
        return Explorer(
            self.data.nodes,
            self.data.dimensions,
            SelectionState.from_dict(store_data),
        )
