from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from dim_explorer.config.loader import load_data_file, load_global_config
from dim_explorer.ui.callbacks.callbacks_filters import register_filter_callbacks
from dim_explorer.ui.callbacks.callbacks_render import register_render_callbacks
from dim_explorer.ui.callbacks.callbacks_sync import register_sync_callbacks
from dim_explorer.ui.layout.build_layout import build_layout
from dim_explorer.views.view_registry import ViewRegistry

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from dim_explorer.views import ListView, ScatterView

    registry = ViewRegistry()
    registry.register(ListView)
    registry.register(ScatterView)
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load nodes + dimensions (the only external data event)
    data = load_data_file(global_config.data_file)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        data=data,
        registry=_build_view_registry(),
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
        suppress_callback_exceptions=True,
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_sync_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_nodes": len(data.nodes), "n_dimensions": len(data.dimensions)},
    )
    return app
