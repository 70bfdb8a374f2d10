from .base_view import BaseView
from .list_view import ListView
from .scatter_view import ScatterView
from .view_registry import ViewRegistry

__all__ = ["BaseView", "ListView", "ScatterView", "ViewRegistry"]
