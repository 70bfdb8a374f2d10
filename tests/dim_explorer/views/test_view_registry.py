import pytest

from dim_explorer.core.explorer import Explorer
from dim_explorer.core.model import Dimension, DimensionKind, Node
from dim_explorer.views import ListView, ScatterView, ViewRegistry


def _registry() -> ViewRegistry:
    registry = ViewRegistry()
    registry.register(ListView)
    registry.register(ScatterView)
    return registry


def _explorer(*selected: str) -> Explorer:
    dims = [Dimension(d, d.upper(), DimensionKind.NUMERIC) for d in ("a", "b")]
    explorer = Explorer([Node("n1", "N1", {"a": 1, "b": 2})], dims)
    for dim_id in selected:
        explorer.toggle_dimension(dim_id)
    return explorer


def test_for_selection_picks_view_by_dimension_count():
    registry = _registry()

    assert registry.for_selection(_explorer()) is None
    assert isinstance(registry.for_selection(_explorer("a")), ListView)
    assert isinstance(registry.for_selection(_explorer("a", "b")), ScatterView)


def test_register_rejects_duplicates_and_non_views():
    registry = _registry()

    with pytest.raises(ValueError):
        registry.register(ListView)

    with pytest.raises(TypeError):
        registry.register(object)


def test_create_unknown_view_raises_key_error():
    with pytest.raises(KeyError):
        _registry().create("heatmap", _explorer())
