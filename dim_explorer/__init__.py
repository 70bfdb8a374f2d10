"""
Top-level package for the dimension explorer.

This package exposes the core engine (coercion, filters, axes, selection),
the plotly views and the Dash UI adapters.
Most code should import from submodules such as:
    dim_explorer.core
    dim_explorer.views
    dim_explorer.ui
"""

__all__: list[str] = []
