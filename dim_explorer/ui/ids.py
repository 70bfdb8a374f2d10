from __future__ import annotations

__all__ = ["IDs", "filter_control_id"]


class IDs:
    class Store:
        SELECTION_STATE = "selection-state"
        RENDERED_FILTER_DIMS = "rendered-filter-dims"

    class Control:
        # Dimension selector
        DIMENSION_CHECKLIST = "dimension-checklist"

        # Filters
        FILTER_CONTAINER = "filter-container"

        # Sidebar metadata
        SIDEBAR_DATA_META = "sidebar-data-meta"

        # Graph + notices
        MAIN_GRAPH = "main-graph"
        SELECTION_NOTICE = "selection-notice"
        STATUS_BAR = "status-bar"

        # Node details
        NODE_DETAILS = "node-details"

    class Pattern:
        # pattern-matching "type" strings, "index" is the dimension id
        NUMERIC_MIN = "filter-numeric-min"
        NUMERIC_MAX = "filter-numeric-max"
        DATE_RANGE = "filter-date-range"
        CATEGORY_SELECT = "filter-category-select"


def filter_control_id(pattern_type: str, dimension_id: str) -> dict:
    return {"type": pattern_type, "index": dimension_id}
