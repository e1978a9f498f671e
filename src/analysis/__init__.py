"""
Analysis package for the linked treemap / line chart views.

- selection: Selection state machine (type, metric, drill-down item)
- labels: Titles, value formatting and legend descriptions
- render_model: Full per-state derivation consumed by the figure builders
"""

from analysis.labels import (
    category_description,
    format_value,
    line_chart_title,
    treemap_title,
)
from analysis.render_model import RenderModel, build_render_model
from analysis.selection import (
    ChangeMetric,
    ChangeType,
    Reset,
    SelectCategory,
    SelectionAction,
    SelectionStateMachine,
    categories_from,
)

__all__ = [
    # Labels
    "category_description",
    "format_value",
    "line_chart_title",
    "treemap_title",
    # Render model
    "RenderModel",
    "build_render_model",
    # Selection state machine
    "ChangeMetric",
    "ChangeType",
    "Reset",
    "SelectCategory",
    "SelectionAction",
    "SelectionStateMachine",
    "categories_from",
]
