"""Callbacks that re-derive and render both linked views from app-state."""
from typing import Optional

from dash import Input, Output

from analysis.labels import line_chart_title, treemap_title
from analysis.render_model import build_render_model
from config import DashboardConfig, get_dashboard_config
from core.logging_config import get_logger
from core.models import Dataset, SelectionState
from dash_app.components.chart_card import RESET_HIDDEN, RESET_VISIBLE
from dash_app.components.legend import build_legend_items
from visualization.plotly_generator import create_line_figure, create_treemap_figure, empty_figure

log = get_logger(__name__)


def render_views(app_state: Optional[dict], dataset: Dataset, config: Optional[DashboardConfig] = None) -> tuple:
    """Build every output of the render callback for one state.

    Returns:
        (treemap figure, treemap title, line figure, line title,
         reset button style, legend children)
    """
    config = config or get_dashboard_config()
    state = SelectionState.from_dict(app_state)

    try:
        model = build_render_model(
            dataset,
            state,
            line_dims=config.line_chart.dimensions,
            treemap_dims=config.treemap.dimensions,
            year_range=config.data.year_range,
        )
    except Exception:
        log.exception("Failed to build render model for %s", state)
        message = "Failed to render this view. Check logs for details."
        return (
            empty_figure(message),
            treemap_title(state),
            empty_figure(message),
            line_chart_title(state, config.data.year_range),
            RESET_VISIBLE if state.is_drilldown else RESET_HIDDEN,
            [],
        )

    return (
        create_treemap_figure(model),
        model.treemap_title,
        create_line_figure(model),
        model.line_title,
        RESET_VISIBLE if model.can_reset else RESET_HIDDEN,
        build_legend_items(model),
    )


def register_chart_callbacks(app):
    """Register the render callback for treemap, line chart, titles and legend."""

    @app.callback(
        Output("treemap-chart", "figure"),
        Output("treemap-title", "children"),
        Output("line-chart", "figure"),
        Output("line-title", "children"),
        Output("reset-btn", "style"),
        Output("legend-items", "children"),
        Input("app-state", "data"),
    )
    def update_views(app_state):
        """Re-derive both views from scratch whenever the selection changes."""
        from dash_app.data.queries import get_dataset

        return render_views(app_state, get_dataset())
