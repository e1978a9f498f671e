"""
Plotly chart generation for the maternal mortality dashboard.

Builds the two linked views from a RenderModel:
- a treemap of the current (record type, metric) category breakdown
- a line chart of the averaged or drilled-down yearly trend
"""

from typing import Optional

import plotly.graph_objects as go

from analysis.labels import hover_value_format, short_label
from analysis.render_model import RenderModel
from core.logging_config import get_logger
from core.models import Metric
from visualization.scales import LINE_COLOR, ChartDimensions

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Shared styling constants
# ---------------------------------------------------------------------------

CHART_FONT_FAMILY = "Source Sans 3, system-ui, sans-serif"
CHART_TITLE_SIZE = 16
CHART_TITLE_COLOR = "#1E293B"
GRID_COLOR = "#E2E8F0"
ANNOTATION_COLOR = "#768692"

# Half a year either side keeps the end markers inside the plot area
X_RANGE_PADDING_YEARS = 0.5


def _base_layout(title: str = "", **overrides) -> dict:
    """Return a dict of shared Plotly layout properties.

    Args:
        title: Display title for the chart (the dashboard shows titles in
            the card header, so this is usually empty).
        **overrides: Any key accepted by ``fig.update_layout()``; merged on
            top of the base dict.

    Returns:
        Dict ready to be unpacked into ``fig.update_layout(**layout)``.
    """
    layout = dict(
        hoverlabel=dict(
            bgcolor="#FFFFFF",
            bordercolor="#CCCCCC",
            font=dict(
                family=CHART_FONT_FAMILY,
                size=12,
                color=CHART_TITLE_COLOR,
            ),
        ),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        autosize=True,
        font=dict(family=CHART_FONT_FAMILY),
    )
    if title:
        layout["title"] = dict(
            text=title,
            font=dict(family=CHART_FONT_FAMILY, size=CHART_TITLE_SIZE, color=CHART_TITLE_COLOR),
            x=0.5,
            xanchor="center",
        )
    layout.update(overrides)
    return layout


def _margin(dims: ChartDimensions) -> dict:
    m = dims.margins
    return dict(t=m.top, r=m.right, b=m.bottom, l=m.left)


def empty_figure(message: str, height: Optional[int] = None) -> go.Figure:
    """Return a blank figure with a centered message annotation."""
    fig = go.Figure()
    layout = _base_layout(
        xaxis={"visible": False},
        yaxis={"visible": False},
        margin={"t": 0, "l": 0, "r": 0, "b": 0},
        annotations=[
            {
                "text": message,
                "xref": "paper",
                "yref": "paper",
                "x": 0.5,
                "y": 0.5,
                "showarrow": False,
                "font": {"size": 14, "color": ANNOTATION_COLOR, "family": CHART_FONT_FAMILY},
                "xanchor": "center",
                "yanchor": "middle",
            }
        ],
    )
    if height is not None:
        layout["height"] = height
    fig.update_layout(**layout)
    return fig


def create_treemap_figure(model: RenderModel) -> go.Figure:
    """
    Create the category treemap.

    Each cell's ``customdata`` holds the category name so click events can be
    fed back into the selection state machine. Cell colours come from
    ``model.colors``, the same mapping the legend uses.
    """
    records = model.treemap_records
    if not records:
        return empty_figure("No data for this selection.", height=model.treemap_dimensions.height)

    metric = model.state.metric
    names = [obs.category for obs in records]
    values = [obs.value for obs in records]
    label_value = hover_value_format(metric, field="value", decimals=1 if metric is Metric.PERCENT else 0)

    fig = go.Figure(
        go.Treemap(
            labels=names,
            parents=[""] * len(names),
            values=values,
            customdata=[[name, short_label(name)] for name in names],
            marker=dict(
                colors=[model.colors.get(name, "#d9d9d9") for name in names],
                line=dict(color="#FFFFFF", width=1),
            ),
            texttemplate=f"%{{customdata[1]}}<br>{label_value}",
            textfont=dict(color="#000000", size=11),
            hovertemplate=(
                "<b>%{label}</b>"
                f"<br>Value: {hover_value_format(metric, field='value')}"
                "<extra></extra>"
            ),
            tiling=dict(pad=1),
            sort=True,
        )
    )
    fig.update_layout(**_base_layout(
        margin=_margin(model.treemap_dimensions),
        height=model.treemap_dimensions.height,
    ))

    logger.debug(f"Treemap built with {len(names)} cells, total value {sum(values):.4f}")
    return fig


def create_line_figure(model: RenderModel) -> go.Figure:
    """
    Create the yearly trend line chart.

    Axis ranges are the model's computed domains, the year axis widened by
    X_RANGE_PADDING_YEARS on each side. A zero-height value domain
    (single point or flat series) is left to Plotly's autorange so the line
    is still drawn.
    """
    if not model.line_ready:
        return empty_figure("Loading trend data...", height=model.line_dimensions.height)

    series = model.line_series
    if not series:
        return empty_figure("No trend data for this selection.", height=model.line_dimensions.height)

    metric = model.state.metric
    fig = go.Figure(
        go.Scatter(
            x=[p.year for p in series],
            y=[p.value for p in series],
            mode="lines+markers",
            line=dict(color=LINE_COLOR, width=2, shape="spline"),
            marker=dict(color=LINE_COLOR, size=8),
            hovertemplate=(
                "<b>%{x}</b>"
                f"<br>Value: {hover_value_format(metric)}"
                "<extra></extra>"
            ),
        )
    )

    xaxis = dict(tickformat="d", nticks=10, gridcolor=GRID_COLOR, showline=True, linecolor="#CCCCCC")
    if model.x_domain is not None and model.x_domain[0] != model.x_domain[1]:
        start, end = model.x_domain
        xaxis["range"] = [start - X_RANGE_PADDING_YEARS, end + X_RANGE_PADDING_YEARS]

    yaxis = dict(gridcolor=GRID_COLOR, showline=True, linecolor="#CCCCCC", zeroline=False)
    if model.y_domain is not None and model.y_domain[0] != model.y_domain[1]:
        yaxis["range"] = list(model.y_domain)
    if metric is Metric.PERCENT:
        yaxis["ticksuffix"] = "%"

    fig.update_layout(**_base_layout(
        xaxis=xaxis,
        yaxis=yaxis,
        margin=_margin(model.line_dimensions),
        height=model.line_dimensions.height,
        showlegend=False,
        hovermode="closest",
    ))

    return fig
