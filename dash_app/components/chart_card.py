"""Chart cards: the treemap (category breakdown) and the linked trend line chart."""
from dash import html, dcc

from visualization.scales import ChartDimensions, LINE_CHART_DIMENSIONS, TREEMAP_DIMENSIONS

_GRAPH_CONFIG = {
    "displayModeBar": False,
    "displaylogo": False,
}

# Reset button is only shown while a category is drilled into
RESET_VISIBLE = {"minWidth": "100px"}
RESET_HIDDEN = {"display": "none"}


def make_treemap_card(dims: ChartDimensions = TREEMAP_DIMENSIONS):
    """Return the treemap card; clicking a cell drills the line chart down."""
    return html.Section(
        className="chart-card",
        **{"aria-label": "Category distribution"},
        children=[
            html.Div(
                className="chart-card__header",
                children=[
                    html.Div(
                        "",
                        id="treemap-title",
                        className="chart-card__title",
                    ),
                    html.Div(
                        "Click a segment to see its trend over time.",
                        className="chart-card__subtitle",
                    ),
                ],
            ),
            dcc.Loading(
                type="circle",
                color="#fc8d62",
                children=[
                    dcc.Graph(
                        id="treemap-chart",
                        config=_GRAPH_CONFIG,
                        style={"height": f"{dims.height}px"},
                        responsive=True,
                    ),
                ],
            ),
        ],
    )


def make_line_card(dims: ChartDimensions = LINE_CHART_DIMENSIONS):
    """Return the line chart card with its title and Reset button."""
    return html.Section(
        className="chart-card",
        **{"aria-label": "Trend over time"},
        children=[
            html.Div(
                className="chart-card__header",
                style={"display": "flex", "alignItems": "center",
                       "justifyContent": "space-between", "gap": "12px"},
                children=[
                    html.Div("", id="line-title", className="chart-card__title"),
                    html.Button(
                        "Reset",
                        id="reset-btn",
                        className="filter-btn filter-btn--clear",
                        n_clicks=0,
                        style=RESET_HIDDEN,
                    ),
                ],
            ),
            dcc.Loading(
                type="circle",
                color="#fc8d62",
                children=[
                    dcc.Graph(
                        id="line-chart",
                        config=_GRAPH_CONFIG,
                        style={"height": f"{dims.height}px"},
                        responsive=True,
                    ),
                ],
            ),
        ],
    )
