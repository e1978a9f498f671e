"""Dash application entry point with layout root and state store."""
from dash import Dash, html, dcc
import dash_mantine_components as dmc

from config import get_dashboard_config
from core.models import SelectionState
from dash_app.components.header import make_header
from dash_app.components.overview import make_overview
from dash_app.components.filter_bar import make_filter_bar
from dash_app.components.chart_card import make_treemap_card, make_line_card
from dash_app.components.legend import make_legend_card
from dash_app.components.footer import make_footer

_config = get_dashboard_config()
_initial_state = SelectionState()

app = Dash(
    __name__,
    title="BRICS Maternal Mortality Risks",
    suppress_callback_exceptions=True,
)

app.layout = dmc.MantineProvider(
    children=[
        # Selection state lives in memory only: a reload starts from defaults
        dcc.Store(id="app-state", storage_type="memory", data=_initial_state.to_dict()),
        dcc.Location(id="url", refresh=False),

        make_header(),
        html.Main(
            className="main",
            children=[
                make_overview(),
                make_filter_bar(_initial_state),
                html.Div(
                    className="dashboard-grid",
                    style={"display": "flex", "flexWrap": "wrap", "gap": "24px"},
                    children=[
                        html.Div(
                            style={"flex": "1 1 480px"},
                            children=[make_treemap_card(_config.treemap.dimensions)],
                        ),
                        html.Div(
                            style={"flex": "1 1 480px"},
                            children=[
                                make_line_card(_config.line_chart.dimensions),
                                make_legend_card(),
                            ],
                        ),
                    ],
                ),
                make_footer(),
            ],
        ),
    ],
)

from dash_app.callbacks import register_callbacks

register_callbacks(app)

server = app.server
