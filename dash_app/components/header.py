"""Top header bar with the dashboard title and data status."""
from dash import html


def make_header():
    """Return the fixed top header with title and loaded-record count."""
    return html.Header(
        className="top-header",
        children=[
            html.Div(
                className="top-header__brand",
                children=[
                    html.Div("BRICS", className="top-header__logo"),
                    html.Div(
                        "Mortality with Environmental/occupational Risks across "
                        "BRICS Countries (1990-2021)",
                        className="top-header__title",
                    ),
                ],
            ),
            html.Div(
                className="top-header__right",
                children=[
                    html.Span(
                        children=[
                            html.Span(className="status-dot"),
                            html.Span("...", id="header-record-count"),
                        ],
                    ),
                ],
            ),
        ],
    )
