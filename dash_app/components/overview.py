"""Overview section explaining what the dashboard covers."""
from dash import html


def make_overview():
    return html.Section(
        className="overview",
        **{"aria-label": "Overview"},
        children=[
            html.H2("Overview", className="overview__heading"),
            html.Ul(
                className="overview__list",
                children=[
                    html.Li([
                        html.Strong("What is BRICS? "),
                        "BRICS is an intergovernmental organization of ten major countries: ",
                        html.Strong(
                            "Brazil, Russia, India, China, South Africa, Egypt, Ethiopia, "
                            "Indonesia, Iran, and the United Arab Emirates"
                        ),
                        ". These countries are recognized for their emerging economies "
                        "and significant global influence.",
                    ]),
                    html.Li([
                        html.Strong("Why environmental/occupational risks? "),
                        "These risks pose substantial threats to physical health yet are "
                        "frequently overlooked.",
                    ]),
                    html.Li([
                        html.Strong("Why this dashboard? "),
                        "Explore mortality trends and cause distribution among BRICS "
                        "countries, and identify high-risk regions and causes.",
                    ]),
                ],
            ),
        ],
    )
