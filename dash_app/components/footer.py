"""Page footer component with the data source citation."""
from dash import html


def make_footer():
    """Build the page footer."""
    return html.Footer(
        className="page-footer",
        children=[
            html.P([
                "Data Source: ",
                html.A(
                    "Global Burden of Disease Study 2021 (GBD 2021) Results",
                    href="https://vizhub.healthdata.org/gbd-results/",
                    target="_blank",
                    rel="noopener noreferrer",
                ),
            ]),
            html.Small(
                "Global Burden of Disease Collaborative Network. Global Burden of Disease "
                "Study 2021 (GBD 2021) Results. Seattle, United States: Institute for "
                "Health Metrics and Evaluation (IHME), 2022."
            ),
        ],
    )
