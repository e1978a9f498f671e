"""Legend card: one clickable badge per category, coloured like its treemap cell."""
from dash import html

from analysis.labels import category_description
from analysis.render_model import RenderModel
from core.models import RecordType

LEGEND_ITEM_TYPE = "legend-item"

# Country legends are split into two columns after this many badges
_COUNTRY_COLUMN_SIZE = 5


def make_legend_card():
    """Return the empty legend card; badges are filled in by the chart callback."""
    return html.Section(
        className="legend-card",
        **{"aria-label": "Legend"},
        children=[html.Div(id="legend-items", className="legend-card__body")],
    )


def _badge(category: str, color: str, record_type: RecordType, selected: bool):
    class_name = "legend-badge legend-badge--active" if selected else "legend-badge"
    return html.Button(
        category,
        id={"type": LEGEND_ITEM_TYPE, "index": category},
        className=class_name,
        n_clicks=0,
        title=category_description(record_type, category) or category,
        style={
            "backgroundColor": color,
            "color": "#000",
            "cursor": "pointer",
            "textAlign": "center",
            "padding": "8px 12px",
            "fontSize": "0.9rem",
            "whiteSpace": "nowrap",
            "border": "2px solid #1E293B" if selected else "none",
        },
    )


def build_legend_items(model: RenderModel) -> list:
    """Legend children for the current render model, in category order."""
    record_type = model.state.record_type
    selected = model.state.selected_item
    badges = [
        (category, _badge(category, model.colors[category], record_type, category == selected))
        for category in model.categories
    ]
    if not badges:
        return [html.Span("No categories to show.", className="legend-card__empty")]

    if record_type is RecordType.COUNTRY:
        first = [badge for _, badge in badges[:_COUNTRY_COLUMN_SIZE]]
        rest = [badge for _, badge in badges[_COUNTRY_COLUMN_SIZE:]]
        column_style = {"display": "flex", "flexDirection": "column", "gap": "12px"}
        return [
            html.Div(
                className="legend-card__columns",
                style={"display": "flex", "gap": "24px"},
                children=[
                    html.Div(first, style=column_style),
                    html.Div(rest, style=column_style),
                ],
            )
        ]

    return [
        html.Div(
            className="legend-card__row",
            style={"display": "flex", "flexDirection": "column", "gap": "6px", "marginBottom": "12px"},
            children=[
                badge,
                html.Span(
                    category_description(record_type, category),
                    className="legend-card__description",
                    style={"fontSize": "0.9rem", "color": "#768692", "lineHeight": "1.4"},
                ),
            ],
        )
        for category, badge in badges
    ]
