"""Filter bar component: record type dropdown and metric toggle."""
from dash import html, dcc
import dash_mantine_components as dmc

from analysis.labels import metric_label, type_label
from core.models import Metric, RecordType, SelectionState

RECORD_TYPE_OPTIONS = [{"label": type_label(t), "value": t.value} for t in RecordType]
METRIC_OPTIONS = [{"label": metric_label(m), "value": m.value} for m in Metric]


def make_filter_bar(state: SelectionState = SelectionState()):
    """Return the filter bar.

    The dropdown and toggle start at ``state``; after that the app-state
    store follows them, never the other way round.
    """
    return html.Section(
        className="filter-bar",
        **{"aria-label": "Filters"},
        children=[
            html.Div(
                className="filter-bar__group",
                children=[
                    html.Span("Breakdown", className="filter-bar__label"),
                    dcc.Dropdown(
                        id="record-type-select",
                        options=RECORD_TYPE_OPTIONS,
                        value=state.record_type.value,
                        clearable=False,
                        searchable=False,
                        className="filter-dropdown",
                    ),
                ],
            ),
            html.Div(className="filter-bar__divider"),
            html.Div(
                className="filter-bar__group",
                children=[
                    html.Span("Metric", className="filter-bar__label"),
                    dmc.SegmentedControl(
                        id="metric-toggle",
                        data=METRIC_OPTIONS,
                        value=state.metric.value,
                        size="xs",
                    ),
                ],
            ),
        ],
    )
