"""Callbacks for data status and selection state management."""
from typing import Any, Optional

from dash import ALL, Input, Output, State, ctx, no_update

from analysis.selection import (
    ChangeMetric,
    ChangeType,
    Reset,
    SelectCategory,
    SelectionAction,
    SelectionStateMachine,
)
from core.logging_config import get_logger
from core.models import Dataset, SelectionState
from dash_app.components.legend import LEGEND_ITEM_TYPE

log = get_logger(__name__)


def _clicked_category(click_data: Optional[dict]) -> Optional[str]:
    """Category name from a treemap clickData payload."""
    if not click_data:
        return None
    points = click_data.get("points") or []
    if not points:
        return None
    point = points[0]
    customdata = point.get("customdata")
    if isinstance(customdata, (list, tuple)) and customdata:
        return customdata[0]
    if isinstance(customdata, str):
        return customdata
    return point.get("label")


def action_for_trigger(
    triggered_id: Any,
    triggered_value: Any,
    record_type: Any = None,
    metric: Any = None,
    click_data: Optional[dict] = None,
) -> Optional[SelectionAction]:
    """Translate the component that fired into a selection action.

    Returns None when the trigger should not change state (initial call,
    legend badges being re-rendered with n_clicks=0).
    """
    if triggered_id == "record-type-select":
        return ChangeType(record_type)
    if triggered_id == "metric-toggle":
        return ChangeMetric(metric)
    if triggered_id == "treemap-chart":
        category = _clicked_category(click_data)
        return SelectCategory(category) if category else None
    if triggered_id == "reset-btn":
        return Reset() if triggered_value else None
    if isinstance(triggered_id, dict) and triggered_id.get("type") == LEGEND_ITEM_TYPE:
        return SelectCategory(triggered_id.get("index")) if triggered_value else None
    return None


def apply_action(current_state: Optional[dict], action: SelectionAction, dataset: Dataset) -> dict:
    """Run one action through the state machine and return the new store dict."""
    machine = SelectionStateMachine.for_dataset(dataset, SelectionState.from_dict(current_state))
    before = machine.state
    after = machine.apply(action)
    if after != before:
        log.debug("Selection %s -> %s via %s", before, after, action)
    return after.to_dict()


def format_record_status(ref: dict) -> str:
    """Header text describing what was loaded."""
    if not ref.get("snapshot_available") and not ref.get("time_series_available"):
        return "No data loaded"
    parts = []
    if ref.get("time_series_available"):
        parts.append(f"{ref.get('time_series_rows', 0):,} yearly records")
    else:
        parts.append("trend data unavailable")
    if ref.get("snapshot_available"):
        parts.append(f"{ref.get('snapshot_rows', 0):,} category records")
    else:
        parts.append("category data unavailable")
    return " · ".join(parts)


def register_filter_callbacks(app):
    """Register data status and selection state callbacks."""

    @app.callback(
        Output("header-record-count", "children"),
        Input("url", "pathname"),  # fires once on page load
    )
    def load_reference_data(_pathname):
        """Show how much data was loaded."""
        from dash_app.data.queries import load_initial_data

        try:
            ref = load_initial_data()
        except Exception:
            log.exception("Failed to load dashboard data")
            return "Data failed to load"
        return format_record_status(ref)

    @app.callback(
        Output("app-state", "data"),
        Input("record-type-select", "value"),
        Input("metric-toggle", "value"),
        Input("treemap-chart", "clickData"),
        Input({"type": LEGEND_ITEM_TYPE, "index": ALL}, "n_clicks"),
        Input("reset-btn", "n_clicks"),
        State("app-state", "data"),
        prevent_initial_call=True,
    )
    def update_app_state(record_type, metric, click_data, _legend_clicks, _reset_clicks, current_state):
        """Apply the action behind whichever control fired to app-state."""
        from dash_app.data.queries import get_dataset

        triggered_value = ctx.triggered[0]["value"] if ctx.triggered else None
        action = action_for_trigger(
            ctx.triggered_id,
            triggered_value,
            record_type=record_type,
            metric=metric,
            click_data=click_data,
        )
        if action is None:
            return no_update

        return apply_action(current_state, action, get_dataset())
