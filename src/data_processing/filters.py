"""
Filter engine: derives the record subset each view renders.

All functions are pure. They read the immutable Dataset and the current
selection state and return new lists; nothing here holds state.
"""

from typing import Iterable, Optional

from core.models import Dataset, Metric, Observation, RecordType, SelectionState


def _matches(obs: Observation, record_type: RecordType, metric: Metric) -> bool:
    return obs.record_type is record_type and obs.metric is metric


def select_snapshot(dataset: Dataset, state: SelectionState) -> list[Observation]:
    """Snapshot records for the state's record type and metric, in source order.

    The treemap always shows the full breakdown, so ``selected_item`` is
    ignored here.
    """
    if not dataset.snapshot:
        return []
    return [obs for obs in dataset.snapshot if _matches(obs, state.record_type, state.metric)]


def select_time_series(dataset: Dataset, state: SelectionState) -> list[Observation]:
    """Time-series records the line chart needs for ``state``.

    Without a selected item this is the whole (record type, metric) slice, to
    be averaged per year; with one it is that category only. Result order is
    whatever the source had; callers sort by year.
    """
    if not dataset.time_series:
        return []
    selected: Optional[str] = state.selected_item
    return [
        obs for obs in dataset.time_series
        if _matches(obs, state.record_type, state.metric)
        and (selected is None or obs.category == selected)
    ]


def distinct_categories(records: Iterable[Observation]) -> list[str]:
    """Distinct category names in first-seen order."""
    seen: dict[str, None] = {}
    for obs in records:
        seen.setdefault(obs.category, None)
    return list(seen)


def category_list(dataset: Dataset, record_type: RecordType, metric: Metric) -> list[str]:
    """Ordered snapshot categories for a (record type, metric) pair.

    This is the one source for both colour assignment and the membership
    check on category selection, so treemap and legend can never disagree.
    """
    if not dataset.snapshot:
        return []
    return distinct_categories(
        obs for obs in dataset.snapshot if _matches(obs, record_type, metric)
    )
