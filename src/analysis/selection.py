"""
Selection state machine for the linked treemap and line chart.

The dashboard is either in the aggregate view (no category selected) or
drilled down into one category, for whatever record type and metric are
current. Four user actions move between these:

- ChangeType: switch Country/Risk, always back to the aggregate view
- ChangeMetric: switch Percent/Number, keeping any drill-down
- SelectCategory: drill down, only into a category of the current snapshot
- Reset: leave a drill-down (unavailable in the aggregate view)

Invalid actions are logged and ignored; they never raise into the UI.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Sequence, Union

from core.logging_config import get_logger
from core.models import Dataset, Metric, RecordType, SelectionState
from data_processing.filters import category_list

logger = get_logger(__name__)

CategoryLookup = Callable[[RecordType, Metric], Sequence[str]]


@dataclass(frozen=True)
class ChangeType:
    record_type: Any


@dataclass(frozen=True)
class ChangeMetric:
    metric: Any


@dataclass(frozen=True)
class SelectCategory:
    item: Any


@dataclass(frozen=True)
class Reset:
    pass


SelectionAction = Union[ChangeType, ChangeMetric, SelectCategory, Reset]


def categories_from(dataset: Dataset) -> CategoryLookup:
    """Category lookup backed by a dataset's snapshot set."""
    def lookup(record_type: RecordType, metric: Metric) -> Sequence[str]:
        return category_list(dataset, record_type, metric)
    return lookup


class SelectionStateMachine:
    """
    Owns the current SelectionState and applies user actions to it.

    Args:
        categories_for: Returns the ordered snapshot categories for a
            (record type, metric) pair; used to validate SelectCategory
        state: Starting state (defaults: Country, Percent, aggregate view)
    """

    def __init__(self, categories_for: CategoryLookup, state: Optional[SelectionState] = None):
        self._categories_for = categories_for
        self._state = state or SelectionState()

    @classmethod
    def for_dataset(cls, dataset: Dataset, state: Optional[SelectionState] = None) -> "SelectionStateMachine":
        return cls(categories_from(dataset), state)

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def can_reset(self) -> bool:
        return self._state.is_drilldown

    def categories(self) -> list[str]:
        """Categories selectable under the current record type and metric."""
        return list(self._categories_for(self._state.record_type, self._state.metric))

    def change_type(self, record_type: Any) -> SelectionState:
        parsed = RecordType.parse(record_type)
        if parsed is None:
            logger.warning(f"Ignoring unknown record type {record_type!r}")
            return self._state
        # Category names are not comparable across types, so any drill-down is dropped
        self._state = replace(self._state, record_type=parsed, selected_item=None)
        return self._state

    def change_metric(self, metric: Any) -> SelectionState:
        parsed = Metric.parse(metric)
        if parsed is None:
            logger.warning(f"Ignoring unknown metric {metric!r}")
            return self._state
        self._state = replace(self._state, metric=parsed)
        return self._state

    def select_category(self, item: Any) -> SelectionState:
        if not isinstance(item, str) or not item:
            logger.info(f"Ignoring selection of non-category value {item!r}")
            return self._state
        if item == self._state.selected_item:
            return self._state
        if item not in self.categories():
            logger.info(
                f"Ignoring selection of {item!r}: not a {self._state.record_type.value} "
                f"category for {self._state.metric.value}"
            )
            return self._state
        self._state = replace(self._state, selected_item=item)
        return self._state

    def reset(self) -> SelectionState:
        if not self._state.is_drilldown:
            logger.debug("Reset ignored: already showing the aggregate view")
            return self._state
        self._state = replace(self._state, selected_item=None)
        return self._state

    def apply(self, action: SelectionAction) -> SelectionState:
        """Dispatch a single action and return the resulting state."""
        if isinstance(action, ChangeType):
            return self.change_type(action.record_type)
        if isinstance(action, ChangeMetric):
            return self.change_metric(action.metric)
        if isinstance(action, SelectCategory):
            return self.select_category(action.item)
        if isinstance(action, Reset):
            return self.reset()
        logger.warning(f"Ignoring unsupported action {action!r}")
        return self._state
