"""
Data models for the BRICS maternal mortality dashboard.

Contains the typed record model for mortality/risk observations and the
immutable dataset container shared by the filter engine and aggregator.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class RecordType(str, Enum):
    """Dimension a record breaks the data down by."""

    COUNTRY = "country"
    RISK = "risk"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def category_column(self) -> str:
        """Source column that carries the category name for this type."""
        return "location" if self is RecordType.COUNTRY else "cause"

    @classmethod
    def parse(cls, raw: Any) -> Optional["RecordType"]:
        """Parse a loosely formatted type string ("Country", " risk ") or None."""
        if isinstance(raw, RecordType):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class Metric(str, Enum):
    """Unit of an observation's value."""

    PERCENT = "Percent"
    NUMBER = "Number"

    @classmethod
    def parse(cls, raw: Any) -> Optional["Metric"]:
        """Parse a metric string case-insensitively, returning None if unknown."""
        if isinstance(raw, Metric):
            return raw
        if not isinstance(raw, str):
            return None
        wanted = raw.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


def _coerce_float(raw: Any) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def _coerce_year(raw: Any) -> Optional[int]:
    value = _coerce_float(raw)
    if value is None or not value.is_integer():
        return None
    return int(value)


def _clean_text(raw: Any) -> str:
    if not isinstance(raw, str):
        return ""
    return raw.strip()


@dataclass(frozen=True)
class Observation:
    """
    One measured data point.

    Attributes:
        value: Measured quantity (finite, non-negative)
        record_type: Country or Risk
        metric: Percent or Number
        category: Location name for Country records, cause name for Risk records
        year: Calendar year for time-series records; None for snapshot rows
    """

    value: float
    record_type: RecordType
    metric: Metric
    category: str
    year: Optional[int] = None

    @property
    def is_time_series(self) -> bool:
        return self.year is not None

    @classmethod
    def from_row(
        cls,
        row: Mapping[str, Any],
        record_type: Optional[RecordType] = None,
        require_year: bool = False,
    ) -> Optional["Observation"]:
        """
        Build an Observation from a raw source row.

        Rows use the source column names: ``year``, ``val``, ``metrics``,
        ``type``, ``location`` and ``cause``. When ``record_type`` is given it
        overrides the row's ``type`` column (the per-type line chart files
        carry no usable type column).

        Returns:
            The Observation, or None when any required field is missing or
            malformed. Callers drop None rows rather than failing.
        """
        rtype = record_type or RecordType.parse(row.get("type"))
        if rtype is None:
            return None

        metric = Metric.parse(row.get("metrics"))
        if metric is None:
            return None

        value = _coerce_float(row.get("val"))
        if value is None or value < 0:
            return None

        category = _clean_text(row.get(rtype.category_column))
        if not category:
            return None

        year = None
        raw_year = row.get("year")
        if raw_year is not None and not (isinstance(raw_year, float) and math.isnan(raw_year)):
            year = _coerce_year(raw_year)
            if year is None:
                return None
        if require_year and year is None:
            return None

        return cls(
            value=value,
            record_type=rtype,
            metric=metric,
            category=category,
            year=year,
        )


@dataclass(frozen=True)
class Dataset:
    """
    The two logically separate record sets, loaded once and never mutated.

    Attributes:
        time_series: Year-bearing records for the line chart, or None while
            unavailable (not loaded, or failed to load)
        snapshot: Year-less per-category records for the treemap, or None
            while unavailable
    """

    time_series: Optional[tuple[Observation, ...]] = None
    snapshot: Optional[tuple[Observation, ...]] = None

    @classmethod
    def empty(cls) -> "Dataset":
        return cls()

    @property
    def has_time_series(self) -> bool:
        return self.time_series is not None

    @property
    def has_snapshot(self) -> bool:
        return self.snapshot is not None

    def summary(self) -> str:
        """Return a one-line description for logging."""
        ts = "unavailable" if self.time_series is None else f"{len(self.time_series)} rows"
        snap = "unavailable" if self.snapshot is None else f"{len(self.snapshot)} rows"
        return f"time series: {ts}; snapshot: {snap}"


@dataclass(frozen=True)
class SelectionState:
    """
    The dashboard's UI selection.

    Attributes:
        record_type: Dimension shown by both views (default Country)
        metric: Unit shown by both views (default Percent)
        selected_item: Drilled-down category, or None for the aggregate view
    """

    record_type: RecordType = RecordType.COUNTRY
    metric: Metric = Metric.PERCENT
    selected_item: Optional[str] = None

    @property
    def is_drilldown(self) -> bool:
        return self.selected_item is not None

    def to_dict(self) -> dict:
        """Return a JSON-serializable dict for the Dash session store."""
        return {
            "record_type": self.record_type.value,
            "metric": self.metric.value,
            "selected_item": self.selected_item,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SelectionState":
        """Rebuild a state from a store dict, using defaults for anything missing or unknown."""
        if not data:
            return cls()
        record_type = RecordType.parse(data.get("record_type")) or RecordType.COUNTRY
        metric = Metric.parse(data.get("metric")) or Metric.PERCENT
        selected = data.get("selected_item")
        if not isinstance(selected, str) or not selected:
            selected = None
        return cls(record_type=record_type, metric=metric, selected_item=selected)
