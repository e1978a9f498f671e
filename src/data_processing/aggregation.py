"""
Yearly aggregation for the line chart.

Turns filtered time-series Observations into an ordered ``(year, value)``
series: a per-year mean across categories for the aggregate view, or the
single selected category sorted by year for a drill-down.
"""

from dataclasses import dataclass
from typing import Iterable

import numpy as np
import pandas as pd

from core.models import Observation, SelectionState


@dataclass(frozen=True)
class SeriesPoint:
    """One point of a line series."""

    year: int
    value: float


def _frame(records: Iterable[Observation]) -> pd.DataFrame:
    """Year/value frame with unusable rows (no year, non-finite value) removed."""
    df = pd.DataFrame(
        [(obs.year, obs.value) for obs in records],
        columns=["year", "value"],
    )
    if df.empty:
        return df
    df["year"] = pd.to_numeric(df["year"], errors="coerce")
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    return df.replace([np.inf, -np.inf], np.nan).dropna(subset=["year", "value"])


def average_by_year(records: Iterable[Observation]) -> list[SeriesPoint]:
    """Mean value per year across every category present that year.

    Returns one point per distinct year, strictly ascending. Years whose
    values are all missing produce no point rather than NaN.
    """
    df = _frame(records)
    if df.empty:
        return []

    means = df.groupby("year", sort=True)["value"].mean().dropna()
    return [SeriesPoint(year=int(year), value=float(value)) for year, value in means.items()]


def sort_by_year(records: Iterable[Observation]) -> list[SeriesPoint]:
    """A single category's series, unaggregated, ascending by year."""
    df = _frame(records)
    if df.empty:
        return []

    df = df.sort_values("year", kind="stable")
    return [
        SeriesPoint(year=int(year), value=float(value))
        for year, value in zip(df["year"], df["value"])
    ]


def prepare_line_series(records: Iterable[Observation], state: SelectionState) -> list[SeriesPoint]:
    """Line chart series for ``state``: averaged when nothing is selected."""
    if state.is_drilldown:
        return sort_by_year(records)
    return average_by_year(records)
