"""
Data processing module for the BRICS maternal mortality dashboard.

Loads the source CSVs into typed records and derives the subsets each view renders.

Submodules:
    loader: CSV loading into Observation records (malformed rows dropped)
    filters: Filter engine for the treemap and line chart
    aggregation: Per-year averaging and year ordering for line series
"""

from data_processing.aggregation import (
    SeriesPoint,
    average_by_year,
    prepare_line_series,
    sort_by_year,
)
from data_processing.filters import (
    category_list,
    distinct_categories,
    select_snapshot,
    select_time_series,
)
from data_processing.loader import (
    CsvObservationLoader,
    DataLoader,
    LoadResult,
    load_dataset,
)

__all__ = [
    "SeriesPoint",
    "average_by_year",
    "prepare_line_series",
    "sort_by_year",
    "category_list",
    "distinct_categories",
    "select_snapshot",
    "select_time_series",
    "CsvObservationLoader",
    "DataLoader",
    "LoadResult",
    "load_dataset",
]
