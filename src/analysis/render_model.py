"""
Render model: everything the two views need, derived from (dataset, state).

The whole model is rebuilt on every state change rather than patched; the
derivation is pure, so the same inputs always give an equal model.
"""

from dataclasses import dataclass, field
from typing import Optional

from analysis.labels import DEFAULT_YEAR_RANGE, line_chart_title, treemap_title
from core.models import Dataset, Observation, SelectionState
from data_processing.aggregation import SeriesPoint, prepare_line_series
from data_processing.filters import category_list, select_snapshot, select_time_series
from visualization.scales import (
    LINE_CHART_DIMENSIONS,
    TREEMAP_DIMENSIONS,
    ChartDimensions,
    LinearScale,
    assign_colors,
    x_domain,
    x_scale,
    y_domain,
    y_scale,
)


@dataclass(frozen=True)
class RenderModel:
    """
    Attributes:
        state: The selection state this model was derived from
        treemap_records: Snapshot records for the treemap, source order
        categories: Ordered snapshot categories (legend order)
        colors: Category -> palette colour, shared by treemap and legend
        line_series: Averaged or single-category series, ascending by year
        x_domain: [first, last] year, None when the series is empty
        y_domain: Padded value domain, None when the series is empty
        line_dimensions: Pixel size and margins of the line chart
        treemap_dimensions: Pixel size and margins of the treemap
        treemap_title: Treemap heading
        line_title: Line chart heading
        line_ready: False while the time-series set is unavailable
    """

    state: SelectionState
    treemap_records: tuple[Observation, ...] = ()
    categories: tuple[str, ...] = ()
    colors: dict[str, str] = field(default_factory=dict)
    line_series: tuple[SeriesPoint, ...] = ()
    x_domain: Optional[tuple[int, int]] = None
    y_domain: Optional[tuple[float, float]] = None
    line_dimensions: ChartDimensions = LINE_CHART_DIMENSIONS
    treemap_dimensions: ChartDimensions = TREEMAP_DIMENSIONS
    treemap_title: str = ""
    line_title: str = ""
    line_ready: bool = False

    @property
    def can_reset(self) -> bool:
        return self.state.is_drilldown

    @property
    def x_range(self) -> tuple[float, float]:
        return self.line_dimensions.x_range

    @property
    def y_range(self) -> tuple[float, float]:
        return self.line_dimensions.y_range

    @property
    def x_scale(self) -> Optional[LinearScale]:
        """Year -> pixel mapping for the line chart, None when there is no series."""
        return x_scale(self.line_series, self.line_dimensions)

    @property
    def y_scale(self) -> Optional[LinearScale]:
        return y_scale(self.line_series, self.line_dimensions)


def build_render_model(
    dataset: Dataset,
    state: SelectionState,
    line_dims: Optional[ChartDimensions] = None,
    treemap_dims: Optional[ChartDimensions] = None,
    year_range: tuple[int, int] = DEFAULT_YEAR_RANGE,
) -> RenderModel:
    """Derive the full render model for ``state``; never mutates ``dataset``."""
    treemap_records = tuple(select_snapshot(dataset, state))
    categories = tuple(category_list(dataset, state.record_type, state.metric))

    series = tuple(prepare_line_series(select_time_series(dataset, state), state))

    return RenderModel(
        state=state,
        treemap_records=treemap_records,
        categories=categories,
        colors=assign_colors(categories),
        line_series=series,
        x_domain=x_domain(series),
        y_domain=y_domain(series),
        line_dimensions=line_dims or LINE_CHART_DIMENSIONS,
        treemap_dimensions=treemap_dims or TREEMAP_DIMENSIONS,
        treemap_title=treemap_title(state),
        line_title=line_chart_title(state, year_range),
        line_ready=dataset.has_time_series,
    )
