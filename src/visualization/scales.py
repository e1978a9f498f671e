"""
Scale, domain, and colour calculations shared by the treemap, line chart and legend.

Everything here is a pure function of its inputs. Domains are computed from
the series handed to the line chart; colours are assigned from the ordered
category list so that treemap cells and legend badges always agree.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from data_processing.aggregation import SeriesPoint

# Fixed policy: y-axis gets 10% of the value spread above and below
Y_PADDING_RATIO = 0.1

# d3.schemeSet3, a 12-colour categorical palette
PALETTE = [
    "#8dd3c7", "#ffffb3", "#bebada", "#fb8072",
    "#80b1d3", "#fdb462", "#b3de69", "#fccde5",
    "#d9d9d9", "#bc80bd", "#ccebc5", "#ffed6f",
]

LINE_COLOR = "#fc8d62"


@dataclass(frozen=True)
class Margins:
    top: int = 20
    right: int = 30
    bottom: int = 30
    left: int = 60


@dataclass(frozen=True)
class ChartDimensions:
    """
    Pixel size of a chart and its inner margins.

    Raises:
        ValueError: If the margins leave no drawable area
    """

    width: int = 800
    height: int = 400
    margins: Margins = field(default_factory=Margins)

    def __post_init__(self) -> None:
        if self.width <= self.margins.left + self.margins.right:
            raise ValueError(f"Width {self.width} leaves no room inside margins {self.margins}")
        if self.height <= self.margins.top + self.margins.bottom:
            raise ValueError(f"Height {self.height} leaves no room inside margins {self.margins}")

    @property
    def x_range(self) -> tuple[float, float]:
        return (float(self.margins.left), float(self.width - self.margins.right))

    @property
    def y_range(self) -> tuple[float, float]:
        # Inverted so larger values sit higher on screen
        return (float(self.height - self.margins.bottom), float(self.margins.top))


LINE_CHART_DIMENSIONS = ChartDimensions(800, 400, Margins(top=20, right=30, bottom=30, left=60))
TREEMAP_DIMENSIONS = ChartDimensions(800, 600, Margins(top=20, right=20, bottom=20, left=20))


@dataclass(frozen=True)
class LinearScale:
    """Linear mapping from a data domain onto a pixel range.

    A zero-width domain maps every input to the middle of the range.
    """

    domain: tuple[float, float]
    range: tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)


def x_domain(series: Sequence[SeriesPoint]) -> Optional[tuple[int, int]]:
    """[first year, last year] of the series, or None when empty."""
    if not series:
        return None
    years = [p.year for p in series]
    return (min(years), max(years))


def y_padding(series: Sequence[SeriesPoint]) -> float:
    """10% of the value spread; exactly 0 for a flat or single-point series."""
    if not series:
        return 0.0
    values = [p.value for p in series]
    return (max(values) - min(values)) * Y_PADDING_RATIO


def y_domain(series: Sequence[SeriesPoint]) -> Optional[tuple[float, float]]:
    """[max(0, min - pad), max + pad] over the series values, or None when empty."""
    if not series:
        return None
    values = [p.value for p in series]
    pad = y_padding(series)
    return (max(0.0, min(values) - pad), max(values) + pad)


def x_scale(series: Sequence[SeriesPoint], dims: ChartDimensions = LINE_CHART_DIMENSIONS) -> Optional[LinearScale]:
    domain = x_domain(series)
    if domain is None:
        return None
    return LinearScale(domain=(float(domain[0]), float(domain[1])), range=dims.x_range)


def y_scale(series: Sequence[SeriesPoint], dims: ChartDimensions = LINE_CHART_DIMENSIONS) -> Optional[LinearScale]:
    domain = y_domain(series)
    if domain is None:
        return None
    return LinearScale(domain=domain, range=dims.y_range)


def color_for_index(index: int) -> str:
    """Palette slot for the n-th category, cycling after 12."""
    return PALETTE[index % len(PALETTE)]


def assign_colors(categories: Sequence[str]) -> dict[str, str]:
    """Map each category to its palette colour by position in the ordered list.

    Duplicates keep the slot of their first occurrence.
    """
    colors: dict[str, str] = {}
    for category in categories:
        if category not in colors:
            colors[category] = color_for_index(len(colors))
    return colors
