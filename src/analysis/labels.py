"""Display titles, labels and value formatting derived from the selection state."""

from typing import Optional

from core.models import Metric, RecordType, SelectionState

DEFAULT_YEAR_RANGE = (1990, 2021)

_AGGREGATE_SUBJECT = {
    RecordType.COUNTRY: "BRICS countries",
    RecordType.RISK: "BRICS risks",
}

COUNTRY_DESCRIPTIONS = {
    "Brazil": "Largest country in South America, known for its Amazon rainforest and diverse population",
    "Russia": "World's largest country by land area, spanning Eastern Europe and Northern Asia",
    "India": "World's largest democracy, with a rapidly growing economy and diverse culture",
    "China": "World's most populous country and second-largest economy",
    "South Africa": "Most developed country in Africa, known for its mineral resources and diverse wildlife",
    "Egypt": "Ancient civilization and key player in Middle Eastern and African affairs",
    "Ethiopia": "One of Africa's fastest-growing economies and home to diverse cultures",
    "Indonesia": "World's largest archipelago and Southeast Asia's largest economy",
    "Iran": "Major regional power with rich cultural heritage and significant natural resources",
    "United Arab Emirates": "Modern federation of seven emirates known for rapid development and oil wealth",
}

RISK_DESCRIPTIONS = {
    "Air pollution": "Environmental risk caused by harmful substances in the air, affecting respiratory health",
    "Unsafe water, sanitation, and handwashing": "Risk from contaminated water sources, leading to waterborne diseases",
    "Occupational risks": "Combined risks from workplace hazards and environmental factors",
    "Non-optimal temperature": "Risk caused by extreme environmental temperature, either too hot or too cold",
}


def type_label(record_type: RecordType) -> str:
    return record_type.label


def metric_label(metric: Metric) -> str:
    return metric.value


def treemap_title(state: SelectionState) -> str:
    return f"Distribution of maternal deaths by {state.record_type.value} ({state.metric.value})"


def line_chart_title(state: SelectionState, year_range: tuple[int, int] = DEFAULT_YEAR_RANGE) -> str:
    """Averaged-trend label in the aggregate view, "<Type>: <item>" when drilled down."""
    if state.selected_item is None:
        start, end = year_range
        return f"{_AGGREGATE_SUBJECT[state.record_type]} avg value in {start}-{end}"
    return f"{state.record_type.label}: {state.selected_item}"


def default_decimals(metric: Metric) -> int:
    return 4 if metric is Metric.PERCENT else 0


def format_value(value: float, metric: Metric, decimals: Optional[int] = None) -> str:
    """Format a value for display; percents are already in [0, 100]."""
    if decimals is None:
        decimals = default_decimals(metric)
    if metric is Metric.PERCENT:
        return f"{value:.{decimals}f}%"
    return f"{value:.{decimals}f}"


def hover_value_format(metric: Metric, field: str = "y", decimals: Optional[int] = None) -> str:
    """Plotly hovertemplate snippet that renders like format_value()."""
    if decimals is None:
        decimals = default_decimals(metric)
    suffix = "%" if metric is Metric.PERCENT else ""
    return f"%{{{field}:.{decimals}f}}{suffix}"


def category_description(record_type: RecordType, category: str) -> str:
    """Short legend blurb for a known country or risk; empty when unknown."""
    table = COUNTRY_DESCRIPTIONS if record_type is RecordType.COUNTRY else RISK_DESCRIPTIONS
    return table.get(category, "")


def short_label(name: str, limit: int = 20) -> str:
    """Truncate a category name for in-cell treemap text."""
    if len(name) > limit:
        return name[:limit] + "..."
    return name
