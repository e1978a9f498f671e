"""
Visualization package for the dashboard's linked views.

- scales: Domain, pixel-scale and categorical colour calculations
- plotly_generator: Plotly treemap and line chart figures built from a RenderModel
"""

from visualization.scales import (
    PALETTE,
    ChartDimensions,
    LinearScale,
    Margins,
    assign_colors,
    color_for_index,
    x_domain,
    y_domain,
)

__all__ = [
    "PALETTE",
    "ChartDimensions",
    "LinearScale",
    "Margins",
    "assign_colors",
    "color_for_index",
    "x_domain",
    "y_domain",
]
