"""
Test suite for the BRICS maternal mortality dashboard.

This package contains unit tests and integration tests for:
- Core configuration and models (config.py, models.py)
- Data loading, filtering and yearly aggregation (loader.py, filters.py, aggregation.py)
- Selection state machine, titles and render model (selection.py, labels.py, render_model.py)
- Scales, colours and Plotly figures (scales.py, plotly_generator.py)
- Dash callback helpers (dash_app/callbacks)
"""
