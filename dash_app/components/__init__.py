"""Layout components for the dashboard page."""
