"""
Core module for the BRICS maternal mortality dashboard.

Contains configuration, the record model, and shared utilities used across the application.
"""

from core.config import PathConfig, default_paths
from core.models import Dataset, Metric, Observation, RecordType, SelectionState
from core.logging_config import setup_logging, get_logger

__all__ = [
    "PathConfig",
    "default_paths",
    "Dataset",
    "Metric",
    "Observation",
    "RecordType",
    "SelectionState",
    "setup_logging",
    "get_logger",
]
