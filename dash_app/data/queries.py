"""
Thin wrapper around the shared dataset loader.

Resolves the data directory from the dashboard configuration and loads the
dataset once per process; every session reads the same immutable Dataset.
"""

from functools import lru_cache
from pathlib import Path

from config import get_dashboard_config
from core import PathConfig, default_paths
from core.models import Dataset
from data_processing.loader import load_dataset

ROOT_DIR = Path(__file__).resolve().parents[2]


def resolve_paths() -> PathConfig:
    """PathConfig for the configured data directory (default: <repo>/data)."""
    directory = get_dashboard_config().data.directory
    if directory:
        data_dir = Path(directory).expanduser()
        if not data_dir.is_absolute():
            data_dir = ROOT_DIR / data_dir
        return PathConfig(base_dir=ROOT_DIR, _data_dir=data_dir)
    return default_paths


@lru_cache(maxsize=1)
def get_dataset() -> Dataset:
    """Load both record sets on first use and keep them for the process lifetime."""
    return load_dataset(resolve_paths())


def load_initial_data() -> dict:
    """Record counts for the header (JSON-serializable)."""
    dataset = get_dataset()
    return {
        "time_series_rows": len(dataset.time_series) if dataset.time_series is not None else 0,
        "snapshot_rows": len(dataset.snapshot) if dataset.snapshot is not None else 0,
        "time_series_available": dataset.has_time_series,
        "snapshot_available": dataset.has_snapshot,
    }
