"""
Configuration module for the BRICS maternal mortality dashboard.

Contains PathConfig dataclass for centralizing all data file references.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


DATA_DIR_ENV_VAR = "MORTALITY_DATA_DIR"


@dataclass
class PathConfig:
    """
    Centralizes all file paths used across the application.

    Attributes:
        base_dir: Root directory of the application (defaults to current working directory)
        data_dir: Directory containing the source CSV files (defaults to base_dir/data)
    """

    base_dir: Path = field(default_factory=Path.cwd)
    _data_dir: Optional[Path] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Set the default data directory relative to base_dir if not provided."""
        if self._data_dir is None:
            self._data_dir = self.base_dir / "data"

    @classmethod
    def from_env(cls, base_dir: Optional[Path] = None) -> "PathConfig":
        """Build a PathConfig, honouring the MORTALITY_DATA_DIR override."""
        base = base_dir or Path.cwd()
        env = os.getenv(DATA_DIR_ENV_VAR)
        if env:
            return cls(base_dir=base, _data_dir=Path(env).expanduser().resolve())
        return cls(base_dir=base)

    @property
    def data_dir(self) -> Path:
        """Directory containing the source CSV files."""
        # _data_dir is always set after __post_init__
        assert self._data_dir is not None
        return self._data_dir

    # Time-series (line chart) sources
    @property
    def country_series_csv(self) -> Path:
        """Per-country yearly values."""
        return self.data_dir / "linechart_country.csv"

    @property
    def risk_series_csv(self) -> Path:
        """Per-risk yearly values, averaged across the BRICS countries."""
        return self.data_dir / "linechart_risk_average_val1.csv"

    # Snapshot (treemap) source
    @property
    def treemap_csv(self) -> Path:
        """Per-category totals for both record types."""
        return self.data_dir / "treemap.csv"

    def validate(self) -> list[str]:
        """
        Validate that the data directory and source files exist.

        Returns:
            List of error messages. Empty list means all validations passed.
        """
        errors = []

        if not self.data_dir.exists():
            errors.append(f"Data directory not found: {self.data_dir}")

        required_files = [
            (self.country_series_csv, "Country time series"),
            (self.risk_series_csv, "Risk time series"),
            (self.treemap_csv, "Treemap snapshot"),
        ]

        for file_path, description in required_files:
            if not file_path.exists():
                errors.append(f"{description} not found: {file_path}")

        return errors


# Default instance for application-wide use
default_paths = PathConfig.from_env(Path(__file__).resolve().parents[2])
