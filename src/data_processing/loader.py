"""
Data loader abstractions for the BRICS maternal mortality dashboard.

Turns the source CSV files into typed Observation records:
- linechart_country.csv / linechart_risk_average_val1.csv -> time-series set
- treemap.csv -> snapshot set

The DataLoader ABC defines the contract for all loader implementations.
Malformed rows are dropped (and counted) rather than raised, so a partially
broken source still renders what it can.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pandas as pd

from core import PathConfig, default_paths
from core.logging_config import get_logger
from core.models import Dataset, Observation, RecordType

logger = get_logger(__name__)


@dataclass
class LoadResult:
    """Result of a data load operation.

    Attributes:
        records: The valid Observations, in source order
        source: Description of the data source (e.g., "file:/path/to/file.csv")
        row_count: Number of raw rows read
        dropped_count: Number of rows rejected as missing/malformed
        columns: Column names present in the source
        load_time_seconds: Time taken to load the data
    """
    records: tuple[Observation, ...]
    source: str
    row_count: int
    dropped_count: int = 0
    columns: list[str] = field(default_factory=list)
    load_time_seconds: float = 0.0


# Columns every source must have; the category column depends on record type
REQUIRED_COLUMNS = ["val", "metrics"]


class DataLoader(ABC):
    """Abstract base class for observation loaders."""

    @abstractmethod
    def load(self) -> LoadResult:
        """Load observations from the source.

        Raises:
            FileNotFoundError: If the data source doesn't exist
            ValueError: If the source is missing required columns
        """

    @abstractmethod
    def validate_source(self) -> tuple[bool, str]:
        """Check if the data source is valid and accessible.

        Returns:
            Tuple of (is_valid, message).
        """

    @property
    @abstractmethod
    def source_description(self) -> str:
        """Human-readable description of the data source."""

    def required_columns(self) -> list[str]:
        return list(REQUIRED_COLUMNS)

    def validate_dataframe(self, df: pd.DataFrame) -> tuple[bool, list[str]]:
        """Validate that a DataFrame has all required columns.

        Returns:
            Tuple of (is_valid, missing_columns).
        """
        missing = [col for col in self.required_columns() if col not in df.columns]
        return len(missing) == 0, missing


class CsvObservationLoader(DataLoader):
    """Loads observations from a CSV file.

    Numeric coercion of ``val`` and ``year`` happens here. Rows that fail
    coercion, carry an unknown metric/type, or have no category name are
    dropped.

    Args:
        file_path: Path to the CSV file
        record_type: Fixed record type for every row (per-type line chart
            files); None to read it from the ``type`` column
        require_year: Drop rows without a valid year (time-series sources)
    """

    def __init__(
        self,
        file_path: Path | str,
        record_type: Optional[RecordType] = None,
        require_year: bool = False,
    ):
        self.file_path = Path(file_path)
        self.record_type = record_type
        self.require_year = require_year

    def validate_source(self) -> tuple[bool, str]:
        """Check if the file exists and is a CSV."""
        if not self.file_path.exists():
            return False, f"File not found: {self.file_path}"

        ext = self.file_path.suffix.lower()
        if ext != ".csv":
            return False, f"Unsupported file type: {ext}. Must be .csv"

        return True, "OK"

    @property
    def source_description(self) -> str:
        return f"file:{self.file_path}"

    def required_columns(self) -> list[str]:
        columns = list(REQUIRED_COLUMNS)
        if self.record_type is None:
            columns.append("type")
        else:
            columns.append(self.record_type.category_column)
        if self.require_year:
            columns.append("year")
        return columns

    def load(self) -> LoadResult:
        start_time = time.time()

        is_valid, msg = self.validate_source()
        if not is_valid:
            raise FileNotFoundError(msg)

        logger.info(f"Reading csv file: {self.file_path}")
        df = pd.read_csv(self.file_path, skipinitialspace=True)

        is_valid, missing = self.validate_dataframe(df)
        if not is_valid:
            raise ValueError(f"{self.file_path.name} missing required columns: {missing}")

        # Coerce numerics up front; unparseable values become NaN and the row is dropped
        df["val"] = pd.to_numeric(df["val"], errors="coerce")
        if "year" in df.columns:
            df["year"] = pd.to_numeric(df["year"], errors="coerce")

        records = []
        for row in df.to_dict(orient="records"):
            obs = Observation.from_row(
                row,
                record_type=self.record_type,
                require_year=self.require_year,
            )
            if obs is not None:
                records.append(obs)

        dropped = len(df) - len(records)
        if dropped:
            logger.warning(
                f"Dropped {dropped} malformed row(s) of {len(df)} from {self.file_path.name}"
            )

        load_time = time.time() - start_time
        logger.info(f"Loaded {len(records)} observations from {self.file_path.name} in {load_time:.2f}s")

        return LoadResult(
            records=tuple(records),
            source=self.source_description,
            row_count=len(df),
            dropped_count=dropped,
            columns=list(df.columns),
            load_time_seconds=load_time,
        )


def _load_part(loaders: list[DataLoader]) -> Optional[tuple[Observation, ...]]:
    """Load and concatenate several sources; None if any of them fails."""
    records: list[Observation] = []
    for loader in loaders:
        try:
            result = loader.load()
        except FileNotFoundError as exc:
            logger.warning(f"{exc}; this part of the dashboard will render empty")
            return None
        except (ValueError, pd.errors.ParserError, UnicodeDecodeError):
            logger.exception(f"Failed to read {loader.source_description}")
            return None
        records.extend(result.records)
    return tuple(records)


def time_series_loaders(paths: Optional[PathConfig] = None) -> list[DataLoader]:
    """Loaders for the line chart's year-bearing records (country then risk)."""
    paths = paths or default_paths
    return [
        CsvObservationLoader(paths.country_series_csv, RecordType.COUNTRY, require_year=True),
        CsvObservationLoader(paths.risk_series_csv, RecordType.RISK, require_year=True),
    ]


def snapshot_loaders(paths: Optional[PathConfig] = None) -> list[DataLoader]:
    """Loaders for the treemap's per-category records."""
    paths = paths or default_paths
    return [CsvObservationLoader(paths.treemap_csv)]


def load_dataset(paths: Optional[PathConfig] = None) -> Dataset:
    """Load both record sets.

    The two sets are loaded independently: a missing or broken time-series
    file leaves ``time_series`` as None while the snapshot still loads, and
    vice versa.

    Examples:
        >>> dataset = load_dataset()
        >>> dataset = load_dataset(PathConfig(base_dir=Path("/srv/dashboard")))
    """
    paths = paths or default_paths
    dataset = Dataset(
        time_series=_load_part(time_series_loaders(paths)),
        snapshot=_load_part(snapshot_loaders(paths)),
    )
    logger.info(f"Dataset loaded from {paths.data_dir} ({dataset.summary()})")
    return dataset
