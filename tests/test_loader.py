"""
Tests for data_processing/loader.py - CSV observation loading.

Tests cover:
- CsvObservationLoader reading each source file
- Dropping (and counting) malformed rows
- Missing files and missing columns
- load_dataset() loading the two record sets independently
"""

from pathlib import Path

import pytest

from core.config import PathConfig
from core.models import Metric, RecordType
from data_processing.loader import (
    CsvObservationLoader,
    LoadResult,
    load_dataset,
    snapshot_loaders,
    time_series_loaders,
)


class TestCsvObservationLoader:
    """Test CsvObservationLoader against the sample CSVs."""

    def test_country_series_drops_unparseable_value(self, mock_data_dir: Path):
        loader = CsvObservationLoader(
            mock_data_dir / "linechart_country.csv", RecordType.COUNTRY, require_year=True
        )

        result = loader.load()

        assert isinstance(result, LoadResult)
        assert result.row_count == 5
        assert result.dropped_count == 1
        assert len(result.records) == 4
        assert all(obs.record_type is RecordType.COUNTRY for obs in result.records)
        assert [obs.category for obs in result.records] == ["India", "India", "China", "India"]

    def test_country_series_values_and_years(self, mock_data_dir: Path):
        loader = CsvObservationLoader(
            mock_data_dir / "linechart_country.csv", RecordType.COUNTRY, require_year=True
        )

        first = loader.load().records[0]

        assert first.year == 1990
        assert first.value == pytest.approx(1.5)
        assert first.metric is Metric.PERCENT

    def test_risk_series_drops_row_without_year(self, mock_data_dir: Path):
        loader = CsvObservationLoader(
            mock_data_dir / "linechart_risk_average_val1.csv", RecordType.RISK, require_year=True
        )

        result = loader.load()

        assert len(result.records) == 3
        assert result.dropped_count == 1
        assert all(obs.year is not None for obs in result.records)

    def test_treemap_reads_type_column(self, mock_data_dir: Path):
        result = CsvObservationLoader(mock_data_dir / "treemap.csv").load()

        assert len(result.records) == 5
        assert result.dropped_count == 1
        types = {obs.category: obs.record_type for obs in result.records}
        assert types["India"] is RecordType.COUNTRY
        assert types["Air pollution"] is RecordType.RISK
        assert "Mars" not in types
        assert all(obs.year is None for obs in result.records)

    def test_missing_file_raises(self, temp_dir: Path):
        loader = CsvObservationLoader(temp_dir / "absent.csv")

        with pytest.raises(FileNotFoundError):
            loader.load()

    def test_missing_columns_raise(self, temp_dir: Path):
        path = temp_dir / "bad.csv"
        path.write_text("year,value\n1990,1.0\n")

        with pytest.raises(ValueError, match="missing required columns"):
            CsvObservationLoader(path, RecordType.COUNTRY).load()

    def test_validate_source_rejects_other_extensions(self, temp_dir: Path):
        path = temp_dir / "data.json"
        path.write_text("{}")

        is_valid, message = CsvObservationLoader(path).validate_source()

        assert not is_valid
        assert "Unsupported file type" in message

    def test_required_columns_depend_on_options(self):
        assert CsvObservationLoader("x.csv").required_columns() == ["val", "metrics", "type"]
        assert CsvObservationLoader("x.csv", RecordType.RISK, require_year=True).required_columns() == [
            "val", "metrics", "cause", "year",
        ]

    def test_source_description(self, temp_dir: Path):
        loader = CsvObservationLoader(temp_dir / "treemap.csv")
        assert loader.source_description == f"file:{temp_dir / 'treemap.csv'}"


class TestLoaderFactories:
    """Test the per-set loader lists."""

    def test_time_series_loaders_cover_both_types(self, mock_data_dir: Path):
        paths = PathConfig(base_dir=mock_data_dir.parent)

        loaders = time_series_loaders(paths)

        assert [loader.record_type for loader in loaders] == [RecordType.COUNTRY, RecordType.RISK]
        assert all(loader.require_year for loader in loaders)

    def test_snapshot_loader_reads_type_column(self, mock_data_dir: Path):
        paths = PathConfig(base_dir=mock_data_dir.parent)

        (loader,) = snapshot_loaders(paths)

        assert loader.record_type is None
        assert loader.file_path == paths.treemap_csv


class TestLoadDataset:
    """Test load_dataset()."""

    def test_loads_both_sets(self, mock_data_dir: Path):
        dataset = load_dataset(PathConfig(base_dir=mock_data_dir.parent))

        assert dataset.has_time_series
        assert dataset.has_snapshot
        assert len(dataset.time_series) == 7
        assert len(dataset.snapshot) == 5

    def test_missing_time_series_file_leaves_snapshot_loaded(self, mock_data_dir: Path):
        (mock_data_dir / "linechart_risk_average_val1.csv").unlink()

        dataset = load_dataset(PathConfig(base_dir=mock_data_dir.parent))

        assert dataset.time_series is None
        assert dataset.snapshot is not None
        assert len(dataset.snapshot) == 5

    def test_broken_snapshot_leaves_time_series_loaded(self, mock_data_dir: Path):
        (mock_data_dir / "treemap.csv").write_text("something,else\n1,2\n")

        dataset = load_dataset(PathConfig(base_dir=mock_data_dir.parent))

        assert dataset.snapshot is None
        assert dataset.time_series is not None

    def test_empty_directory_gives_empty_dataset(self, temp_dir: Path):
        dataset = load_dataset(PathConfig(base_dir=temp_dir))

        assert not dataset.has_time_series
        assert not dataset.has_snapshot
