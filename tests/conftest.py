"""
Pytest configuration and fixtures for the test suite.

This module provides shared fixtures used across multiple test modules.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from core.models import Dataset, Metric, Observation, RecordType

BRICS_COUNTRIES = [
    "Brazil",
    "Russia",
    "India",
    "China",
    "South Africa",
    "Egypt",
    "Ethiopia",
    "Indonesia",
    "Iran",
    "United Arab Emirates",
]

RISKS = [
    "Air pollution",
    "Unsafe water, sanitation, and handwashing",
    "Occupational risks",
    "Non-optimal temperature",
]

YEARS = list(range(1990, 2022))


def country_value(country_index: int, year: int, metric: Metric) -> float:
    """Deterministic sample value; Number is a scaled-up Percent."""
    percent = 1.0 + country_index * 0.5 + (year - 1990) * 0.05
    return percent if metric is Metric.PERCENT else percent * 1000


def risk_value(risk_index: int, year: int, metric: Metric) -> float:
    percent = 10.0 - risk_index * 2 - (year - 1990) * 0.1
    return percent if metric is Metric.PERCENT else percent * 500


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def time_series_records() -> tuple[Observation, ...]:
    """Country and risk yearly records for both metrics, 1990-2021."""
    records = []
    for metric in Metric:
        for i, country in enumerate(BRICS_COUNTRIES):
            for year in YEARS:
                records.append(Observation(
                    value=country_value(i, year, metric),
                    record_type=RecordType.COUNTRY,
                    metric=metric,
                    category=country,
                    year=year,
                ))
        for i, risk in enumerate(RISKS):
            for year in YEARS:
                records.append(Observation(
                    value=risk_value(i, year, metric),
                    record_type=RecordType.RISK,
                    metric=metric,
                    category=risk,
                    year=year,
                ))
    return tuple(records)


@pytest.fixture
def snapshot_records() -> tuple[Observation, ...]:
    """One year-less record per category, type and metric."""
    records = []
    for metric in Metric:
        for i, country in enumerate(BRICS_COUNTRIES):
            records.append(Observation(
                value=country_value(i, 2021, metric),
                record_type=RecordType.COUNTRY,
                metric=metric,
                category=country,
            ))
        for i, risk in enumerate(RISKS):
            records.append(Observation(
                value=risk_value(i, 2021, metric),
                record_type=RecordType.RISK,
                metric=metric,
                category=risk,
            ))
    return tuple(records)


@pytest.fixture
def sample_dataset(time_series_records, snapshot_records) -> Dataset:
    """Complete in-memory dataset."""
    return Dataset(time_series=time_series_records, snapshot=snapshot_records)


@pytest.fixture
def mock_data_dir(temp_dir: Path) -> Path:
    """
    Create a data directory holding the three source CSVs.

    Includes one malformed row per file so loaders can be checked for
    dropping rather than failing.
    """
    data_dir = temp_dir / "data"
    data_dir.mkdir()

    (data_dir / "linechart_country.csv").write_text(
        "year,val,metrics,location,cause\n"
        "1990,1.5,Percent,India,Environmental/occupational risks\n"
        "1991,1.7,Percent,India,Environmental/occupational risks\n"
        "1990,2.5,Percent,China,Environmental/occupational risks\n"
        "1991,not-a-number,Percent,China,Environmental/occupational risks\n"
        "1990,1500,Number,India,Environmental/occupational risks\n"
    )
    (data_dir / "linechart_risk_average_val1.csv").write_text(
        "year,val,metrics,cause\n"
        "1990,8.0,Percent,Air pollution\n"
        "1991,7.5,Percent,Air pollution\n"
        ",7.0,Percent,Air pollution\n"
        "1990,3.0,Percent,Occupational risks\n"
    )
    (data_dir / "treemap.csv").write_text(
        "val,metrics,type,location,cause\n"
        "30.5,Percent,country,India,\n"
        "25.0,Percent,country,China,\n"
        "12.0,Percent,risk,,Air pollution\n"
        "4.0,Percent,risk,,Occupational risks\n"
        "900,Number,country,India,\n"
        "5.0,Percent,planet,Mars,\n"
    )
    return data_dir
