"""
Tests for core/config.py (PathConfig) and config/ (dashboard TOML settings).

Tests cover:
- Default and custom data directory construction
- MORTALITY_DATA_DIR override
- Source file path properties
- validate() for missing directory/files
- load_dashboard_config() parsing and defaults
- DashboardConfig.validate()
"""

from pathlib import Path

import pytest

from config import ChartConfig, DashboardConfig, LoggingConfig, load_dashboard_config
from core.config import DATA_DIR_ENV_VAR, PathConfig
from visualization.scales import ChartDimensions, Margins


class TestPathConfigDefaults:
    """Test default behavior of PathConfig."""

    def test_default_base_dir_is_cwd(self):
        """Default base_dir should be current working directory."""
        config = PathConfig()
        assert config.base_dir == Path.cwd()

    def test_default_data_dir_is_under_base(self):
        """Default data_dir should be 'data' under base_dir."""
        config = PathConfig()
        assert config.data_dir == config.base_dir / "data"

    def test_custom_base_dir(self, temp_dir: Path):
        config = PathConfig(base_dir=temp_dir)
        assert config.data_dir == temp_dir / "data"

    def test_explicit_data_dir_wins(self, temp_dir: Path):
        config = PathConfig(base_dir=temp_dir, _data_dir=temp_dir / "elsewhere")
        assert config.data_dir == temp_dir / "elsewhere"


class TestPathConfigFromEnv:
    """Test the MORTALITY_DATA_DIR override."""

    def test_env_var_overrides_data_dir(self, temp_dir: Path, monkeypatch):
        monkeypatch.setenv(DATA_DIR_ENV_VAR, str(temp_dir / "csv"))

        config = PathConfig.from_env(temp_dir)

        assert config.data_dir == (temp_dir / "csv").resolve()

    def test_no_env_var_uses_base_dir(self, temp_dir: Path, monkeypatch):
        monkeypatch.delenv(DATA_DIR_ENV_VAR, raising=False)

        config = PathConfig.from_env(temp_dir)

        assert config.data_dir == temp_dir / "data"


class TestPathConfigProperties:
    """Test source file path properties."""

    def test_country_series_csv_path(self):
        config = PathConfig()
        assert config.country_series_csv == config.data_dir / "linechart_country.csv"

    def test_risk_series_csv_path(self):
        config = PathConfig()
        assert config.risk_series_csv == config.data_dir / "linechart_risk_average_val1.csv"

    def test_treemap_csv_path(self):
        config = PathConfig()
        assert config.treemap_csv == config.data_dir / "treemap.csv"


class TestPathConfigValidate:
    """Test validate() method."""

    def test_validate_passes_when_all_files_exist(self, mock_data_dir: Path):
        """validate() should return empty list when all files exist."""
        config = PathConfig(base_dir=mock_data_dir.parent)
        assert config.validate() == []

    def test_validate_fails_when_data_dir_missing(self, temp_dir: Path):
        config = PathConfig(base_dir=temp_dir)

        errors = config.validate()

        assert any("Data directory not found" in e for e in errors)

    def test_validate_reports_each_missing_file(self, temp_dir: Path):
        data_dir = temp_dir / "data"
        data_dir.mkdir()
        (data_dir / "treemap.csv").touch()

        errors = PathConfig(base_dir=temp_dir).validate()

        assert len(errors) == 2
        assert any("Country time series" in e for e in errors)
        assert any("Risk time series" in e for e in errors)


class TestLoadDashboardConfig:
    """Test load_dashboard_config() TOML parsing."""

    def test_missing_file_returns_defaults(self, temp_dir: Path):
        config = load_dashboard_config(temp_dir / "nope.toml")
        assert config == DashboardConfig()

    def test_shipped_config_is_valid(self):
        """The repository's config/dashboard.toml loads and validates cleanly."""
        config = load_dashboard_config()

        assert config.validate() == []
        assert config.data.year_range == (1990, 2021)
        assert config.line_chart.dimensions == ChartDimensions(800, 400, Margins(20, 30, 30, 60))
        assert config.treemap.dimensions.height == 600

    def test_partial_file_fills_in_defaults(self, temp_dir: Path):
        path = temp_dir / "dashboard.toml"
        path.write_text(
            "[server]\n"
            "port = 9000\n"
            "\n"
            "[charts.line]\n"
            "height = 500\n"
            "margins = { left = 80 }\n"
        )

        config = load_dashboard_config(path)

        assert config.server.port == 9000
        assert config.server.host == "127.0.0.1"
        assert config.line_chart.height == 500
        assert config.line_chart.width == 800
        assert config.line_chart.margin_left == 80
        assert config.line_chart.margin_top == 20
        assert config.treemap.height == 600

    def test_invalid_toml_raises(self, temp_dir: Path):
        path = temp_dir / "dashboard.toml"
        path.write_text("[server\nport = ")

        with pytest.raises(Exception):
            load_dashboard_config(path)


class TestDashboardConfigValidate:
    """Test DashboardConfig.validate()."""

    def test_defaults_are_valid(self):
        assert DashboardConfig().validate() == []

    def test_bad_port(self):
        config = DashboardConfig()
        config.server.port = 0
        assert any("port" in e for e in config.validate())

    def test_reversed_year_range(self):
        config = DashboardConfig()
        config.data.year_start = 2021
        config.data.year_end = 1990
        assert any("year_end" in e for e in config.validate())

    def test_chart_without_room(self):
        config = DashboardConfig(line_chart=ChartConfig(width=50, margin_left=30, margin_right=30))
        assert any("charts.line.width" in e for e in config.validate())

    def test_unknown_logging_level(self):
        config = DashboardConfig(logging=LoggingConfig(level="LOUD"))
        assert config.logging.level_number is None
        assert any("logging level" in e for e in config.validate())

    def test_level_name_is_case_insensitive(self):
        assert LoggingConfig(level="debug").level_number == 10
