"""
Configuration module for the maternal mortality dashboard.

This module provides access to configuration settings loaded from TOML files.
Primary configuration file: config/dashboard.toml

Usage:
    from config import get_dashboard_config

    config = get_dashboard_config()
    print(config.server.port)
    print(config.line_chart.dimensions)
"""

import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

from visualization.scales import ChartDimensions, Margins


@dataclass
class ServerConfig:
    """Dash server settings."""
    host: str = "127.0.0.1"
    port: int = 8050
    debug: bool = False


@dataclass
class DataConfig:
    """Source data settings."""
    directory: str = ""  # empty = <repo>/data, or MORTALITY_DATA_DIR
    year_start: int = 1990
    year_end: int = 2021

    @property
    def year_range(self) -> tuple[int, int]:
        return (self.year_start, self.year_end)


@dataclass
class ChartConfig:
    """Pixel size and margins of one chart."""
    width: int = 800
    height: int = 400
    margin_top: int = 20
    margin_right: int = 30
    margin_bottom: int = 30
    margin_left: int = 60

    @property
    def dimensions(self) -> ChartDimensions:
        return ChartDimensions(
            width=self.width,
            height=self.height,
            margins=Margins(
                top=self.margin_top,
                right=self.margin_right,
                bottom=self.margin_bottom,
                left=self.margin_left,
            ),
        )


def _default_treemap() -> ChartConfig:
    return ChartConfig(
        width=800, height=600,
        margin_top=20, margin_right=20, margin_bottom=20, margin_left=20,
    )


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    file_logging: bool = False
    directory: str = "logs"

    @property
    def level_number(self) -> Optional[int]:
        """Numeric logging level, or None if the name is not a known level."""
        value = logging.getLevelName(str(self.level).upper())
        return value if isinstance(value, int) else None


@dataclass
class DashboardConfig:
    """Complete dashboard configuration."""
    server: ServerConfig = field(default_factory=ServerConfig)
    data: DataConfig = field(default_factory=DataConfig)
    line_chart: ChartConfig = field(default_factory=ChartConfig)
    treemap: ChartConfig = field(default_factory=_default_treemap)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> list[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid).
        """
        errors = []

        if not 0 < self.server.port < 65536:
            errors.append(f"Invalid server port: {self.server.port}")

        if self.data.year_end < self.data.year_start:
            errors.append(
                f"data.year_end ({self.data.year_end}) cannot be before "
                f"data.year_start ({self.data.year_start})"
            )

        for name, chart in (("charts.line", self.line_chart), ("charts.treemap", self.treemap)):
            if chart.width <= chart.margin_left + chart.margin_right:
                errors.append(f"{name}.width leaves no room inside its margins")
            if chart.height <= chart.margin_top + chart.margin_bottom:
                errors.append(f"{name}.height leaves no room inside its margins")

        if self.logging.level_number is None:
            errors.append(f"Unknown logging level: {self.logging.level}")

        return errors


def _parse_chart(data: dict, default: ChartConfig) -> ChartConfig:
    """Parse a chart section from TOML data, falling back to ``default`` per key."""
    margins = data.get("margins", {})
    return ChartConfig(
        width=data.get("width", default.width),
        height=data.get("height", default.height),
        margin_top=margins.get("top", default.margin_top),
        margin_right=margins.get("right", default.margin_right),
        margin_bottom=margins.get("bottom", default.margin_bottom),
        margin_left=margins.get("left", default.margin_left),
    )


def load_dashboard_config(config_path: Optional[Path] = None) -> DashboardConfig:
    """
    Load dashboard configuration from TOML file.

    Args:
        config_path: Path to the TOML config file. Defaults to config/dashboard.toml.

    Returns:
        DashboardConfig dataclass with all settings.

    Raises:
        tomllib.TOMLDecodeError: If the TOML is invalid.
    """
    if config_path is None:
        config_path = Path(__file__).parent / "dashboard.toml"

    if not config_path.exists():
        # Return default config if file doesn't exist
        return DashboardConfig()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    server_data = data.get("server", {})
    server = ServerConfig(
        host=server_data.get("host", "127.0.0.1"),
        port=server_data.get("port", 8050),
        debug=server_data.get("debug", False),
    )

    data_section = data.get("data", {})
    data_config = DataConfig(
        directory=data_section.get("directory", ""),
        year_start=data_section.get("year_start", 1990),
        year_end=data_section.get("year_end", 2021),
    )

    charts_data = data.get("charts", {})
    line_chart = _parse_chart(charts_data.get("line", {}), ChartConfig())
    treemap = _parse_chart(charts_data.get("treemap", {}), _default_treemap())

    logging_data = data.get("logging", {})
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        file_logging=logging_data.get("file_logging", False),
        directory=logging_data.get("directory", "logs"),
    )

    return DashboardConfig(
        server=server,
        data=data_config,
        line_chart=line_chart,
        treemap=treemap,
        logging=logging_config,
    )


# Module-level cached config (loaded on first access)
_cached_config: Optional[DashboardConfig] = None


def get_dashboard_config() -> DashboardConfig:
    """
    Get the dashboard configuration (cached after first load).

    Returns:
        DashboardConfig dataclass with all settings.
    """
    global _cached_config
    if _cached_config is None:
        _cached_config = load_dashboard_config()
    return _cached_config


def reload_dashboard_config() -> DashboardConfig:
    """
    Reload the dashboard configuration from disk.

    Returns:
        DashboardConfig dataclass with all settings.
    """
    global _cached_config
    _cached_config = load_dashboard_config()
    return _cached_config


# Export public API
__all__ = [
    "DashboardConfig",
    "ServerConfig",
    "DataConfig",
    "ChartConfig",
    "LoggingConfig",
    "load_dashboard_config",
    "get_dashboard_config",
    "reload_dashboard_config",
]
