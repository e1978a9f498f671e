"""Entry point for the Dash application."""
import logging
import sys
from pathlib import Path

# Ensure src/ is on sys.path so that core/, data_processing/, etc. are importable
_src_dir = str(Path(__file__).resolve().parent / "src")
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from config import get_dashboard_config
from core.logging_config import setup_logging, get_logger

_config = get_dashboard_config()
setup_logging(
    level=_config.logging.level_number or logging.INFO,
    log_dir=Path(_config.logging.directory),
    file_logging=_config.logging.file_logging,
)
logger = get_logger(__name__)

for problem in _config.validate():
    logger.warning(f"Configuration problem: {problem}")

from dash_app.app import app

if __name__ == "__main__":
    app.run(host=_config.server.host, port=_config.server.port, debug=_config.server.debug)
