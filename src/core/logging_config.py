"""
Logging configuration for the BRICS maternal mortality dashboard.

Provides structured logging setup with console and optional file handlers.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


ROOT_LOGGER_NAME = "mortality"

# Default log format: timestamp, level, module name, message
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"



def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    console: bool = True,
    file_logging: bool = False,
) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (default: INFO)
        log_dir: Directory for log files (default: ./logs/)
        console: Whether to log to console/stdout (default: True)
        file_logging: Whether to log to file (default: False)

    Returns:
        Root logger configured for the application

    Usage:
        # Basic setup - console only
        logger = setup_logging()

        # Debug mode with a log file under ./logs
        logger = setup_logging(level=logging.DEBUG, file_logging=True)
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Clear any existing handlers to avoid duplicates on re-initialization
    root_logger.handlers.clear()

    root_logger.setLevel(level)
    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if file_logging:
        if log_dir is None:
            log_dir = Path("./logs")

        log_dir.mkdir(parents=True, exist_ok=True)

        log_filename = f"dashboard_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        log_path = log_dir / log_filename

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance configured as child of the root mortality logger

    Usage:
        from core.logging_config import get_logger
        logger = get_logger(__name__)
        logger.info("Loaded %d rows", n)
    """
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
