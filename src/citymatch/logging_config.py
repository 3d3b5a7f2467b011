"""
Logging Configuration Module

One ``citymatch`` logger tree shared by the API, the CLIs and the
aggregation/matching code.

Usage:
    from citymatch.logging_config import setup_logging, get_logger

    setup_logging()  # Call once at application startup
    logger = get_logger(__name__)
    logger.info("Aggregated %d rows", count)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from citymatch.config import get_config

PACKAGE_LOGGER = "citymatch"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("werkzeug", "urllib3")

_logging_configured = False


def _build_handlers(numeric_level: int, log_file: Optional[str]) -> list:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """Configure logging for the application.

    Args:
        level: Log level name. Defaults to ``CITYMATCH_LOG_LEVEL`` or INFO.
        log_file: Optional log file; console output is always enabled.
        force: Reconfigure even if logging was already set up.
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    settings = get_config().logging
    level = (level or settings.level).upper()
    numeric_level = getattr(logging, level, logging.INFO)
    if log_file is None:
        log_file = settings.log_file

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()
    for handler in _build_handlers(numeric_level, log_file):
        package_logger.addHandler(handler)
    package_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the ``citymatch`` tree.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance.
    """
    if not _logging_configured:
        setup_logging()

    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"

    return logging.getLogger(name)


def reset_logging() -> None:
    """Reset logging configuration (useful for testing)."""
    global _logging_configured
    _logging_configured = False
    logging.getLogger(PACKAGE_LOGGER).handlers.clear()
