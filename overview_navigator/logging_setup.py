"""Logging configuration for hosts embedding the navigator."""

import logging
import os
import sys

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Setup logging to stderr, level taken from ``LOG_LEVEL``."""
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(levelname)s [%(name)s] %(message)s"
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={log_level}")
