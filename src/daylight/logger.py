"""
Logging configuration for the diagnostic stream.

Everything goes to stderr; stdout carries only the sunrise/sunset report.
"""

import logging
import sys
from typing import Optional, Union

from daylight import config


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configure the "daylight" logger.

    Args:
        level: Log level; defaults to DAYLIGHT_LOG_LEVEL

    Returns:
        Logger instance for daylight
    """
    logger = logging.getLogger("daylight")
    logger.setLevel(config.LOG_LEVEL if level is None else level)

    # Prevent propagation to root logger
    logger.propagate = False

    # Remove any existing handlers (for repeated setup)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    # Format: "2025-01-15 14:30:45 - daylight.solar - DEBUG - Hour angle: 91.66"
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)

    return logger
