"""
Logging setup for the tirecalc command line and server.

The library itself only creates module loggers; handlers are installed
here by the entry points.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level for the tirecalc logger

    Returns:
        The configured "tirecalc" logger
    """
    logger = logging.getLogger("tirecalc")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
