"""
Logging configuration for the World Hub core.
Provides centralized logging setup.
"""

import logging
import sys

from .config import LOG_DIR, LOG_FORMAT, LOG_LEVEL, LOG_TO_FILE

# Log file path
LOG_FILE = LOG_DIR / "worldhub.log"


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with both file and console handlers.

    Args:
        name: Name of the logger (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # File handler - detailed logs
    if LOG_TO_FILE:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    # Console handler - INFO and above
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger


def log_session_stats(sessions, logger: logging.Logger, name: str = "Sessions"):
    """Log statistics about a list of session records."""
    if not sessions:
        logger.debug(f"{name}: no sessions")
        return

    dates = [s.date for s in sessions]
    logger.debug(
        f"{name}: {len(sessions)} records, "
        f"date range: {min(dates)} to {max(dates)}"
    )
