"""Logging setup for tally.

Log records go to stderr through rich, keeping stdout free for the
interactive menu.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "tally"


def setup_logging(level: str = "WARNING", logger_name: str = LOGGER_NAME) -> logging.Logger:
    """Setup rich logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Name of the logger

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    return logger
