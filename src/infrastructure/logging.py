"""
Logging setup.

Provides consistent logging across the codebase and a console logger
for inline value tracing.
"""

import logging
import sys
from typing import Final, Optional

TRACE_LOGGER_NAME: Final[str] = "src.trace"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None
) -> None:
    """
    Setup logging to stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses default if None)
    """
    if format_string is None:
        format_string = (
            "%(asctime)s - %(name)s - %(levelname)s - "
            "%(message)s"
        )

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def get_trace_logger() -> logging.Logger:
    """
    Get the console logger used by inline tracing.

    When no handler is configured anywhere up the logger hierarchy, a bare
    stdout handler is attached so traced values are always visible.

    Returns:
        Logger instance at INFO level (unless a level was set explicitly)
    """
    logger = get_logger(TRACE_LOGGER_NAME)
    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    if not logger.hasHandlers():
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger
