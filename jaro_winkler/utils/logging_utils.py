"""Logging utilities for jaro_winkler."""

import logging
from typing import Optional

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> None:
    """Configure logging for applications that embed the scorers.

    The library itself never calls this; scorer modules only emit DEBUG
    records through their module loggers.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a file to log to in addition to stderr
        fmt: Log record format

    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=fmt,
        handlers=handlers,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance

    """
    return logging.getLogger(name)
