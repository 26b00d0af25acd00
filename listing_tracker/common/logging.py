"""Logging configuration for the listing tracker."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Third-party loggers that log every request at DEBUG
NOISY_LOGGERS = ("urllib3", "requests")


def setup_logging(
    level: int = logging.INFO,
    module_name: str = "listing_tracker",
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    Calling again for the same logger only updates its level.

    Args:
        level: Logging level (default INFO).
        module_name: Name for the logger instance.
        stream: Output stream (default stdout). Pass sys.stderr to keep
            stdout free for command output.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

    return logger
