"""
Logging setup.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .runtime import RuntimeConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure root logging with a stderr handler and an optional file handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
        log_file: Optional path to also write logs to
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )


def setup_logging_from_config(config: RuntimeConfig, log_file: Optional[str] = None) -> None:
    """Configure logging from a RuntimeConfig (debug wins over log_level)."""
    setup_logging(config.effective_log_level, log_file=log_file)
