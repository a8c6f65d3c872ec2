"""
Logging setup for shelf scripts.

Library modules only call `logging.getLogger(__name__)`; entry points call
`setup_logger()` once to send records to stderr.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "shelf",
    level: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the `shelf` logger with a single stderr handler.

    Args:
        name: Logger name.
        level: DEBUG, INFO, WARNING, ... Defaults to $SHELF_LOG_LEVEL, then INFO.
        format_string: Format for the stderr handler.

    Returns:
        The configured logger. Calling again replaces the previous handler.
    """
    logger = logging.getLogger(name)
    logger.handlers.clear()

    level_name = (level or os.getenv("SHELF_LOG_LEVEL") or "INFO").upper()
    log_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(handler)
    return logger
