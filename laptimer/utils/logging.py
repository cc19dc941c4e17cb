"""Logging utilities built on top of :mod:`loguru`."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

# Library code stays quiet until an application opts in.
logger.disable("laptimer")


def setup_logging(log_file: Optional[Union[str, Path]] = None, level: str = "INFO") -> None:
    """Configure the global loguru logger and enable ``laptimer`` records.

    Args:
        log_file: Optional file path for a rotating log sink.
        level: Minimum log level (string understood by loguru).
    """

    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level, rotation="10 MB", retention="7 days")
    logger.enable("laptimer")


__all__ = ["setup_logging", "logger"]
