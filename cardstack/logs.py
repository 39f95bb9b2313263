"""
Loguru sink configuration.

The interactive screens own stdout, so log output goes to stderr (and
optionally a file) and stays quiet below WARNING unless asked otherwise.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Replace loguru's default sink with cardstack's sinks."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    if log_file is not None:
        logger.add(
            log_file,
            level="DEBUG",
            format=FILE_FORMAT,
            rotation="1 MB",
            retention=3,
            encoding="utf-8",
        )
