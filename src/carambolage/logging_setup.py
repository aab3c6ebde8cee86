"""
Logging setup - Console and optional file logging for runners.

Library modules only create ``logging.getLogger(__name__)`` loggers; call
``setup_logging`` once from an entry point to route them somewhere.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str | int = "INFO",
    log_file: Path | str | None = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Level name (e.g. "DEBUG") or logging constant
        log_file: Also write to this file, rotated at 1 MB with 2 backups
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(
            RotatingFileHandler(Path(log_file), maxBytes=1_000_000, backupCount=2)
        )

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
