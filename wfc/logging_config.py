"""
Logging setup for the wfc package.

The package itself only creates module loggers under the "wfc" namespace,
applications call setup_logging() once at startup to see their output.

Usage:
    from wfc.logging_config import setup_logging
    setup_logging(logging.DEBUG, log_file="wfc.log")
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB per file
BACKUP_COUNT = 5  # Keep 5 backup files


def setup_logging(
    console_level: int = logging.INFO,
    log_file: Optional[Union[Path, str]] = None,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """
    Configure the "wfc" logger.

    Safe to call more than once, earlier handlers are replaced.

    Args:
        console_level: Level for console output on stderr (default: INFO)
        log_file: Optional path of a rotating log file
        file_level: Level for file logging (default: DEBUG)

    Returns:
        The configured "wfc" logger
    """
    root_logger = logging.getLogger("wfc")
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers (for re-initialization)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(
        fmt="%(levelname)-8s | %(name)-15s | %(message)s"
    ))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-15s | %(funcName)-20s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        root_logger.addHandler(file_handler)

    # Don't hand records to the root logger as well
    root_logger.propagate = False
    return root_logger
