"""Logging setup shared by the CLI and the examples."""

import sys
from datetime import datetime
from pathlib import Path

from loguru import logger

from ev3_python.definitions import (
    DATE_FORMAT,
    DEFAULT_LOG_FILENAME,
    DEFAULT_LOG_LEVEL,
    LOG_DIR,
)


def setup_logger(
    filename: str = DEFAULT_LOG_FILENAME,
    stderr_level: str = DEFAULT_LOG_LEVEL,
    log_level: str = DEFAULT_LOG_LEVEL,
    log_dir: Path | None = None,
) -> Path:
    """Replace the default loguru sink with a stderr sink and a file sink.

    :param filename: Log file name stem; a timestamp is appended.
    :param stderr_level: Minimum level printed to stderr.
    :param log_level: Minimum level written to the log file.
    :param log_dir: Directory for the log file (default: data/logs).
    :return: Path of the log file.
    """
    log_dir = LOG_DIR if log_dir is None else Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    filepath = log_dir / f"{filename}_{datetime.now().strftime(DATE_FORMAT)}.log"

    logger.remove()
    logger.add(sys.stderr, level=stderr_level)
    logger.add(filepath, level=log_level)
    logger.debug(f"Logging to {filepath}")
    return filepath
