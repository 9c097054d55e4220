"""
Logging configuration for lexshift.

The library itself only creates module loggers under the "lexshift"
namespace and never installs handlers on import. Applications (and the
command-line tool) call setup_logging() once at startup.

Optional file output goes to <log_dir>/lexshift-YYYY-MM-DD.log with daily
rotation; console output goes to stderr so stdout stays clean for results.
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "lexshift"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class FlushingHandler(logging.handlers.TimedRotatingFileHandler):
    """Handler that flushes after every emit for immediate visibility."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    backup_count: int = 30,  # Keep 30 days of logs
    console: bool = True,
) -> logging.Logger:
    """
    Set up logging for lexshift.

    Args:
        log_dir: Directory for daily-rotated log files (default: no file output)
        level: Logging level (default: INFO)
        backup_count: Number of daily backup files to keep (default: 30 days)
        console: If True, also log to stderr

    Returns:
        Configured "lexshift" logger

    Edge Cases:
        - Calling twice does not add duplicate handlers, but the level is
          always updated to the latest value.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    has_file_handler = any(
        isinstance(h, logging.handlers.TimedRotatingFileHandler)
        for h in logger.handlers
    )
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    )

    want_file = log_dir is not None and not has_file_handler
    want_console = console and not has_console_handler
    if not want_file and not want_console:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if want_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"lexshift-{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = FlushingHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Log file: {log_file}")

    if want_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.debug(f"Log level: {logging.getLevelName(level)}")
    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a lexshift logger instance.

    Args:
        name: Logger name (default: "lexshift")

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
