"""
Logging configuration for rainwater harvesting design system.

Console output carries one line per calculation phase; the log file keeps the
per-stage debug trace (velocities, pipe and filter choices, pit sizing) when
run at DEBUG.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional
from datetime import datetime

DEFAULT_LOG_FILE = "logs/rainwater_harvesting.log"

# Third-party loggers that are noisy at INFO during rainfall lookups
_QUIET_LOGGERS = ("urllib3", "requests")


def setup_logger(
    name: str = "rainwater_harvesting",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Set up the application logger.

    Args:
        name: Logger name
        log_file: Path to log file. If None, uses LOG_FILE env var or the default
        log_level: Level for the logger and the file handler

    Returns:
        Configured logger instance
    """
    if log_file is None:
        log_file = os.getenv("LOG_FILE", DEFAULT_LOG_FILE)

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(max(level, logging.INFO))
    console_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(console_handler)

    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    logger.propagate = False

    for noisy in _QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger


class LoggerContext:
    """
    Context manager timing one operation.

    Keyword arguments are attached to every line, e.g.
    ``LoggerContext(logger, "design calculation", lat=18.52, lng=73.85)`` logs
    ``Starting design calculation (lat=18.52, lng=73.85)``.
    """

    def __init__(self, logger: logging.Logger, operation: str, **context: Any):
        self.logger = logger
        self.operation = operation
        self.context = context
        self.start_time: Optional[datetime] = None

    @property
    def label(self) -> str:
        if not self.context:
            return self.operation
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.operation} ({details})"

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.info(f"Starting {self.label}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            self.logger.error(
                f"Failed {self.label} after {duration:.2f}s: {exc_val}",
                exc_info=True
            )
            return False

        self.logger.info(f"Completed {self.label} in {duration:.2f}s")
        return False
