"""Logging utilities.

We use Python's standard `logging` module with the same one-line format everywhere.
The library modules only create named loggers (`tokenized_string.*`); handlers are
installed here, by the CLI.

- Console output always goes to stderr so stdout stays clean for command results.
- With a log directory, logs also go to `<log_dir>/tokenized-string.log`.
"""

from __future__ import annotations
import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(level: str = "WARNING", log_dir: Optional[str] = None) -> None:
    """
    Setup logging configuration.

    Args:
        level: Level name for the package logger (DEBUG, INFO, WARNING, ...)
        log_dir: Directory for a log file (console only if None)
    """
    logger = logging.getLogger("tokenized_string")
    logger.setLevel(level.upper())
    # replace handlers from earlier calls
    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # File
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(os.path.join(log_dir, "tokenized-string.log"), encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)
