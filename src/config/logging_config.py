# src/config/logging_config.py

"""Per-run timestamped logging configuration for the catalog console.

Each launch writes a dedicated log file inside ``logs/`` named after the
launch time (e.g. ``logs/run_20261017_093012.log``).  Every ``catalog.*``
logger propagates into it, so API calls, cache decisions, and UI events
from one session read top to bottom in a single file.

The stderr handler is quiet by default (WARNING+).  Set
``CATALOG_LOG_LEVEL`` to e.g. ``INFO`` to see more while running the
headless commands.  The TUI owns the terminal, so it launches with
``console=False`` and relies on the file alone.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(threadName)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "catalog"


def _console_level() -> int:
    """Resolve the stderr level from ``CATALOG_LOG_LEVEL``."""
    name = os.getenv("CATALOG_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(console: bool = True) -> Path:
    """Initialise the root ``catalog`` logger for the current run.

    Args:
        console: Attach a stderr handler in addition to the log file.

    Returns:
        The :class:`~pathlib.Path` to the log file created for this run.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{timestamp}.log"

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Repeated calls (tests, TUI relaunch) keep the first run's handlers
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(_console_level())
        console_handler.setFormatter(
            logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(console_handler)

    root_logger.info(
        "Logging initialised (api=%s) log file: %s",
        Settings.API_BASE_URL,
        log_file,
    )

    return log_file
