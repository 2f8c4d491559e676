"""Logging setup for cheatview.

Standard Logger Initialization Pattern
--------------------------------------
Modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

and the CLI calls setup_tui_logging() once before the app starts. Output goes
to a file only, since anything written to the terminal would corrupt the TUI.
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config.constants import (
    LOG_BACKUP_DAYS,
    LOG_DATE_FORMAT,
    LOG_FILE_NAME,
    LOG_FORMAT,
)
from ..config.settings import TRACE, get_log_dir

PACKAGE_LOGGER = "cheatview"

logging.addLevelName(TRACE, "TRACE")


def setup_tui_logging(level: int = logging.INFO, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Set up file logging for the TUI.

    The root logger is set to WARNING to keep third-party libraries quiet.
    The cheatview logger gets the requested level. The file rotates at
    midnight, so each day gets its own log.

    Returns:
        The package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if package_logger.handlers:
        return package_logger

    try:
        log_dir = log_dir or get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        handler: logging.Handler = TimedRotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            when="midnight",
            backupCount=LOG_BACKUP_DAYS,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    except OSError as e:
        # Logging is what's failing, so stderr is the only place to say so
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)
        handler = logging.NullHandler()

    package_logger.addHandler(handler)
    package_logger.propagate = False

    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(logging.WARNING)
        root.addHandler(handler)

    return package_logger
