"""
logger.py
==========
Provides a centralized logger for the alias content checker.
Handles console and (optional) file logging with consistent formatting.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional

DEFAULT_LOGGER_NAME = "AliasCheck"


# ----------------------------------------------------------------------
# Logger Configuration
# ----------------------------------------------------------------------
def get_logger(
    name: str = DEFAULT_LOGGER_NAME,
    log_dir: Optional[str] = None,
    level: str = "INFO",
) -> logging.Logger:
    """
    Create or return a logger instance with a console handler and,
    when log_dir is given, a daily file handler.
    :param name: Logger name, default is 'AliasCheck'
    :param log_dir: Directory for alias_check_YYYYMMDD.log files (None = console only)
    :param level: Console log level name
    :return: Configured logger instance

    Handlers are set up on the first call for a given name only; later
    calls return that logger unchanged, ignoring log_dir and level.
    """

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    if logger.handlers:
        # Already configured by an earlier call
        return logger

    # ------------------------------------------------------------------
    # File Handler (writes to <log_dir>/alias_check_YYYYMMDD.log)
    # ------------------------------------------------------------------
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(
            log_dir, f"alias_check_{datetime.now().strftime('%Y%m%d')}.log"
        )
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    # ------------------------------------------------------------------
    # Console Handler
    # ------------------------------------------------------------------
    console_handler = logging.StreamHandler(sys.stderr)
    console_formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    logger.addHandler(console_handler)

    return logger
