"""Console logging for the command-line scripts.

Library modules only create loggers; call :func:`setup_logging` once from an
entry point to attach a handler.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_logging_configured = False


def setup_logging(log_level: Optional[str] = None) -> logging.Logger:
    """Configure the root logger with a stdout handler.

    Args:
        log_level: Level name; defaults to ``LOG_LEVEL`` from the environment, then INFO.

    Returns:
        The root logger.
    """
    global _logging_configured

    root_logger = logging.getLogger()
    if _logging_configured:
        return root_logger

    level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # pymongo logs every server heartbeat at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    _logging_configured = True
    return root_logger
