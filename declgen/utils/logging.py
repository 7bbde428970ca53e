"""
Logging for the declgen package.

Every module logs through ``get_logger(__name__)`` under the ``declgen``
logger. Importing the package installs no output of its own: the package
logger only carries a NullHandler until an application calls
``setup_logging`` or configures ``logging`` itself.
"""

import logging
import os
from typing import List, Optional

PACKAGE_LOGGER = "declgen"
LOG_LEVEL_ENV = "DECLGEN_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Optional[str]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    resolved = logging.getLevelName(level.upper())
    # getLevelName returns a "Level X" string for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Send declgen log records to stderr, and optionally to a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL); read from
            DECLGEN_LOG_LEVEL when omitted, INFO when unknown
        log_file: Optional file path for log output
    """
    log_level = _resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(log_level)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``declgen`` package logger.

    ``get_logger(__name__)`` and ``get_logger("codegen")`` both land under
    ``declgen``.
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())
