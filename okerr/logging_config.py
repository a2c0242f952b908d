"""Logging setup for the ``okerr`` package logger.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
configure handlers on import. Applications that want okerr's debug records
(failed unwraps, rejected wire values) call ``configure_logging``; the root
logger is left alone.

Usage:
    from okerr.logging_config import configure_logging

    configure_logging("DEBUG")
"""

import logging
import sys

from okerr.config import get_settings

PACKAGE_LOGGER = "okerr"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stdout handler to the ``okerr`` logger and set its level.

    Calling it again only updates the level; a second handler is never added.

    Args:
        level: Logging level name. Defaults to ``Settings.log_level``; unknown
            names fall back to INFO.

    Returns:
        The package logger
    """
    if level is None:
        level = get_settings().log_level
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    return logger
