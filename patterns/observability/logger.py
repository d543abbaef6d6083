"""Diagnostic logging for pattern events (subscribe, notify, sort, send).

Demo output is printed to stdout; diagnostics go to stderr so the two never mix.
"""

import logging
import sys
from typing import Union

ROOT_LOGGER_NAME = "patterns"


def get_logger(name: str, level: int = logging.NOTSET) -> logging.Logger:
    """Return a logger under ``patterns``; the single stderr handler lives on ``patterns`` itself."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
            )
        )
        root.addHandler(handler)
        root.propagate = False
    logger = logging.getLogger(name)
    if level != logging.NOTSET:
        logger.setLevel(level)
    return logger


def configure_logging(level: Union[int, str]) -> None:
    """Set the level for every logger under ``patterns``."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
