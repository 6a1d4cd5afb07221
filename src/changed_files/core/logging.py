from __future__ import annotations

import logging
import os

LOGGER_NAME = "changed_files"
LEVEL_ENV = "CHANGED_FILES_LOG_LEVEL"


def default_level() -> int:
    """Level used without ``--verbose``; ``CHANGED_FILES_LOG_LEVEL`` overrides WARNING."""
    name = os.environ.get(LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING


def get_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        # stderr only; stdout carries the result line
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(default_level())
    return logger


def set_verbose(enabled: bool) -> None:
    get_logger().setLevel(logging.DEBUG if enabled else default_level())
