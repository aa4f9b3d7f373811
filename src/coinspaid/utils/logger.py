"""Centralized logging configuration."""

import logging
import sys
from datetime import datetime

from .config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d:%(funcName)s] - %(message)s"


class MicrosecondFormatter(logging.Formatter):
    """Formatter with microsecond precision in timestamps.

    Example output:
        2026-01-15 14:23:45.123456 - coinspaid - INFO - [rest.py:88:_post] - Message here
    """

    def formatTime(self, record, datefmt=None):
        ct = datetime.fromtimestamp(record.created)
        if datefmt:
            return f"{ct.strftime(datefmt)}.{ct.microsecond:06d}"
        return ct.isoformat(sep=" ", timespec="microseconds")


def resolve_level(level_name: str) -> int:
    """Map a level name such as "debug" or "WARNING" to its logging constant.

    Unknown names fall back to INFO.
    """
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str | None = None, level_name: str | None = None) -> logging.Logger:
    """Set up and return a configured logger.

    Name and level default to ``Config.LOGGER_NAME`` and ``Config.LOG_LEVEL``.
    Handlers are attached once per logger name.
    """
    logger = logging.getLogger(name or Config.LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(MicrosecondFormatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(resolve_level(level_name or Config.LOG_LEVEL))

    return logger


logger = setup_logger()
