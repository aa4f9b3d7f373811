"""Configuration and logging helpers."""

from .config import Config
from .logger import logger, resolve_level, setup_logger

__all__ = ["Config", "logger", "resolve_level", "setup_logger"]
