"""
Centralised logging configuration for the dealership backend.
Everything goes to the console and to a rotating file whose location and
rotation limits come from settings (LOG_DIR, LOG_FILE, LOG_MAX_BYTES,
LOG_BACKUP_COUNT).
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from dealership.config import settings

DEFAULT_LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "logs")
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_configured = False


def log_file_path(config=settings) -> str:
    return os.path.join(config.LOG_DIR or DEFAULT_LOG_DIR, config.LOG_FILE)


def build_handlers(config=settings) -> list[logging.Handler]:
    """Console and rotating-file handlers at the configured level."""
    level = config.LOG_LEVEL.upper()
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    path = log_file_path(config)
    os.makedirs(os.path.dirname(path), exist_ok=True)

    console = logging.StreamHandler()
    file_handler = RotatingFileHandler(
        filename=path,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    for handler in (console, file_handler):
        handler.setLevel(level)
        handler.setFormatter(fmt)
    return [console, file_handler]


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL.upper())
    for handler in build_handlers():
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
