"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and custom Rich handlers.
Why: Provide a single canonical import path for application logging.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger
from .handlers import MetadataEventRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "MetadataEventRichHandler",
    "logger",
    "setup_logger",
]
