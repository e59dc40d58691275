"""Trackform logger bootstrap.

Where: platform/logging/config.py
What: Build the ``trackform`` logger with a metadata-aware console and a rotating log file.
Why: The CLI reconfigures levels and the log file once options and config are known.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from trackform.config.paths import default_log_file

from .handlers import MetadataEventRichHandler


DEFAULT_LOG_FILE: Final[Path] = default_log_file()
LOGGER_NAME: Final[str] = "trackform"

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s [%(metadata_event)s] %(message)s"
MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3


def _build_console_handler(level: int, console: Console | None) -> logging.Handler:
    # stdout is reserved for tag listings.
    handler = MetadataEventRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _build_file_handler(log_file: Path, level: int) -> logging.Handler:
    path = Path(log_file).expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, defaults={"metadata_event": "-"}))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """(Re)configure the ``trackform`` logger and return it.

    Existing handlers are closed and replaced, so repeated calls never
    duplicate output. The file handler is only attached when ``log_file``
    is given; its directory is created on demand.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    logger.addHandler(_build_console_handler(console_level, console))
    if log_file is not None:
        logger.addHandler(_build_file_handler(log_file, file_level))

    return logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "LOG_FORMAT", "setup_logger", "logger"]
