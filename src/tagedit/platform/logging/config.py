"""Logging bootstrap for tagedit.

Where: platform/logging/config.py
What: Build the shared ``tagedit`` logger and map CLI verbosity to levels.
Why: Stdout carries tag data, so every handler here targets stderr or a file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import TagEventRichHandler

LOGGER_NAME: Final[str] = "tagedit"
LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5
FILE_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def level_for_verbosity(*, verbose: bool, quiet: bool) -> int:
    """Return the console level for the ``--verbose``/``--quiet`` flags.

    ``--quiet`` wins when both are given.
    """
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.INFO


def _rotating_file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the ``tagedit`` logger.

    Existing handlers are closed and replaced, so calling this again after
    the config file is loaded is safe.

    Args:
        log_file: Optional rotating log file; console-only when ``None``.
        console_level: Threshold for the stderr console handler.
        file_level: Threshold for the log file handler.

    Returns:
        logging.Logger: The configured ``tagedit`` logger.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)
    app_logger.propagate = False

    for existing in list(app_logger.handlers):
        app_logger.removeHandler(existing)
        existing.close()

    console_handler = TagEventRichHandler(console=Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    app_logger.addHandler(console_handler)

    if log_file is not None:
        app_logger.addHandler(_rotating_file_handler(log_file, file_level))

    return app_logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["LOGGER_NAME", "level_for_verbosity", "logger", "setup_logger"]
