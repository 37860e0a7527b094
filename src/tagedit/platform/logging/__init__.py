"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper, and tag event handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import LOGGER_NAME, level_for_verbosity, logger, setup_logger
from .handlers import TagEvent, TagEventRichHandler

__all__ = [
    "LOGGER_NAME",
    "TagEvent",
    "TagEventRichHandler",
    "level_for_verbosity",
    "logger",
    "setup_logger",
]
