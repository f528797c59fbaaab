"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helper, and custom Rich handler.
Why: Provide a single canonical import path for diagnostics.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger, setup_record_logger
from .handlers import ShortLevelRichHandler

__all__ = [
    "LOGGER_NAME",
    "ShortLevelRichHandler",
    "logger",
    "setup_logger",
    "setup_record_logger",
]
