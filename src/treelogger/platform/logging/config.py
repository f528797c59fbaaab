"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Expose the package diagnostics logger and an opt-in console/file setup.
Why: A library must not configure logging on import; entry points call
``setup_logger`` when they own the process.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from treelogger.sinks.stdlib import VERBOSE

from .handlers import ShortLevelRichHandler


LOGGER_NAME: Final[str] = "treelogger"


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up console (and optional rotating file) output for the package logger."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else console_level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = ShortLevelRichHandler(
        console=console if console is not None else Console(stderr=True, soft_wrap=True)
    )
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def setup_record_logger(name: str, console: Console | None = None) -> logging.Logger:
    """Route every level of logger ``name`` to its own Rich console handler.

    Used when a process forwards tree logger records to ``logging`` itself
    and should show them regardless of the diagnostics level.
    """

    record_logger = logging.getLogger(name)
    record_logger.setLevel(VERBOSE)
    record_logger.propagate = False

    for handler in list(record_logger.handlers):
        handler.close()
    record_logger.handlers.clear()

    record_logger.addHandler(
        ShortLevelRichHandler(
            console=console if console is not None else Console(stderr=True, soft_wrap=True)
        )
    )
    return record_logger


logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


__all__ = ["LOGGER_NAME", "setup_logger", "setup_record_logger", "logger"]
