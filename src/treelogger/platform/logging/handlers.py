"""Where: src/treelogger/platform/logging/handlers.py
What: Rich handler rendering records as ``[W][tag]message`` lines.
Why: Records forwarded by ``StdlibSimpleLogger`` and the package's own
diagnostics read the same as console sink output.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler

from treelogger.domain.levels import LogLevel
from treelogger.sinks.console import ConsoleSimpleLogger


class ShortLevelRichHandler(RichHandler):
    """Rich handler that prefixes messages with one-letter level and tag."""

    _STDLIB_LEVELS: ClassVar[tuple[tuple[int, LogLevel], ...]] = (
        (logging.CRITICAL, LogLevel.ASSERT),
        (logging.ERROR, LogLevel.ERROR),
        (logging.WARNING, LogLevel.WARN),
        (logging.INFO, LogLevel.INFO),
        (logging.DEBUG, LogLevel.DEBUG),
    )

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False  # Level is rendered as part of the message
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def level_for(cls, record: logging.LogRecord) -> LogLevel:
        """Return the tree level carried by ``record`` or the closest match."""

        level = getattr(record, "treelogger_level", None)
        if isinstance(level, LogLevel):
            return level
        for threshold, mapped in cls._STDLIB_LEVELS:
            if record.levelno >= threshold:
                return mapped
        return LogLevel.VERBOSE

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render the message with the short level tag and optional tree tag."""

        tag = getattr(record, "treelogger_tag", None)
        return ConsoleSimpleLogger.render_line(
            self.level_for(record),
            tag if isinstance(tag, str) else None,
            message,
        )


__all__ = ["ShortLevelRichHandler"]
