"""Where: src/treelogger/domain/levels.py
What: Closed set of log severities and their one-letter display tags.
Why: Give sinks a stable level vocabulary without imposing a filtering order.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class LogLevel(Enum):
    """Severity attached to every log record."""

    VERBOSE = "V"
    DEBUG = "D"
    INFO = "I"
    WARN = "W"
    ERROR = "E"
    ASSERT = "A"

    @property
    def short_tag(self) -> str:
        """Return the one-letter tag used by console style output."""

        return self.value

    @staticmethod
    def from_user_input(value: str) -> "LogLevel":
        """Translate a level name or short tag (any case) into a member."""

        normalized = value.strip().upper()
        for level in LogLevel:
            if normalized in {level.name, level.value}:
                return level
        valid: Final[str] = ", ".join(level.name.lower() for level in LogLevel)
        msg = f"Unsupported log level '{value}'. Valid options: {valid}"
        raise ValueError(msg)


__all__ = ["LogLevel"]
