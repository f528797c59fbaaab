"""Where: src/treelogger/domain/records.py
What: Value types describing a single log record and its failure detail.
Why: Sinks and tests share one vocabulary for what a write carries.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass

from treelogger.domain.levels import LogLevel


def failure_message(failure: BaseException) -> str | None:
    """Return the display text of ``failure`` or ``None`` when it has none."""

    text = str(failure)
    return text or None


@dataclass(slots=True, frozen=True)
class FailureInfo:
    """Structured view of an exception: type name, message and traceback text."""

    type_name: str
    message: str | None
    stack_trace: str

    @classmethod
    def from_exception(cls, failure: BaseException) -> "FailureInfo":
        return cls(
            type_name=type(failure).__name__,
            message=failure_message(failure),
            stack_trace="".join(traceback.format_exception(failure)),
        )


@dataclass(slots=True, frozen=True)
class LogRecord:
    """One write as seen by a sink."""

    level: LogLevel
    tag: str | None = None
    message: str | None = None
    failure: BaseException | None = None


__all__ = ["FailureInfo", "LogRecord", "failure_message"]
