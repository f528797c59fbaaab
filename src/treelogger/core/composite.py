"""Where: src/treelogger/core/composite.py
What: Sink decorators used by ``TreeLogger.intercept`` and ``TreeLogger.branch``.
Why: Rewriting and fan-out are expressed as sinks wrapping other sinks, so a
derived logger never needs to know how its parent writes.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, final, override

from treelogger.domain.levels import LogLevel
from treelogger.domain.ports import SimpleLogger

LevelMap = Callable[[LogLevel], LogLevel]
MessageMap = Callable[[str | None], str | None]
FailureMap = Callable[[BaseException | None], BaseException | None]


def _same(value: Any) -> Any:
    return value


@final
class InterceptingSimpleLogger(SimpleLogger):
    """Rewrite level, message and failure on every write before delegating."""

    def __init__(
        self,
        wrapped: SimpleLogger,
        *,
        level_map: LevelMap | None = None,
        message_map: MessageMap | None = None,
        failure_map: FailureMap | None = None,
    ) -> None:
        self._wrapped: SimpleLogger = wrapped
        self._level_map: LevelMap = level_map or _same
        self._message_map: MessageMap = message_map or _same
        self._failure_map: FailureMap = failure_map or _same

    @override
    def write(
        self,
        level: LogLevel,
        tag: str | None,
        message: str | None,
        failure: BaseException | None,
    ) -> None:
        # Tag is resolved by the calling logger and passes through untouched.
        self._wrapped.write(
            self._level_map(level),
            tag,
            self._message_map(message),
            self._failure_map(failure),
        )


@final
class BranchingSimpleLogger(SimpleLogger):
    """Write every record to ``primary`` and then to ``additional``."""

    def __init__(self, primary: SimpleLogger, additional: SimpleLogger) -> None:
        self._primary: SimpleLogger = primary
        self._additional: SimpleLogger = additional

    @override
    def write(
        self,
        level: LogLevel,
        tag: str | None,
        message: str | None,
        failure: BaseException | None,
    ) -> None:
        self._primary.write(level, tag, message, failure)
        self._additional.write(level, tag, message, failure)


__all__ = [
    "BranchingSimpleLogger",
    "FailureMap",
    "InterceptingSimpleLogger",
    "LevelMap",
    "MessageMap",
]
