"""Where: src/treelogger/domain/ports.py
What: Sink (``SimpleLogger``) and caller-facing ``Logger`` contracts.
Why: Loggers only ever talk to a sink through one four-field write, so any
backend can be plugged in; every public entry point reduces to ``Logger.log``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar, final, override

from treelogger.domain.levels import LogLevel
from treelogger.domain.records import failure_message

WriteFunction = Callable[[LogLevel, str | None, str | None, BaseException | None], None]


class SimpleLogger(ABC):
    """Backend capability that performs the effect of writing one record."""

    EMPTY: ClassVar["SimpleLogger"]

    @abstractmethod
    def write(
        self,
        level: LogLevel,
        tag: str | None,
        message: str | None,
        failure: BaseException | None,
    ) -> None:
        """Write one record. Exceptions raised here reach the caller."""
        ...

    def is_empty(self) -> bool:
        """Return whether this instance is the shared no-op sink.

        The test is by identity: another sink that happens to do nothing is
        not considered empty.
        """

        return self is SimpleLogger.EMPTY


@final
class FunctionSimpleLogger(SimpleLogger):
    """Adapt a plain callable into a sink."""

    def __init__(self, func: WriteFunction) -> None:
        self._func: WriteFunction = func

    @override
    def write(
        self,
        level: LogLevel,
        tag: str | None,
        message: str | None,
        failure: BaseException | None,
    ) -> None:
        self._func(level, tag, message, failure)

    @override
    def __repr__(self) -> str:
        return f"FunctionSimpleLogger({self._func!r})"


def simple_logger(func: WriteFunction) -> SimpleLogger:
    """Decorator turning ``func(level, tag, message, failure)`` into a sink."""

    return FunctionSimpleLogger(func)


@final
class _EmptySimpleLogger(SimpleLogger):
    @override
    def write(
        self,
        level: LogLevel,
        tag: str | None,
        message: str | None,
        failure: BaseException | None,
    ) -> None:
        return None

    @override
    def __repr__(self) -> str:
        return "SimpleLogger.EMPTY"


SimpleLogger.EMPTY = _EmptySimpleLogger()


def _join_args(args: tuple[Any, ...]) -> str:
    return "[" + ", ".join(str(arg) for arg in args) + "]"


class Logger(ABC):
    """Caller-facing logging contract.

    Every entry point builds the same four fields (level, tag, message,
    failure) and hands them to :meth:`log`, which implementations use as
    their single gate. A ``tag`` of ``None`` means "use the logger's default".
    """

    @abstractmethod
    def log(
        self,
        level: LogLevel,
        message: str | None = None,
        failure: BaseException | None = None,
        *,
        tag: str | None = None,
    ) -> None:
        """Emit one record with every field given explicitly."""
        ...

    def log_failure(self, level: LogLevel, failure: BaseException) -> None:
        """Emit ``failure`` using its own text as the message."""

        self.log(level, failure_message(failure), failure)

    def log_args(self, level: LogLevel, *args: Any) -> None:
        """Emit ``args`` rendered as ``"[a, b, ...]"``.

        A trailing exception is pulled out as the record's failure. When it
        is the only argument, its text becomes the message instead.
        """

        failure = args[-1] if args and isinstance(args[-1], BaseException) else None
        if failure is None:
            self.log(level, _join_args(args))
            return

        remaining = args[:-1]
        if not remaining:
            self.log(level, failure_message(failure), failure)
            return
        self.log(level, _join_args(remaining), failure)

    def log_message(self, level: LogLevel, message: str, failure: BaseException) -> None:
        self.log(level, message, failure)

    def log_tagged(self, level: LogLevel, tag: str | None, message: str) -> None:
        self.log(level, message, tag=tag)

    # Level shortcuts -----------------------------------------------------------

    def verbose(
        self, message: str | None, failure: BaseException | None = None, *, tag: str | None = None
    ) -> None:
        self.log(LogLevel.VERBOSE, message, failure, tag=tag)

    def debug(
        self, message: str | None, failure: BaseException | None = None, *, tag: str | None = None
    ) -> None:
        self.log(LogLevel.DEBUG, message, failure, tag=tag)

    def info(
        self, message: str | None, failure: BaseException | None = None, *, tag: str | None = None
    ) -> None:
        self.log(LogLevel.INFO, message, failure, tag=tag)

    def warn(
        self, message: str | None, failure: BaseException | None = None, *, tag: str | None = None
    ) -> None:
        self.log(LogLevel.WARN, message, failure, tag=tag)

    def error(
        self, message: str | None, failure: BaseException | None = None, *, tag: str | None = None
    ) -> None:
        self.log(LogLevel.ERROR, message, failure, tag=tag)

    def wtf(
        self, message: str | None, failure: BaseException | None = None, *, tag: str | None = None
    ) -> None:
        """Emit at ``ASSERT`` level ("what a terrible failure")."""

        self.log(LogLevel.ASSERT, message, failure, tag=tag)


__all__ = [
    "FunctionSimpleLogger",
    "Logger",
    "SimpleLogger",
    "WriteFunction",
    "simple_logger",
]
