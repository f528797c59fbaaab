"""Where: src/treelogger/core/tree_logger.py
What: ``TreeLogger``, a logger node with a default tag, a bound sink and an
enablement link to the node it was derived from.
Why: Let callers retag, intercept and branch log output while a single
``disable()`` higher up silences every derived logger.

Derived loggers hold their parent's enablement check, never the parent itself.
The effective state is pulled on every write, so toggling an ancestor takes
effect immediately for all descendants without any notification.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from enum import Enum
from types import ModuleType
from typing import Any, ClassVar, Final, override

from treelogger.core.composite import (
    BranchingSimpleLogger,
    FailureMap,
    InterceptingSimpleLogger,
    LevelMap,
    MessageMap,
)
from treelogger.domain.levels import LogLevel
from treelogger.domain.ports import Logger, SimpleLogger
from treelogger.sinks.console import default_console_sink

EnabledCheck = Callable[[], bool]


class _Keep(Enum):
    TAG = "keep"


KEEP_TAG: Final = _Keep.TAG
"""Marker meaning "reuse the current default tag" in ``derive``/``intercept``."""


def context_tag(obj: object) -> str:
    """Infer a tag from ``obj``: qualified name of classes and functions,
    module name for modules, otherwise the class name of the instance."""

    if isinstance(obj, ModuleType):
        return obj.__name__
    qualname = getattr(obj, "__qualname__", None)
    if isinstance(qualname, str) and qualname:
        return qualname
    return type(obj).__name__


class TreeLogger(Logger):
    """Hierarchical logger node.

    Args:
        tag: Default tag used when a call site supplies none.
        sink: Backend receiving every enabled write. Defaults to a console sink.
        parent_enabled: Enablement check of the node this one was derived
            from. Set by :meth:`derive`; root loggers leave it ``None``.

    A logger bound to :attr:`SimpleLogger.EMPTY` starts disabled; any other
    sink starts enabled.
    """

    EMPTY: ClassVar["TreeLogger"]

    def __init__(
        self,
        tag: str | None = None,
        sink: SimpleLogger | None = None,
        parent_enabled: EnabledCheck | None = None,
    ) -> None:
        self._tag: str | None = tag
        self._sink: SimpleLogger = sink if sink is not None else default_console_sink()
        self._parent_enabled: EnabledCheck | None = parent_enabled
        self._local_enabled: Final[threading.Event] = threading.Event()
        if not self._sink.is_empty():
            self._local_enabled.set()

    @property
    def tag(self) -> str | None:
        return self._tag

    @property
    def sink(self) -> SimpleLogger:
        return self._sink

    @property
    def is_enabled(self) -> bool:
        """Local flag AND the effective state of every ancestor, recomputed per call."""

        return self._effective_enabled()

    def _effective_enabled(self) -> bool:
        if not self._local_enabled.is_set():
            return False
        return self._parent_enabled is None or self._parent_enabled()

    def is_empty(self) -> bool:
        return self._sink.is_empty()

    def enable(self) -> None:
        """Turn this node back on. Output still depends on the ancestors."""

        self._local_enabled.set()

    def disable(self) -> None:
        """Turn this node off, silencing every logger derived from it."""

        self._local_enabled.clear()

    @override
    def log(
        self,
        level: LogLevel,
        message: str | None = None,
        failure: BaseException | None = None,
        *,
        tag: str | None = None,
    ) -> None:
        if not self._effective_enabled():
            return
        self._sink.write(level, tag if tag is not None else self._tag, message, failure)

    # Transformations --------------------------------------------------------

    def derive(
        self,
        tag: str | None | _Keep = KEEP_TAG,
        sink: SimpleLogger | None = None,
    ) -> "TreeLogger":
        """Create a logger whose enablement follows this one.

        Every transformation goes through here; subclasses override it to
        keep their own type across ``with_tag``/``intercept``/``branch``.
        """

        return TreeLogger(
            tag=self._tag if tag is KEEP_TAG else tag,
            sink=sink if sink is not None else self._sink,
            parent_enabled=self._effective_enabled,
        )

    def with_tag(self, tag: str | None) -> "TreeLogger":
        return self.derive(tag=tag)

    def __getitem__(self, key: Any) -> "TreeLogger":
        """``logger["Net"]`` retags; ``logger[obj]`` infers the tag from ``obj``."""

        if isinstance(key, str):
            return self.with_tag(key)
        return self.with_tag(context_tag(key))

    def intercept(
        self,
        level_map: LevelMap | None = None,
        message_map: MessageMap | None = None,
        failure_map: FailureMap | None = None,
        new_tag: str | None | _Keep = KEEP_TAG,
    ) -> "TreeLogger":
        """Create a logger that rewrites each record before this logger's sink sees it.

        Omitted maps leave their field unchanged. A logger bound to the empty
        sink is returned as-is.
        """

        if self.is_empty():
            return self
        sink = InterceptingSimpleLogger(
            self._sink,
            level_map=level_map,
            message_map=message_map,
            failure_map=failure_map,
        )
        return self.derive(tag=new_tag, sink=sink)

    def branch(self, additional_sink: SimpleLogger) -> "TreeLogger":
        """Create a logger writing to this logger's sink and then ``additional_sink``."""

        return self.derive(sink=BranchingSimpleLogger(self._sink, additional_sink))

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self._tag!r}, sink={self._sink!r})"


TreeLogger.EMPTY = TreeLogger(tag=None, sink=SimpleLogger.EMPTY)


class SimpleTreeLogger(TreeLogger):
    """Root logger printing to the console."""

    def __init__(self, tag: str | None = None) -> None:
        super().__init__(tag=tag, sink=default_console_sink())


__all__ = ["EnabledCheck", "KEEP_TAG", "SimpleTreeLogger", "TreeLogger", "context_tag"]
