"""Shared pytest fixtures for treelogger tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import override

import pytest

from treelogger.domain import LogLevel, LogRecord, SimpleLogger


class RecordingSimpleLogger(SimpleLogger):
    """Sink keeping every write in memory, optionally appending to a shared journal."""

    def __init__(self, name: str = "recording", journal: list[str] | None = None) -> None:
        self.name: str = name
        self.records: list[LogRecord] = []
        self._journal: list[str] | None = journal

    @override
    def write(
        self,
        level: LogLevel,
        tag: str | None,
        message: str | None,
        failure: BaseException | None,
    ) -> None:
        self.records.append(LogRecord(level, tag, message, failure))
        if self._journal is not None:
            self._journal.append(self.name)


@pytest.fixture
def make_sink() -> Callable[..., RecordingSimpleLogger]:
    """Factory producing independent recording sinks."""

    return RecordingSimpleLogger


@pytest.fixture
def sink() -> RecordingSimpleLogger:
    """A single recording sink."""

    return RecordingSimpleLogger()


@pytest.fixture(autouse=True)
def _restore_package_loggers() -> Iterator[None]:
    """Undo handler and level changes made by CLI setup during a test."""

    saved: list[tuple[logging.Logger, list[logging.Handler], int, bool]] = []
    for name in ("treelogger", "treelog"):
        target = logging.getLogger(name)
        saved.append((target, list(target.handlers), target.level, target.propagate))
    try:
        yield None
    finally:
        for target, handlers, level, propagate in saved:
            target.handlers[:] = handlers
            target.setLevel(level)
            target.propagate = propagate
