"""Tests for the sink contract and its identity-based empty check."""

from __future__ import annotations

import pytest

from treelogger.domain import FunctionSimpleLogger, LogLevel, SimpleLogger, simple_logger


def test_empty_sink_is_singleton_and_does_nothing() -> None:
    assert SimpleLogger.EMPTY.is_empty() is True
    assert SimpleLogger.EMPTY.write(LogLevel.INFO, "t", "m", None) is None


def test_function_sink_forwards_all_fields() -> None:
    received: list[tuple[object, ...]] = []
    failure = ValueError("v")

    sink = FunctionSimpleLogger(lambda *fields: received.append(fields))
    sink.write(LogLevel.ERROR, "tag", "msg", failure)

    assert received == [(LogLevel.ERROR, "tag", "msg", failure)]
    assert sink.is_empty() is False


def test_decorated_function_becomes_sink() -> None:
    @simple_logger
    def sink(level: LogLevel, tag: str | None, message: str | None, failure: BaseException | None) -> None:
        return None

    assert isinstance(sink, SimpleLogger)


def test_simple_logger_requires_write() -> None:
    with pytest.raises(TypeError):
        _ = SimpleLogger()  # pyright: ignore[reportAbstractUsage]
