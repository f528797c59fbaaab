"""Tests for the structured (dict / JSON lines) sink."""

from __future__ import annotations

import json
import threading
from io import StringIO
from typing import Any

from treelogger.domain import LogLevel
from treelogger.sinks import StructuredSimpleLogger, default_extras, json_lines_output


def test_optional_fields_are_left_out() -> None:
    received: list[dict[str, Any]] = []

    StructuredSimpleLogger(received.append).write(LogLevel.INFO, None, None, None)

    assert received == [{"level": "INFO"}]


def test_record_fields_and_failure_detail() -> None:
    received: list[dict[str, Any]] = []
    try:
        raise RuntimeError("thw")
    except RuntimeError as exc:
        failure = exc

    StructuredSimpleLogger(received.append).write(LogLevel.ERROR, "tag", "msg", failure)

    data = received[0]
    assert data["level"] == "ERROR"
    assert data["tag"] == "tag"
    assert data["msg"] == "msg"
    assert data["thw"]["type"] == "RuntimeError"
    assert data["thw"]["msg"] == "thw"
    assert "RuntimeError: thw" in data["thw"]["stacktrace"]


def test_extras_come_first_and_are_rebuilt_per_write() -> None:
    received: list[dict[str, Any]] = []
    counter = iter(range(10))

    def extras() -> dict[str, Any]:
        return {"seq": next(counter), "level": "overridden"}

    sink = StructuredSimpleLogger(received.append, extras_builder=extras)
    sink.write(LogLevel.INFO, "t", "a", None)
    sink.write(LogLevel.WARN, "t", "b", None)

    assert list(received[0]) == ["seq", "level", "tag", "msg"]
    assert [item["seq"] for item in received] == [0, 1]
    assert received[1]["level"] == "WARN"


def test_default_extras_fields() -> None:
    extras = default_extras()

    assert extras["timestamp"].isdigit()
    assert extras["thread"] == threading.current_thread().name


def test_json_lines_output_writes_one_object_per_line() -> None:
    stream = StringIO()
    sink = StructuredSimpleLogger(json_lines_output(stream))

    sink.write(LogLevel.INFO, "Net", "héllo", None)
    sink.write(LogLevel.DEBUG, None, "second", None)

    lines = stream.getvalue().splitlines()
    assert [json.loads(line) for line in lines] == [
        {"level": "INFO", "tag": "Net", "msg": "héllo"},
        {"level": "DEBUG", "msg": "second"},
    ]
    assert "héllo" in lines[0]
