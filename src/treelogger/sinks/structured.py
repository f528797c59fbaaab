"""Where: src/treelogger/sinks/structured.py
What: Sink turning each record into a dict handed to an output callable.
Why: Structured consumers (JSON lines, collectors, databases) decide what
happens to the data; the sink only fixes the record shape.

Shape::

    {**extras, "level": "WARN", "tag": "Net", "msg": "timeout",
     "thw": {"type": "TimeoutError", "msg": "...", "stacktrace": "..."}}

``tag``, ``msg`` and ``thw`` are present only when the record carries them.
"""

from __future__ import annotations

import json
import threading
import time
from collections.abc import Callable, Mapping
from typing import Any, TextIO, final, override

from treelogger.domain.levels import LogLevel
from treelogger.domain.ports import SimpleLogger
from treelogger.domain.records import FailureInfo

StructuredOutput = Callable[[dict[str, Any]], None]
ExtrasBuilder = Callable[[], Mapping[str, Any]]


@final
class StructuredSimpleLogger(SimpleLogger):
    """Build one dict per write and pass it to ``output``.

    Args:
        output: Consumer of the generated dict.
        extras_builder: Called on every write; its fields come first and can
            be overridden by the record fields.
    """

    def __init__(self, output: StructuredOutput, extras_builder: ExtrasBuilder | None = None) -> None:
        self._output: StructuredOutput = output
        self._extras_builder: ExtrasBuilder | None = extras_builder

    def build(
        self,
        level: LogLevel,
        tag: str | None,
        message: str | None,
        failure: BaseException | None,
    ) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self._extras_builder is not None:
            data.update(self._extras_builder())
        data["level"] = level.name
        if tag is not None:
            data["tag"] = tag
        if message is not None:
            data["msg"] = message
        if failure is not None:
            info = FailureInfo.from_exception(failure)
            data["thw"] = {
                "type": info.type_name,
                "msg": info.message,
                "stacktrace": info.stack_trace,
            }
        return data

    @override
    def write(
        self,
        level: LogLevel,
        tag: str | None,
        message: str | None,
        failure: BaseException | None,
    ) -> None:
        self._output(self.build(level, tag, message, failure))


def default_extras() -> dict[str, Any]:
    """Timestamp (epoch milliseconds, as text) and current thread name."""

    return {
        "timestamp": str(time.time_ns() // 1_000_000),
        "thread": threading.current_thread().name,
    }


def json_lines_output(stream: TextIO) -> StructuredOutput:
    """Return an output writing each dict to ``stream`` as one JSON line."""

    def _write(data: dict[str, Any]) -> None:
        _ = stream.write(json.dumps(data, ensure_ascii=False, default=str) + "\n")
        stream.flush()

    return _write


__all__ = [
    "ExtrasBuilder",
    "StructuredOutput",
    "StructuredSimpleLogger",
    "default_extras",
    "json_lines_output",
]
