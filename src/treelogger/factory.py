"""Where: src/treelogger/factory.py
What: Composition root turning configuration into a root ``TreeLogger``.
Why: Callers ask for a logger; only this module knows which sink backs it.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

from treelogger.config import LoggerConfig, load_logger_config
from treelogger.core.tree_logger import TreeLogger
from treelogger.domain.ports import SimpleLogger
from treelogger.platform.logging import logger
from treelogger.sinks.console import ConsoleSimpleLogger
from treelogger.sinks.stdlib import StdlibSimpleLogger
from treelogger.sinks.structured import StructuredSimpleLogger, default_extras, json_lines_output


def new_logger(tag: str | None = None, sink: SimpleLogger | None = None) -> TreeLogger:
    """Create a root logger; ``sink`` defaults to the shared console sink."""

    return TreeLogger(tag=tag, sink=sink)


def _console_sink(config: LoggerConfig) -> SimpleLogger:
    return ConsoleSimpleLogger(rich_tracebacks=config.rich_tracebacks)


def _logging_sink(config: LoggerConfig) -> SimpleLogger:
    return StdlibSimpleLogger(config.logger_name)


def _json_sink(config: LoggerConfig) -> SimpleLogger:
    return StructuredSimpleLogger(
        json_lines_output(sys.stdout),
        extras_builder=default_extras if config.extras else None,
    )


def _empty_sink(_config: LoggerConfig) -> SimpleLogger:
    return SimpleLogger.EMPTY


SINK_BUILDERS: Final[dict[str, Callable[[LoggerConfig], SimpleLogger]]] = {
    "console": _console_sink,
    "logging": _logging_sink,
    "json": _json_sink,
    "empty": _empty_sink,
}


def build_sink(config: LoggerConfig) -> SimpleLogger:
    """Return the sink named by ``config.sink``."""

    return SINK_BUILDERS[config.sink](config)


def logger_from_config(
    config: LoggerConfig | None = None,
    *,
    path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> TreeLogger:
    """Build a root logger from ``config``, loading it from disk when omitted."""

    if config is None:
        config = load_logger_config(path=path, env=env)

    root = new_logger(tag=config.tag, sink=build_sink(config))
    if not config.enabled:
        root.disable()
    logger.debug("Built root logger with %s sink (enabled=%s)", config.sink, root.is_enabled)
    return root


__all__ = ["SINK_BUILDERS", "build_sink", "logger_from_config", "new_logger"]
