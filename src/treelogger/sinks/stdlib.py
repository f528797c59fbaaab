"""Where: src/treelogger/sinks/stdlib.py
What: Sink forwarding records to the standard ``logging`` module.
Why: Host applications already route ``logging`` output; tree loggers plug
into that pipeline the way a platform log binding would.
"""

from __future__ import annotations

import logging
from typing import Final, final, override

from treelogger.domain.levels import LogLevel
from treelogger.domain.ports import SimpleLogger

VERBOSE: Final[int] = 5
logging.addLevelName(VERBOSE, "VERBOSE")

LEVEL_MAP: Final[dict[LogLevel, int]] = {
    LogLevel.VERBOSE: VERBOSE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.ASSERT: logging.CRITICAL,
}

DEFAULT_LOGGER_NAME: Final[str] = "treelog"


@final
class StdlibSimpleLogger(SimpleLogger):
    """Emit each record on ``logger`` (or its child named after the tag).

    The original level and tag travel as ``treelogger_level`` and
    ``treelogger_tag`` record attributes.
    """

    def __init__(self, logger: logging.Logger | str | None = None) -> None:
        if logger is None or isinstance(logger, str):
            logger = logging.getLogger(logger or DEFAULT_LOGGER_NAME)
        self._logger: logging.Logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def target_for(self, tag: str | None) -> logging.Logger:
        return self._logger.getChild(tag) if tag else self._logger

    @override
    def write(
        self,
        level: LogLevel,
        tag: str | None,
        message: str | None,
        failure: BaseException | None,
    ) -> None:
        self.target_for(tag).log(
            LEVEL_MAP[level],
            "%s",
            "" if message is None else message,
            exc_info=failure,
            extra={"treelogger_level": level, "treelogger_tag": tag},
        )


__all__ = ["DEFAULT_LOGGER_NAME", "LEVEL_MAP", "StdlibSimpleLogger", "VERBOSE"]
