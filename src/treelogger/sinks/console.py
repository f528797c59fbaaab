"""Where: src/treelogger/sinks/console.py
What: Default sink printing ``[I][tag]message`` lines through a Rich console.
Why: Give root loggers a useful destination without any configuration.
"""

from __future__ import annotations

import functools
import traceback
from typing import ClassVar, final, override

from rich.console import Console
from rich.style import Style
from rich.text import Text
from rich.traceback import Traceback

from treelogger.domain.levels import LogLevel
from treelogger.domain.ports import SimpleLogger


@final
class ConsoleSimpleLogger(SimpleLogger):
    """Print each record as one line, followed by the failure's traceback.

    Args:
        console: Target console. Defaults to a stderr console.
        rich_tracebacks: Render failures with ``rich.traceback`` instead of
            the plain ``traceback`` text.
    """

    LEVEL_STYLES: ClassVar[dict[LogLevel, Style]] = {
        LogLevel.VERBOSE: Style(dim=True),
        LogLevel.DEBUG: Style(color="cyan"),
        LogLevel.INFO: Style(color="green"),
        LogLevel.WARN: Style(color="yellow"),
        LogLevel.ERROR: Style(color="red", bold=True),
        LogLevel.ASSERT: Style(color="white", bgcolor="red", bold=True),
    }
    TAG_STYLE: ClassVar[Style] = Style(color="magenta")

    def __init__(self, console: Console | None = None, *, rich_tracebacks: bool = True) -> None:
        self._console: Console = console if console is not None else Console(stderr=True)
        self._rich_tracebacks: bool = rich_tracebacks

    @property
    def console(self) -> Console:
        return self._console

    @classmethod
    def render_line(cls, level: LogLevel, tag: str | None, message: str | None) -> Text:
        """Build the styled ``[L][tag]message`` line for one record."""

        text = Text()
        _ = text.append(f"[{level.short_tag}]", style=cls.LEVEL_STYLES[level])
        if tag is not None:
            _ = text.append(f"[{tag}]", style=cls.TAG_STYLE)
        if message is not None:
            _ = text.append(message)
        return text

    @override
    def write(
        self,
        level: LogLevel,
        tag: str | None,
        message: str | None,
        failure: BaseException | None,
    ) -> None:
        self._console.print(self.render_line(level, tag, message), highlight=False, soft_wrap=True)
        if failure is None:
            return
        if self._rich_tracebacks:
            self._console.print(
                Traceback.from_exception(type(failure), failure, failure.__traceback__)
            )
        else:
            plain = "".join(traceback.format_exception(failure)).rstrip("\n")
            self._console.print(Text(plain), highlight=False, soft_wrap=True)


@functools.cache
def default_console_sink() -> ConsoleSimpleLogger:
    """Return the shared stderr console sink used by root loggers."""

    return ConsoleSimpleLogger()


__all__ = ["ConsoleSimpleLogger", "default_console_sink"]
