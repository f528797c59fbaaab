"""
Summary: Concrete sinks for console, standard logging and structured output.
Why: Offer ready-made backends while keeping each one swappable.
"""

from .console import ConsoleSimpleLogger, default_console_sink
from .stdlib import StdlibSimpleLogger
from .structured import StructuredSimpleLogger, default_extras, json_lines_output

__all__ = [
    "ConsoleSimpleLogger",
    "StdlibSimpleLogger",
    "StructuredSimpleLogger",
    "default_console_sink",
    "default_extras",
    "json_lines_output",
]
