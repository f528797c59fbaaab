"""
Summary: Domain vocabulary for tree loggers: levels, records and contracts.
Why: Keep sinks, loggers and the composition root on one import path.
"""

from .levels import LogLevel
from .ports import FunctionSimpleLogger, Logger, SimpleLogger, simple_logger
from .records import FailureInfo, LogRecord, failure_message

__all__ = [
    "FailureInfo",
    "FunctionSimpleLogger",
    "LogLevel",
    "LogRecord",
    "Logger",
    "SimpleLogger",
    "failure_message",
    "simple_logger",
]
