"""
Summary: Hierarchical logging facade with retag, intercept and branch transformations.
Why: Let libraries log through a tree of loggers without knowing the final sink.
"""

from treelogger.core import (
    KEEP_TAG,
    BranchingSimpleLogger,
    InterceptingSimpleLogger,
    SimpleTreeLogger,
    TreeLogger,
    context_tag,
)
from treelogger.domain import (
    FailureInfo,
    FunctionSimpleLogger,
    Logger,
    LogLevel,
    LogRecord,
    SimpleLogger,
    failure_message,
    simple_logger,
)
from treelogger.errors import (
    ConfigurationError,
    ConfigurationParseError,
    ConfigurationValidationError,
    TreeLoggerError,
)
from treelogger.factory import build_sink, logger_from_config, new_logger
from treelogger.sinks import (
    ConsoleSimpleLogger,
    StdlibSimpleLogger,
    StructuredSimpleLogger,
    default_extras,
    json_lines_output,
)

__all__ = [
    "BranchingSimpleLogger",
    "ConfigurationError",
    "ConfigurationParseError",
    "ConfigurationValidationError",
    "ConsoleSimpleLogger",
    "FailureInfo",
    "FunctionSimpleLogger",
    "InterceptingSimpleLogger",
    "KEEP_TAG",
    "LogLevel",
    "LogRecord",
    "Logger",
    "SimpleLogger",
    "SimpleTreeLogger",
    "StdlibSimpleLogger",
    "StructuredSimpleLogger",
    "TreeLogger",
    "TreeLoggerError",
    "build_sink",
    "context_tag",
    "default_extras",
    "failure_message",
    "json_lines_output",
    "logger_from_config",
    "new_logger",
    "simple_logger",
]
