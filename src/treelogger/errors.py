"""Exceptions raised by the treelogger configuration layer.

Logging calls themselves define no errors: a disabled logger drops the record
and anything a sink raises reaches the caller unchanged.
"""

from __future__ import annotations


class TreeLoggerError(Exception):
    """Base exception for treelogger errors."""


class ConfigurationError(TreeLoggerError):
    """Raised when logger configuration cannot be loaded."""


class ConfigurationParseError(ConfigurationError):
    """Raised when the TOML document cannot be parsed."""


class ConfigurationValidationError(ConfigurationError):
    """Raised when the parsed document is semantically invalid."""


__all__ = [
    "ConfigurationError",
    "ConfigurationParseError",
    "ConfigurationValidationError",
    "TreeLoggerError",
]
