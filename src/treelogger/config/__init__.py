"""
Summary: Configuration loading for root tree loggers.
Why: Provide a single import path for settings, paths and persistence.
"""

from .config import SINK_NAMES, LoggerConfig, load_logger_config
from .paths import CONFIG_ENV_VAR, default_config_path, resolve_config_path

__all__ = [
    "CONFIG_ENV_VAR",
    "LoggerConfig",
    "SINK_NAMES",
    "default_config_path",
    "load_logger_config",
    "resolve_config_path",
]
