"""Where: src/treelogger/config/config.py
What: TOML-backed settings for building a root tree logger.
Why: Let applications pick a sink and default state without code changes.
"""

from __future__ import annotations

import textwrap
import tomllib
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Final, TypeVar, cast

from treelogger.config.file_ops import write_text_file
from treelogger.config.paths import resolve_config_path
from treelogger.errors import (
    ConfigurationError,
    ConfigurationParseError,
    ConfigurationValidationError,
)
from treelogger.platform.logging import LOGGER_NAME, logger
from treelogger.sinks.stdlib import DEFAULT_LOGGER_NAME

T = TypeVar("T")

SECTION: Final[str] = "treelogger"
SINK_NAMES: Final[tuple[str, ...]] = ("console", "logging", "json", "empty")

_HEADER = textwrap.dedent(
    """
    # treelogger configuration (TOML)
    #
    # sink: console | logging | json | empty
    #   console  - "[I][tag]message" lines on stderr
    #   logging  - forward to the standard logging module under logger_name
    #   json     - one JSON object per line on stdout
    #   empty    - drop everything (root starts disabled)
    """
).strip()


@dataclass(slots=True)
class LoggerConfig:
    """Settings for the root logger built by ``logger_from_config``."""

    # Default tag of the root logger
    tag: str | None = None

    # Backend name, one of SINK_NAMES
    sink: str = "console"

    # Whether the root starts enabled (an "empty" sink always starts disabled)
    enabled: bool = True

    # Base logger for the "logging" sink, outside the diagnostics logger
    logger_name: str = DEFAULT_LOGGER_NAME

    # Render failures with rich tracebacks on the console sink
    rich_tracebacks: bool = True

    # Add timestamp and thread fields to "json" records
    extras: bool = False

    def __post_init__(self) -> None:
        """Normalize and validate field values."""

        self.sink = self.sink.strip().lower()
        if self.sink not in SINK_NAMES:
            valid = ", ".join(SINK_NAMES)
            raise ConfigurationValidationError(
                f"Unsupported sink '{self.sink}'. Valid options: {valid}"
            )
        if self.tag is not None and not self.tag.strip():
            self.tag = None
        if not self.logger_name.strip():
            raise ConfigurationValidationError("logger_name must not be empty")
        if self.logger_name == LOGGER_NAME or self.logger_name.startswith(f"{LOGGER_NAME}."):
            raise ConfigurationValidationError(
                f"logger_name '{self.logger_name}' is reserved for treelogger diagnostics"
            )

    def render_toml(self) -> str:
        """Render the configuration as a commented TOML document."""

        values = asdict(self)
        lines: list[str] = [_HEADER, "", f"[{SECTION}]"]
        if values["tag"] is None:
            lines.append('# tag = "App"')
        for key in ("tag", "sink", "enabled", "logger_name", "rich_tracebacks", "extras"):
            value = values[key]
            if value is None:
                continue
            lines.append(f"{key} = {_format_toml_value(value)}")
        lines.append("")
        return "\n".join(lines)

    def save(self, path: Path) -> None:
        """Save configuration to ``path``."""

        try:
            write_text_file(path, self.render_toml())
        except OSError as exc:
            raise ConfigurationError(f"Failed to write configuration file: {path}") from exc
        logger.info("Configuration saved to %s", path)


def load_logger_config(
    *, path: Path | str | None = None, env: Mapping[str, str] | None = None
) -> LoggerConfig:
    """Load logger configuration.

    Args:
        path: Optional explicit path to the configuration file.
        env: Optional environment mapping used to read ``TREELOGGER_CONFIG``.

    Returns:
        LoggerConfig: Loaded configuration, or defaults when the file is absent.

    Raises:
        ConfigurationParseError: The file is not valid TOML.
        ConfigurationValidationError: A value has the wrong type or is unsupported.
    """

    resolved_path = resolve_config_path(path, env)
    if not resolved_path.exists():
        logger.debug("No configuration at %s; using defaults", resolved_path)
        return LoggerConfig()

    try:
        with resolved_path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationParseError(
            f"Invalid TOML in configuration file: {resolved_path}"
        ) from exc
    except OSError as exc:  # pragma: no cover - rare filesystem failure
        raise ConfigurationError(
            f"Failed to read configuration file: {resolved_path}"
        ) from exc

    table = _extract_table(document.get(SECTION, {}))
    config = LoggerConfig(
        tag=_optional_str(table, "tag"),
        sink=_typed(table, "sink", str, "console"),
        enabled=_typed(table, "enabled", bool, True),
        logger_name=_typed(table, "logger_name", str, DEFAULT_LOGGER_NAME),
        rich_tracebacks=_typed(table, "rich_tracebacks", bool, True),
        extras=_typed(table, "extras", bool, False),
    )
    logger.debug("Configuration loaded from %s", resolved_path)
    return config


def _extract_table(table: Any) -> dict[str, Any]:
    if not isinstance(table, dict):
        raise ConfigurationValidationError(f"{SECTION} section must be a table")
    return cast(dict[str, Any], table)


def _optional_str(table: Mapping[str, Any], key: str) -> str | None:
    value = table.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigurationValidationError(f"{SECTION}.{key} must be a string")
    return value


def _typed(table: Mapping[str, Any], key: str, kind: type[T], default: T) -> T:
    value = table.get(key, default)
    if not isinstance(value, kind):
        raise ConfigurationValidationError(
            f"{SECTION}.{key} must be of type {kind.__name__}"
        )
    return value


def _format_toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{"".join(_escape_toml_char(char) for char in value)}"'
    return str(value)


_TOML_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _escape_toml_char(char: str) -> str:
    escaped = _TOML_ESCAPES.get(char)
    if escaped is not None:
        return escaped
    # Basic strings forbid raw control characters
    if ord(char) < 0x20 or ord(char) == 0x7F:
        return f"\\u{ord(char):04X}"
    return char


__all__ = ["LoggerConfig", "SECTION", "SINK_NAMES", "load_logger_config"]
