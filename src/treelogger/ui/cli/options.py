"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from treelogger.domain.levels import LogLevel


@final
@dataclass(slots=True)
class EmitArgs:
    """Command line arguments for emitting one record."""

    level: LogLevel
    message: str | None
    config_path: Path | None
    sink: str | None
    tag: str | None
    children: list[str]
    disable: bool


__all__ = ["EmitArgs"]
