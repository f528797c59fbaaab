"""Shared path utilities for configuration locations.

Policy (portable by default):
- Config: ``TREELOGGER_CONFIG`` when set, otherwise repository-root
  ``<repo_root>/config/treelogger.toml``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


CONFIG_ENV_VAR: Final[str] = "TREELOGGER_CONFIG"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to the current working directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path.cwd()).resolve()
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path() -> Path:
    """Get the default path to the logger TOML config file.

    Portable layout: ``<repo_root>/config/treelogger.toml``.
    """
    repo_root = _detect_repo_root()
    return (repo_root / "config" / "treelogger.toml").resolve()


def resolve_config_path(
    path: Path | str | None = None, env: Mapping[str, str] | None = None
) -> Path:
    """Apply the explicit > environment > default precedence for the config file."""

    return resolve_overridable_path(
        explicit_path=path,
        env=env,
        env_var=CONFIG_ENV_VAR,
        default_factory=default_config_path,
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "default_config_path",
    "resolve_config_path",
    "resolve_overridable_path",
]
