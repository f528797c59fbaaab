"""Tests for configuration path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

import treelogger.config.paths as paths


def test_default_path_uses_detected_repo_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert paths.default_config_path() == (tmp_path / "config" / "treelogger.toml").resolve()


def test_blank_environment_value_is_ignored(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)

    resolved = paths.resolve_config_path(env={paths.CONFIG_ENV_VAR: "   "})

    assert resolved == (tmp_path / "config" / "treelogger.toml").resolve()


def test_explicit_path_is_expanded(tmp_path: Path) -> None:
    assert paths.resolve_config_path(tmp_path / "x.toml", env={}) == (tmp_path / "x.toml").resolve()
