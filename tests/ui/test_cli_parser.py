"""Tests for command line argument parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from treelogger.domain import LogLevel
from treelogger.ui.cli.parser import ArgumentParser


def test_create_parser_accepts_all_flags() -> None:
    parser = ArgumentParser.create_parser()

    parsed = parser.parse_args(
        ["--sink", "json", "--tag", "App", "--child", "Net", "--child", "Http", "--disable", "W", "slow", "reply"]
    )

    assert parsed.level is LogLevel.WARN
    assert parsed.message == ["slow", "reply"]
    assert parsed.child == ["Net", "Http"]
    assert parsed.disable is True


def test_process_args_joins_message_words() -> None:
    args = ArgumentParser.process_args(["--config", "cfg.toml", "info", "hello", "world"])

    assert args.level is LogLevel.INFO
    assert args.message == "hello world"
    assert args.config_path == Path("cfg.toml")
    assert args.children == []
    assert args.sink is None


def test_process_args_without_message() -> None:
    assert ArgumentParser.process_args(["error"]).message is None


def test_unknown_level_is_a_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["fatal", "x"])

    assert excinfo.value.code == 2
    assert "Unsupported log level 'fatal'" in capsys.readouterr().err


def test_verbose_and_quiet_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args(["--verbose", "--quiet", "info"])
