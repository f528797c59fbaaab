"""Tests for the ``ShortLevelRichHandler`` message rendering."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console
from rich.text import Text

from treelogger.domain import LogLevel
from treelogger.factory import new_logger
from treelogger.platform.logging import ShortLevelRichHandler, setup_logger, setup_record_logger
from treelogger.sinks import StdlibSimpleLogger
from treelogger.sinks.stdlib import DEFAULT_LOGGER_NAME


def _make_console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=200, color_system=None, soft_wrap=True), buffer


def _build_record(level: int = logging.INFO, **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with extras for testing."""

    record = logging.LogRecord(
        name="treelogger",
        level=level,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_uses_tree_level_and_tag() -> None:
    console, _ = _make_console()
    handler = ShortLevelRichHandler(console=console)
    record = _build_record(treelogger_level=LogLevel.VERBOSE, treelogger_tag="Net")

    rendered = handler.render_message(record, "hello")

    assert isinstance(rendered, Text)
    assert rendered.plain == "[V][Net]hello"


def test_render_message_maps_plain_records_by_level() -> None:
    console, _ = _make_console()
    handler = ShortLevelRichHandler(console=console)

    warning = handler.render_message(_build_record(logging.WARNING), "careful")
    critical = handler.render_message(_build_record(logging.CRITICAL), "fatal")
    low = handler.render_message(_build_record(5), "noise")

    assert isinstance(warning, Text) and warning.plain == "[W]careful"
    assert isinstance(critical, Text) and critical.plain == "[A]fatal"
    assert isinstance(low, Text) and low.plain == "[V]noise"


def test_record_logger_shows_forwarded_records() -> None:
    console, buffer = _make_console()
    _ = setup_record_logger("treelog", console=console)

    StdlibSimpleLogger().write(LogLevel.VERBOSE, "Net", "trace me", None)

    assert "[V][Net]trace me" in buffer.getvalue()


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    console, buffer = _make_console()
    log_file = tmp_path / "logs" / "treelogger.log"

    logger = setup_logger(log_file=log_file, console_level=logging.WARNING, console=console)
    logger.info("to file only")
    logger.warning("everywhere")
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "to file only" in content
    assert "everywhere" in content
    assert "to file only" not in buffer.getvalue()
    assert "[W]everywhere" in buffer.getvalue()
    for handler in logger.handlers:
        handler.close()


def test_forwarded_records_ignore_diagnostics_level(caplog: pytest.LogCaptureFixture) -> None:
    console, buffer = _make_console()
    caplog.set_level(logging.DEBUG)
    _ = setup_logger(console_level=logging.WARNING, console=console)

    new_logger(sink=StdlibSimpleLogger()).info("hello")

    assert [record.getMessage() for record in caplog.records] == ["hello"]
    assert caplog.records[0].name == DEFAULT_LOGGER_NAME
    assert "hello" not in buffer.getvalue()
