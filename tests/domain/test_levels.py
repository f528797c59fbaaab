"""Tests for ``LogLevel`` tags and user input parsing."""

from __future__ import annotations

import pytest

from treelogger.domain import LogLevel


def test_short_tags_cover_every_level() -> None:
    """Each level maps to exactly one distinct letter."""

    tags = {level: level.short_tag for level in LogLevel}

    assert tags == {
        LogLevel.VERBOSE: "V",
        LogLevel.DEBUG: "D",
        LogLevel.INFO: "I",
        LogLevel.WARN: "W",
        LogLevel.ERROR: "E",
        LogLevel.ASSERT: "A",
    }


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("warn", LogLevel.WARN), (" W ", LogLevel.WARN), ("Assert", LogLevel.ASSERT), ("v", LogLevel.VERBOSE)],
)
def test_from_user_input_accepts_names_and_tags(raw: str, expected: LogLevel) -> None:
    assert LogLevel.from_user_input(raw) is expected


def test_from_user_input_rejects_unknown_values() -> None:
    with pytest.raises(ValueError, match="Valid options: verbose, debug"):
        _ = LogLevel.from_user_input("fatal")


def test_levels_have_no_ordering() -> None:
    """Severities are compared for equality only."""

    with pytest.raises(TypeError):
        _ = LogLevel.DEBUG < LogLevel.ERROR  # pyright: ignore[reportOperatorIssue]
