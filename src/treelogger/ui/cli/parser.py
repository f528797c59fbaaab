"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from treelogger.config import SINK_NAMES
from treelogger.domain.levels import LogLevel
from treelogger.platform.logging import setup_logger
from treelogger.ui.cli.options import EmitArgs


def _level(value: str) -> LogLevel:
    try:
        return LogLevel.from_user_input(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="treelogger",
            description="Emit one log record through a configured tree logger.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "level",
            type=_level,
            help="Level name or short tag (verbose/V, debug/D, info/I, warn/W, error/E, assert/A)",
            metavar="LEVEL",
        )
        _ = parser.add_argument(
            "message",
            nargs="*",
            help="Message words, joined by single spaces",
            metavar="MESSAGE",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Path to the TOML configuration file",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--sink",
            choices=SINK_NAMES,
            help="Override the configured sink",
        )
        _ = parser.add_argument(
            "--tag",
            type=str,
            help="Override the root logger's default tag",
        )
        _ = parser.add_argument(
            "--child",
            action="append",
            default=[],
            metavar="TAG",
            help="Derive a child logger with this tag (repeatable, applied in order)",
        )
        _ = parser.add_argument(
            "--disable",
            action="store_true",
            help="Start the root logger disabled",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show treelogger diagnostics",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress diagnostics except errors",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> EmitArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            EmitArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING
        _ = setup_logger(console_level=log_level)

        words: list[str] = parsed_args.message
        return EmitArgs(
            level=parsed_args.level,
            message=" ".join(words) if words else None,
            config_path=Path(parsed_args.config) if parsed_args.config else None,
            sink=parsed_args.sink,
            tag=parsed_args.tag,
            children=list(parsed_args.child),
            disable=parsed_args.disable,
        )


__all__ = ["ArgumentParser"]
