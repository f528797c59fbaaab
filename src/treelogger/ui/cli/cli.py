"""Command line interface for treelogger."""

import dataclasses
import sys
from typing import final

from treelogger.config import LoggerConfig, load_logger_config
from treelogger.core.tree_logger import TreeLogger
from treelogger.errors import ConfigurationError
from treelogger.factory import logger_from_config
from treelogger.platform.logging import logger, setup_record_logger
from treelogger.ui.cli.options import EmitArgs
from treelogger.ui.cli.parser import ArgumentParser


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            node = CommandProcessor.build_logger(args)
            node.log(args.level, args.message)
        except ConfigurationError as e:
            logger.error("Configuration error: %s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)

    @staticmethod
    def build_logger(args: EmitArgs) -> TreeLogger:
        """Build the root from configuration and flags, then derive the requested children."""

        config = CommandProcessor._apply_overrides(
            load_logger_config(path=args.config_path), args
        )
        if config.sink == "logging":
            _ = setup_record_logger(config.logger_name)
        node = logger_from_config(config)
        for child in args.children:
            node = node[child]
        return node

    @staticmethod
    def _apply_overrides(config: LoggerConfig, args: EmitArgs) -> LoggerConfig:
        changes: dict[str, object] = {}
        if args.sink is not None:
            changes["sink"] = args.sink
        if args.tag is not None:
            changes["tag"] = args.tag
        if args.disable:
            changes["enabled"] = False
        return dataclasses.replace(config, **changes) if changes else config


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
