"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from treepro.config.config import Config
from treepro.platform.logging import setup_logger
from treepro.ui.cli.args.options import TreeArgs


def _non_negative_int(value: str) -> int:
    """argparse type for integer limits where 0 means unlimited."""

    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Limit options default to ``None`` so unset flags fall back to the
        configuration file.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tree-pro",
            description="Print a concise, colored directory tree that collapses identical directories.",
        )
        _ = parser.add_argument(
            "path",
            nargs="?",
            default=".",
            help="Directory to display (defaults to the current directory)",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "-f",
            "--files",
            type=_non_negative_int,
            default=None,
            help="Maximum files to display per directory (0 for unlimited, default 5)",
            metavar="N",
        )
        _ = parser.add_argument(
            "-d",
            "--dirs",
            type=_non_negative_int,
            default=None,
            help="Maximum identical directories to expand per group (0 for unlimited, default 1)",
            metavar="N",
        )
        _ = parser.add_argument(
            "-L",
            "--level",
            type=_non_negative_int,
            default=None,
            help="Maximum recursion depth (0 for unlimited, default 0)",
            metavar="N",
        )
        _ = parser.add_argument(
            "--color",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Enable or disable colored output",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Log every visited directory",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            default=None,
            help="Configuration file to read (defaults to $TREEPRO_CONFIG or ~/.config/tree-pro/config.toml)",
            metavar="FILE",
        )
        _ = parser.add_argument(
            "--save-config",
            action="store_true",
            help="Persist the effective limits and color setting as the new defaults",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> TreeArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            TreeArgs: Processed command line arguments.

        Raises:
            SystemExit: On invalid arguments.
            ConfigError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        _ = setup_logger(console_level=log_level)

        config_path = Path(parsed_args.config) if parsed_args.config else None
        configuration = Config.load(config_path)
        if configuration.log_file is not None:
            _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        return TreeArgs(
            target=parsed_args.path,
            root_path=Path(parsed_args.path),
            max_files=ArgumentParser._pick(parsed_args.files, configuration.max_files),
            max_dirs=ArgumentParser._pick(parsed_args.dirs, configuration.max_dirs),
            max_level=ArgumentParser._pick(parsed_args.level, configuration.max_level),
            color=configuration.color if parsed_args.color is None else parsed_args.color,
            save_config=parsed_args.save_config,
            config_path=config_path,
            log_file=configuration.log_file,
        )

    @staticmethod
    def _pick(flag_value: int | None, configured: int) -> int:
        return configured if flag_value is None else flag_value
