"""Command line interface for tree-pro."""

import sys
from typing import final

from treepro.features.tree import TreeError
from treepro.platform.logging import logger
from treepro.ui.cli.args import ArgumentParser, TreeArgs
from treepro.ui.cli.commands import TreeCommand


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
            args: TreeArgs = ArgumentParser.process_args(args_list)
            _ = TreeCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except TreeError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside ``CommandProcessor``.
    """
    CommandProcessor.process_command()
    return 0
