"""Command line interface for Trackform."""

import sys
from typing import final

from trackform.platform.logging import logger
from trackform.shared.errors import TrackformError
from trackform.ui.cli.args import ArgumentParser
from trackform.ui.cli.args.options import CLIArgs, EditArgs
from trackform.ui.cli.commands import EditCommand, ShowCommand


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
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, EditArgs):
                _ = EditCommand(args).execute()
            else:
                _ = ShowCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except TrackformError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
