"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from trackform.config.config import Config
from trackform.features.metadata import ReplaceStrategy
from trackform.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from trackform.shared.track_metadata import FIELD_NAMES
from trackform.ui.cli.args.options import CLIArgs, EditArgs, ShowArgs


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
            prog="trackform",
            description="Trackform - view and edit the title, artist, year and genre of audio files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        show_parser = subparsers.add_parser(
            "show",
            help="Show the metadata stored in a file",
        )
        ArgumentParser._configure_common(show_parser)

        edit_parser = subparsers.add_parser(
            "edit",
            help="Change metadata fields and save them into the file",
        )
        ArgumentParser._configure_common(edit_parser)
        for name in FIELD_NAMES:
            _ = edit_parser.add_argument(
                f"--{name}",
                type=str,
                default=None,
                metavar=name.upper(),
                help=f"New {name} value",
            )
        _ = edit_parser.add_argument(
            "--yes",
            "-y",
            dest="assume_yes",
            action="store_true",
            help="Overwrite without asking for confirmation",
        )
        _ = edit_parser.add_argument(
            "--replace-strategy",
            type=str,
            choices=[strategy.value for strategy in ReplaceStrategy],
            default=None,
            help="How the rewritten file replaces the original (default from config)",
        )

        return parser

    @staticmethod
    def _configure_common(parser: argparse.ArgumentParser) -> None:
        """Apply options shared by every subcommand."""

        _ = parser.add_argument(
            "file_path",
            type=str,
            help="Path to the audio file",
            metavar="FILE",
        )
        _ = parser.add_argument(
            "--ffmpeg",
            type=str,
            default=None,
            metavar="FFMPEG_PATH",
            help="ffmpeg executable to use instead of the discovered one",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show ffmpeg invocations and diagnostics",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the file does not exist or no edit was requested.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        file_path = Path(parsed_args.file_path).expanduser()
        if not file_path.exists():
            logger.error("File does not exist: %s", file_path)
            sys.exit(1)

        ffmpeg_path = Path(parsed_args.ffmpeg).expanduser() if parsed_args.ffmpeg else None

        if parsed_args.command == "show":
            return ShowArgs(
                file_path=file_path,
                ffmpeg_path=ffmpeg_path,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        changes = {
            name: value
            for name in FIELD_NAMES
            if (value := getattr(parsed_args, name)) is not None
        }
        if not changes:
            parser.error("edit needs at least one of --title, --artist, --year or --genre")
        blank = [name for name, value in changes.items() if not value.strip()]
        if blank:
            parser.error(f"--{blank[0]} cannot be empty; leave it out to keep the current value")

        replace_strategy = (
            ReplaceStrategy.from_user_input(parsed_args.replace_strategy)
            if parsed_args.replace_strategy
            else None
        )

        return EditArgs(
            file_path=file_path,
            ffmpeg_path=ffmpeg_path,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            changes=changes,
            assume_yes=parsed_args.assume_yes,
            replace_strategy=replace_strategy,
        )
