"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from trackform.features.metadata import ReplaceStrategy


@final
@dataclass(slots=True)
class ShowArgs:
    """Command line arguments for the ``show`` subcommand."""

    file_path: Path
    ffmpeg_path: Path | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class EditArgs:
    """Command line arguments for the ``edit`` subcommand.

    ``changes`` holds only the fields given on the command line.
    """

    file_path: Path
    ffmpeg_path: Path | None
    verbose: bool
    quiet: bool
    changes: dict[str, str] = field(default_factory=dict)
    assume_yes: bool = False
    replace_strategy: ReplaceStrategy | None = None


CLIArgs = ShowArgs | EditArgs
