"""Command execution package for CLI."""

from trackform.ui.cli.commands.edit import EditCommand
from trackform.ui.cli.commands.executor import CommandExecutor
from trackform.ui.cli.commands.show import ShowCommand

__all__ = [
    "CommandExecutor",
    "EditCommand",
    "ShowCommand",
]
