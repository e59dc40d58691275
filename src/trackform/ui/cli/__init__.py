"""Command line interface package."""

from trackform.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
