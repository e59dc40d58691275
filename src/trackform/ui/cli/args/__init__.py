"""Command line argument handling."""

from trackform.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser"]
