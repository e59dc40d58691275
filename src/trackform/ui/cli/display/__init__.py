"""Console display helpers for the CLI."""

from .metadata import CONFIRM_PROMPT, MetadataDisplay

__all__ = ["CONFIRM_PROMPT", "MetadataDisplay"]
