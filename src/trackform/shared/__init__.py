# Where: trackform.shared.__init__
# What: Provide a concise import surface for shared dataclasses and errors.
# Why: Encourage consistent reuse of shared helpers across features.

"""Shared cross-cutting utilities exposed at the package level."""

from .errors import (
    AccessDeniedError,
    ExecutionError,
    MetadataError,
    OutputMissingError,
    ReplaceFailedError,
    ToolNotFoundError,
    TrackformError,
)
from .track_metadata import FIELD_NAMES, MetadataRecord

__all__ = [
    "FIELD_NAMES",
    "MetadataRecord",
    "AccessDeniedError",
    "ExecutionError",
    "MetadataError",
    "OutputMissingError",
    "ReplaceFailedError",
    "ToolNotFoundError",
    "TrackformError",
]
