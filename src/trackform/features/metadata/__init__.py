# Where: trackform.features.metadata.__init__
# What: Expose the metadata façade, its ports and shared dataclasses.
# Why: Provide a cohesive import surface for UI and integration layers.

from trackform.shared.errors import (
    AccessDeniedError,
    ExecutionError,
    MetadataError,
    OutputMissingError,
    ReplaceFailedError,
    ToolNotFoundError,
)
from trackform.shared.track_metadata import MetadataRecord
from .domain import MetadataEvent, ReplaceStrategy
from .usecases import (
    FFmpegMetadataService,
    FilesystemPort,
    ProcessRunnerPort,
    build_read_arguments,
    build_write_arguments,
    parse_ffmetadata,
)

__all__ = [
    "MetadataRecord",
    "FFmpegMetadataService",
    "MetadataEvent",
    "ReplaceStrategy",
    "FilesystemPort",
    "ProcessRunnerPort",
    "build_read_arguments",
    "build_write_arguments",
    "parse_ffmetadata",
    "AccessDeniedError",
    "ExecutionError",
    "MetadataError",
    "OutputMissingError",
    "ReplaceFailedError",
    "ToolNotFoundError",
]
