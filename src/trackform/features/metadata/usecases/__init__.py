"""
Summary: Metadata use cases: parsing, argument building and the ffmpeg façade.
Why: Offer one import path for callers that do not need adapters.
"""

from .arguments import build_read_arguments, build_write_arguments
from .metadata_service import FFmpegMetadataService
from .parsing import parse_ffmetadata
from .ports import FilesystemPort, ProcessRunnerPort

__all__ = [
    "FFmpegMetadataService",
    "FilesystemPort",
    "ProcessRunnerPort",
    "build_read_arguments",
    "build_write_arguments",
    "parse_ffmetadata",
]
