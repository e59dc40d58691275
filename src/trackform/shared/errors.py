"""
Summary: Error taxonomy raised by metadata reads, writes and tool invocation.
Why: Give callers typed failures they can surface without parsing messages.
"""

from __future__ import annotations

from pathlib import Path


class TrackformError(Exception):
    """Base class for every failure Trackform reports to its callers."""


class MetadataError(TrackformError):
    """A metadata read or write against ``path`` failed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path: Path | None = path


class AccessDeniedError(MetadataError):
    """The target file cannot be opened with the access the operation needs."""


class ExecutionError(MetadataError):
    """The external tool could not be started or exited abnormally."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        diagnostics: str = "",
        returncode: int | None = None,
    ) -> None:
        full_message = f"{message}: {diagnostics.strip()}" if diagnostics.strip() else message
        super().__init__(full_message, path=path)
        self.diagnostics: str = diagnostics
        self.returncode: int | None = returncode


class ToolNotFoundError(ExecutionError):
    """No usable external tool executable could be located."""


class OutputMissingError(MetadataError):
    """The tool reported success but produced no output file."""

    def __init__(self, output_path: Path, *, path: Path | None = None) -> None:
        super().__init__(f"ffmpeg produced no output file at {output_path}", path=path)
        self.output_path: Path = output_path


class ReplaceFailedError(MetadataError):
    """Swapping the rewritten file into place failed at the filesystem level.

    ``recovery_path`` points at the rewritten file that was left on disk so
    the user can recover it manually.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        recovery_path: Path | None = None,
    ) -> None:
        if recovery_path is not None:
            message = f"{message} (rewritten file kept at {recovery_path})"
        super().__init__(message, path=path)
        self.recovery_path: Path | None = recovery_path


__all__ = [
    "AccessDeniedError",
    "ExecutionError",
    "MetadataError",
    "OutputMissingError",
    "ReplaceFailedError",
    "ToolNotFoundError",
    "TrackformError",
]
