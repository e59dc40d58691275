"""Summary: Ports defining metadata use case dependencies.
Why: Decouple use cases from concrete adapters so tests and swaps stay simple."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from trackform.platform.ffmpeg import ProcessOutput

from ..domain.models import ReplaceStrategy


@runtime_checkable
class ProcessRunnerPort(Protocol):
    """Port for running the external tool to completion."""

    def run(self, tool: Path, args: Sequence[str]) -> ProcessOutput:
        """Run ``tool`` with ``args`` and return its captured output."""
        ...


@runtime_checkable
class FilesystemPort(Protocol):
    """Port abstracting the file checks and swaps performed around the tool."""

    def ensure_access(self, path: Path, *, write: bool) -> None:
        """Raise ``AccessDeniedError`` unless ``path`` is readable (and writable)."""
        ...

    def exists(self, path: Path) -> bool:
        """Return whether ``path`` is an existing file."""
        ...

    def discard(self, path: Path) -> None:
        """Remove ``path`` if present, ignoring a missing file."""
        ...

    def replace(self, source: Path, target: Path, *, strategy: ReplaceStrategy) -> None:
        """Move ``source`` onto ``target`` following ``strategy``.

        Raises ``ReplaceFailedError`` with ``source`` still on disk on failure.
        """
        ...


__all__ = ["FilesystemPort", "ProcessRunnerPort"]
