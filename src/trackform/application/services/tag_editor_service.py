"""Application service for editing audio file tags.

This layer centralizes construction of the metadata façade from settings so
that multiple UIs (CLI, GUI) can reuse the same use cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, final

from trackform.config import settings
from trackform.features.metadata import (
    FFmpegMetadataService,
    FilesystemPort,
    MetadataRecord,
    ProcessRunnerPort,
    ReplaceStrategy,
)
from trackform.features.metadata.adapters import LocalFilesystemAdapter
from trackform.platform.ffmpeg import SubprocessRunner, resolve_tool_path


@dataclass(frozen=True)
class TagEditorRequest:
    """Overrides applied on top of the persisted settings.

    Attributes:
        ffmpeg_path: Explicit ffmpeg executable; skips discovery when set.
        replace_strategy: Replace strategy; falls back to the configured one.
    """

    ffmpeg_path: Path | None = None
    replace_strategy: ReplaceStrategy | None = None


@dataclass(frozen=True)
class SaveOutcome:
    """Tags before a save and as read back from the rewritten file."""

    path: Path
    requested: MetadataRecord
    stored: MetadataRecord


@final
class TagEditorService:
    """Application service that builds the façade and runs save round trips."""

    def __init__(
        self,
        *,
        resolver: Callable[..., Path] | None = None,
        runner_factory: Callable[[float | None], ProcessRunnerPort] | None = None,
        filesystem_factory: Callable[[], FilesystemPort] | None = None,
    ) -> None:
        """Create a service with overridable infrastructure factories.

        Tests can inject light-weight doubles while production code relies on
        the default subprocess runner and local filesystem adapter.
        """
        self._resolver: Callable[..., Path] = resolver or resolve_tool_path
        self._runner_factory: Callable[[float | None], ProcessRunnerPort] = (
            runner_factory or (lambda timeout: SubprocessRunner(timeout=timeout))
        )
        self._filesystem_factory: Callable[[], FilesystemPort] = (
            filesystem_factory or LocalFilesystemAdapter
        )

    def build_facade(self, request: TagEditorRequest | None = None) -> FFmpegMetadataService:
        """Resolve ffmpeg and build a configured ``FFmpegMetadataService``.

        Raises:
            ToolNotFoundError: No usable ffmpeg executable was found.
            ValueError: The configured replace strategy is unknown.
        """
        request = request or TagEditorRequest()
        tool_path = self._resolver(
            explicit_path=request.ffmpeg_path or settings.FFMPEG_PATH,
            search_paths=settings.FFMPEG_SEARCH_PATHS,
        )
        strategy = request.replace_strategy or ReplaceStrategy.from_user_input(
            settings.REPLACE_STRATEGY
        )
        return FFmpegMetadataService(
            tool_path=tool_path,
            runner=self._runner_factory(settings.FFMPEG_TIMEOUT_SECONDS),
            filesystem=self._filesystem_factory(),
            scratch_dir=settings.SCRATCH_DIR,
            replace_strategy=strategy,
            strict_exit_code=settings.STRICT_EXIT_CODE,
        )

    @staticmethod
    def save(
        facade: FFmpegMetadataService,
        record: MetadataRecord,
        path: Path,
    ) -> SaveOutcome:
        """Write ``record`` to ``path`` and read the stored tags back."""

        written_path = facade.write_metadata(record, path)
        stored = facade.read_metadata(written_path)
        return SaveOutcome(path=written_path, requested=record, stored=stored)


__all__ = ["SaveOutcome", "TagEditorRequest", "TagEditorService"]
