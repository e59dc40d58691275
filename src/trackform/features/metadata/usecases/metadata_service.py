"""Read and rewrite audio file tags through an external ffmpeg process.

Where: features/metadata/usecases/metadata_service.py
What: The metadata façade: export tags, remux with new tags, swap files.
Why: Keep every ffmpeg interaction behind two operations callers can inject.
"""

from __future__ import annotations

import asyncio
import logging
import tempfile
import time
import uuid
from pathlib import Path

from trackform.platform.ffmpeg import ProcessOutput
from trackform.platform.logging import logger as app_logger
from trackform.shared.errors import (
    ExecutionError,
    MetadataError,
    OutputMissingError,
    ReplaceFailedError,
)
from trackform.shared.track_metadata import MetadataRecord

from ..domain.models import MetadataEvent, ReplaceStrategy
from .arguments import build_read_arguments, build_write_arguments
from .parsing import parse_ffmetadata
from .ports import FilesystemPort, ProcessRunnerPort

_DEFAULT_SUFFIX = ".mp3"


class FFmpegMetadataService:
    """Metadata façade over an ffmpeg executable.

    Instances are built explicitly by the caller and carry only immutable
    configuration. Each call spawns exactly one ffmpeg process and blocks
    until it exits; use the ``*_async`` variants from an event loop.
    """

    _tool_path: Path
    _runner: ProcessRunnerPort
    _filesystem: FilesystemPort
    _scratch_dir: Path | None
    _replace_strategy: ReplaceStrategy
    _strict_exit_code: bool
    _logger: logging.Logger

    def __init__(
        self,
        *,
        tool_path: Path,
        runner: ProcessRunnerPort,
        filesystem: FilesystemPort,
        scratch_dir: Path | None = None,
        replace_strategy: ReplaceStrategy = ReplaceStrategy.REMOVE,
        strict_exit_code: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        """Create a façade bound to one resolved ffmpeg executable.

        Args:
            tool_path: ffmpeg executable used for every invocation.
            runner: Runs the executable and captures its output.
            filesystem: Access checks and the final file swap.
            scratch_dir: Directory for remux output. A private directory under
                the system temp dir is used per write and removed afterwards
                when omitted.
            replace_strategy: How the remuxed file replaces the original.
            strict_exit_code: Fail writes on a non-zero exit. When False a
                non-zero exit is only logged and the output check decides.
            logger: Logger for structured events, defaults to the app logger.
        """
        self._tool_path = tool_path
        self._runner = runner
        self._filesystem = filesystem
        self._scratch_dir = scratch_dir
        self._replace_strategy = replace_strategy
        self._strict_exit_code = strict_exit_code
        self._logger = logger or app_logger

    @property
    def tool_path(self) -> Path:
        return self._tool_path

    @property
    def replace_strategy(self) -> ReplaceStrategy:
        return self._replace_strategy

    # Read ------------------------------------------------------------------

    def read_metadata(self, path: Path) -> MetadataRecord:
        """Return the title, artist, year and genre stored in ``path``.

        Fields absent from the file come back as empty strings.

        Raises:
            AccessDeniedError: ``path`` is missing or unreadable.
            ExecutionError: ffmpeg could not run or exited non-zero.
        """
        path = Path(path)
        started = time.perf_counter()
        self._log(logging.DEBUG, MetadataEvent.READ_START, "Reading metadata from %s", path, source_path=path)

        try:
            self._filesystem.ensure_access(path, write=False)
            output = self._runner.run(self._tool_path, build_read_arguments(path))
            if not output.succeeded:
                raise ExecutionError(
                    f"ffmpeg exited with status {output.returncode} while reading metadata",
                    path=path,
                    diagnostics=output.stderr,
                    returncode=output.returncode,
                )
            record = parse_ffmetadata(output.stdout)
        except MetadataError as exc:
            self._fail(MetadataEvent.READ_ERROR, path, exc)
            raise

        self._log(
            logging.INFO,
            MetadataEvent.READ_SUCCESS,
            "Read metadata from %s",
            path,
            source_path=path,
            duration_ms=(time.perf_counter() - started) * 1000,
            artist=record.artist,
            title=record.title,
        )
        return record

    async def read_metadata_async(self, path: Path) -> MetadataRecord:
        """Run :meth:`read_metadata` in a worker thread."""

        return await asyncio.to_thread(self.read_metadata, path)

    # Write -----------------------------------------------------------------

    def write_metadata(self, record: MetadataRecord, path: Path) -> Path:
        """Rewrite ``path`` so its tags match ``record`` and return the path.

        Empty fields are left unset. Audio streams are copied without
        re-encoding into a scratch file, which then replaces ``path``.

        Raises:
            AccessDeniedError: ``path`` is missing, unreadable or read-only.
            ExecutionError: ffmpeg could not run, or exited non-zero while
                exit codes are strict. ``path`` is left untouched.
            OutputMissingError: ffmpeg produced no output file.
            ReplaceFailedError: The swap failed; the rewritten file is kept.
        """
        path = Path(path)
        started = time.perf_counter()
        self._log(logging.DEBUG, MetadataEvent.WRITE_START, "Writing metadata to %s", path, source_path=path)

        scratch_dir: Path | None = None
        try:
            self._filesystem.ensure_access(path, write=True)
            scratch_dir = self._prepare_scratch_dir(path)
            temp_path = scratch_dir / f"{uuid.uuid4().hex}{path.suffix or _DEFAULT_SUFFIX}"
            output = self._remux(record, path, temp_path)

            if not output.succeeded:
                if self._strict_exit_code:
                    self._filesystem.discard(temp_path)
                    raise ExecutionError(
                        f"ffmpeg exited with status {output.returncode} while writing metadata",
                        path=path,
                        diagnostics=output.stderr,
                        returncode=output.returncode,
                    )
                self._logger.warning(
                    "ffmpeg exited with status %d for %s; checking for output anyway",
                    output.returncode,
                    path,
                )

            if not self._filesystem.exists(temp_path):
                raise OutputMissingError(temp_path, path=path)

            self._filesystem.replace(temp_path, path, strategy=self._replace_strategy)
        except MetadataError as exc:
            self._fail(MetadataEvent.WRITE_ERROR, path, exc)
            raise
        finally:
            if scratch_dir is not None and self._scratch_dir is None:
                self._release_private_dir(scratch_dir)

        self._log(
            logging.INFO,
            MetadataEvent.WRITE_SUCCESS,
            "Wrote metadata to %s",
            path,
            source_path=path,
            duration_ms=(time.perf_counter() - started) * 1000,
            artist=record.artist,
            title=record.title,
        )
        return path

    async def write_metadata_async(self, record: MetadataRecord, path: Path) -> Path:
        """Run :meth:`write_metadata` in a worker thread."""

        return await asyncio.to_thread(self.write_metadata, record, path)

    # Helpers ---------------------------------------------------------------

    def _remux(self, record: MetadataRecord, path: Path, temp_path: Path) -> ProcessOutput:
        try:
            output = self._runner.run(
                self._tool_path,
                build_write_arguments(record, path, temp_path),
            )
        except MetadataError:
            self._filesystem.discard(temp_path)
            raise

        if output.stdout.strip():
            self._logger.debug("ffmpeg output: %s", output.stdout.strip())
        if output.stderr.strip():
            self._logger.debug("ffmpeg diagnostics: %s", output.stderr.strip())
        return output

    def _prepare_scratch_dir(self, target: Path) -> Path:
        """Return the directory remux output for ``target`` is written to.

        Without a configured scratch directory every write gets a private
        directory under the system temp dir.

        Raises:
            ExecutionError: The directory could not be created.
        """
        try:
            if self._scratch_dir is None:
                return Path(tempfile.mkdtemp(prefix="trackform-"))
            self._scratch_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ExecutionError(
                "Could not prepare scratch directory",
                path=target,
                diagnostics=str(exc),
            ) from exc
        return self._scratch_dir

    def _release_private_dir(self, directory: Path) -> None:
        # A rewritten file kept for recovery keeps the directory alive.
        try:
            directory.rmdir()
        except OSError:
            self._logger.debug("Keeping scratch directory %s", directory)

    def _fail(self, event: MetadataEvent, path: Path, exc: MetadataError) -> None:
        if exc.path is None:
            exc.path = path
        recovery_path = exc.recovery_path if isinstance(exc, ReplaceFailedError) else None
        self._log(
            logging.ERROR,
            event,
            "%s failed for %s: %s",
            "Read" if event is MetadataEvent.READ_ERROR else "Write",
            path,
            exc,
            source_path=path,
            error_message=str(exc),
            recovery_path=recovery_path,
        )

    def _log(
        self,
        level: int,
        event: MetadataEvent,
        message: str,
        *message_args: object,
        **context: object,
    ) -> None:
        extra = {"metadata_event": event.value, **context}
        self._logger.log(level, message, *message_args, extra=extra)


__all__ = ["FFmpegMetadataService"]
