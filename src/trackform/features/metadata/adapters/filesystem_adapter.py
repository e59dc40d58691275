"""src/trackform/features/metadata/adapters/filesystem_adapter.py
What: Adapter implementing FilesystemPort on the local filesystem.
Why: Keep access checks and file swaps in adapters while use cases target abstractions."""

from __future__ import annotations

import os
import shutil
import uuid
from pathlib import Path

from trackform.features.metadata.domain.models import MetadataEvent, ReplaceStrategy
from trackform.features.metadata.usecases.ports import FilesystemPort
from trackform.platform.logging import logger
from trackform.shared.errors import AccessDeniedError, ReplaceFailedError


class LocalFilesystemAdapter(FilesystemPort):
    """Local filesystem checks and remove/backup file replacement."""

    def ensure_access(self, path: Path, *, write: bool) -> None:
        if not path.exists():
            raise AccessDeniedError(f"File not found: {path}", path=path)
        if not path.is_file():
            raise AccessDeniedError(f"Not a regular file: {path}", path=path)

        mode = (os.R_OK | os.W_OK) if write else os.R_OK
        if not os.access(path, mode):
            needed = "read and write" if write else "read"
            raise AccessDeniedError(f"Permission denied to {needed} {path}", path=path)

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def discard(self, path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Could not remove scratch file %s: %s", path, exc)

    def replace(self, source: Path, target: Path, *, strategy: ReplaceStrategy) -> None:
        if strategy is ReplaceStrategy.BACKUP:
            self._replace_with_backup(source, target)
        else:
            self._remove_then_move(source, target)

    @staticmethod
    def _remove_then_move(source: Path, target: Path) -> None:
        """Delete ``target`` then move ``source`` onto it.

        A failed move after the delete leaves ``target`` missing; ``source``
        stays on disk for manual recovery.
        """
        try:
            target.unlink()
        except OSError as exc:
            raise ReplaceFailedError(
                f"Could not remove original file {target}: {exc}",
                path=target,
                recovery_path=source,
            ) from exc

        try:
            _ = shutil.move(str(source), str(target))
        except OSError as exc:
            raise ReplaceFailedError(
                f"Could not move rewritten file into {target}: {exc}",
                path=target,
                recovery_path=source,
            ) from exc

    @staticmethod
    def _replace_with_backup(source: Path, target: Path) -> None:
        """Move ``target`` aside, move ``source`` in, then drop the backup.

        When the move fails the backup is renamed back so ``target`` keeps
        its original content.
        """
        backup = target.with_name(f".{target.name}.{uuid.uuid4().hex[:8]}.bak")
        try:
            os.replace(target, backup)
        except OSError as exc:
            raise ReplaceFailedError(
                f"Could not move original file {target} aside: {exc}",
                path=target,
                recovery_path=source,
            ) from exc

        try:
            _ = shutil.move(str(source), str(target))
        except OSError as exc:
            try:
                os.replace(backup, target)
            except OSError as restore_exc:
                logger.error(
                    "Could not restore %s from backup %s: %s",
                    target,
                    backup,
                    restore_exc,
                )
            else:
                logger.warning(
                    "Restored original %s after a failed replace",
                    target,
                    extra={
                        "metadata_event": MetadataEvent.REPLACE_BACKUP_RESTORED.value,
                        "source_path": target,
                    },
                )
            raise ReplaceFailedError(
                f"Could not move rewritten file into {target}: {exc}",
                path=target,
                recovery_path=source,
            ) from exc

        try:
            backup.unlink()
        except OSError as exc:
            logger.warning("Could not remove backup %s: %s", backup, exc)


__all__ = ["LocalFilesystemAdapter"]
