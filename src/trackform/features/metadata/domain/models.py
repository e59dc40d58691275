"""Enums describing how metadata writes replace files and which events they log."""

from __future__ import annotations

from enum import Enum, StrEnum
from typing import Final

# Record field -> ffmetadata key, in the order arguments are emitted.
FIELD_TAG_KEYS: Final[tuple[tuple[str, str], ...]] = (
    ("title", "title"),
    ("artist", "artist"),
    ("year", "date"),
    ("genre", "genre"),
)


class ReplaceStrategy(str, Enum):
    """Represent how a rewritten file replaces the original on disk.

    ``REMOVE`` deletes the original before moving the rewritten file in;
    a failed move leaves the target missing. ``BACKUP`` moves the original
    aside first and restores it when the move fails.
    """

    REMOVE = "remove"
    BACKUP = "backup"

    @staticmethod
    def from_user_input(value: str) -> "ReplaceStrategy":
        """Translate raw config or CLI input into the matching strategy."""

        normalized = value.strip().lower()
        for strategy in ReplaceStrategy:
            if strategy.value == normalized:
                return strategy
        valid: Final[str] = ", ".join(s.value for s in ReplaceStrategy)
        msg = f"Unsupported replace strategy '{value}'. Valid options: {valid}"
        raise ValueError(msg)


class MetadataEvent(StrEnum):
    """Structured event identifiers for metadata read/write logs."""

    READ_START = "metadata.read.start"
    READ_SUCCESS = "metadata.read.success"
    READ_ERROR = "metadata.read.error"
    WRITE_START = "metadata.write.start"
    WRITE_SUCCESS = "metadata.write.success"
    WRITE_ERROR = "metadata.write.error"
    REPLACE_BACKUP_RESTORED = "metadata.replace.backup_restored"


__all__ = ["FIELD_TAG_KEYS", "MetadataEvent", "ReplaceStrategy"]
