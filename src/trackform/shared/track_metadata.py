# Where: trackform.shared.track_metadata
# What: Canonical MetadataRecord dataclass shared across features.
# Why: Centralize the editable tag snapshot for reuse and consistency.

from dataclasses import dataclass, replace
from typing import Final

FIELD_NAMES: Final[tuple[str, ...]] = ("title", "artist", "year", "genre")


@dataclass(frozen=True, slots=True)
class MetadataRecord:
    """Editable metadata snapshot of a single audio file.

    Empty strings mean "not set"; the record never distinguishes an unknown
    field from an empty one.
    """

    title: str = ""
    artist: str = ""
    year: str = ""
    genre: str = ""

    @property
    def is_empty(self) -> bool:
        """Return True when every field is the empty string."""

        return not (self.title or self.artist or self.year or self.genre)

    @property
    def has_any_metadata(self) -> bool:
        return not self.is_empty

    def with_changes(self, **changes: str) -> "MetadataRecord":
        """Return a copy with ``changes`` applied."""

        return replace(self, **changes)

    def as_dict(self) -> dict[str, str]:
        """Return the fields keyed by name in display order."""

        return {name: getattr(self, name) for name in FIELD_NAMES}


__all__ = ["FIELD_NAMES", "MetadataRecord"]
