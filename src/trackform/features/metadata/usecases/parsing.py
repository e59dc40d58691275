"""
Summary: Turn ffmetadata export text into a MetadataRecord.
Why: Keep the key=value scan pure so it can be tested without ffmpeg.
"""

from __future__ import annotations

from trackform.shared.track_metadata import MetadataRecord

from ..domain.models import FIELD_TAG_KEYS

_TAG_TO_FIELD: dict[str, str] = {tag: field_name for field_name, tag in FIELD_TAG_KEYS}


def parse_ffmetadata(output: str) -> MetadataRecord:
    """Parse ``key=value`` lines emitted by ``ffmpeg -f ffmetadata``.

    Lines without ``=`` are skipped and each line is split on its first ``=``
    only, so values may contain ``=`` themselves. Keys are matched
    case-sensitively; unknown keys (including the ``;FFMETADATA1`` header and
    encoder lines) are ignored. Later occurrences of a key win.
    """
    values: dict[str, str] = {}
    for line in output.splitlines():
        key, separator, value = line.partition("=")
        if not separator:
            continue
        field_name = _TAG_TO_FIELD.get(key)
        if field_name is not None:
            values[field_name] = value
    return MetadataRecord(**values)


__all__ = ["parse_ffmetadata"]
