"""
Summary: Build ffmpeg argument lists for metadata export and remux.
Why: Keep invocations deterministic so argument lists stay directly assertable.
"""

from __future__ import annotations

from pathlib import Path

from trackform.shared.track_metadata import MetadataRecord

from ..domain.models import FIELD_TAG_KEYS


def build_read_arguments(input_path: Path) -> list[str]:
    """Arguments exporting ``input_path``'s tags as ffmetadata on stdout."""

    return ["-i", str(input_path), "-f", "ffmetadata", "-"]


def build_write_arguments(
    record: MetadataRecord,
    input_path: Path,
    output_path: Path,
) -> list[str]:
    """Arguments remuxing ``input_path`` into ``output_path`` with ``record``'s tags.

    One ``-metadata key=value`` pair is emitted per non-empty field, in the
    order title, artist, date, genre. Streams are copied verbatim and an
    existing ``output_path`` is overwritten without prompting.
    """
    arguments = ["-i", str(input_path)]
    for field_name, tag in FIELD_TAG_KEYS:
        value: str = getattr(record, field_name)
        if value:
            arguments.extend(["-metadata", f"{tag}={value}"])
    arguments.extend(["-codec", "copy", "-y", str(output_path)])
    return arguments


__all__ = ["build_read_arguments", "build_write_arguments"]
