"""Tests for the ``MetadataEventRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from trackform.platform.logging import LOGGER_NAME, MetadataEventRichHandler


def _make_handler() -> MetadataEventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return MetadataEventRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with metadata extras for testing."""

    record = logging.LogRecord(
        name=LOGGER_NAME,
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_write_success_shows_path_duration_and_label() -> None:
    handler = _make_handler()
    record = _build_record(
        metadata_event="metadata.write.success",
        source_path="/Users/me/Music/Queen/1975_A-Night-at-the-Opera/D1_11_Bohemian-Rhapsody.m4a",
        duration_ms=41.5,
        artist="Queen",
        title="Bohemian Rhapsody",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    plain = rendered.plain
    assert "Wrote " in plain
    assert "…/Music/Queen/1975_A-Night-at-the-Opera/D1_11_Bohemian-Rhapsody.m4a" in plain
    assert "/Users/me" not in plain
    assert "(41.50 ms, Queen - Bohemian Rhapsody)" in plain


def test_short_paths_are_not_truncated() -> None:
    handler = _make_handler()
    record = _build_record(metadata_event="metadata.read.start", source_path="/music/song.mp3")

    plain = handler.render_message(record, "").plain

    assert "Reading /music/song.mp3" in plain
    assert "…" not in plain


def test_success_without_tags_omits_label() -> None:
    handler = _make_handler()
    record = _build_record(
        metadata_event="metadata.read.success",
        source_path="song.mp3",
        duration_ms=3,
        artist="",
        title="",
    )

    plain = handler.render_message(record, "").plain

    assert plain.endswith("Read song.mp3 (3.00 ms)")


def test_error_event_includes_message_and_recovery_path() -> None:
    handler = _make_handler()
    record = _build_record(
        metadata_event="metadata.write.error",
        source_path="/music/song.mp3",
        error_message="Could not move rewritten file into /music/song.mp3",
        recovery_path="/tmp/trackform-x/abc.mp3",
    )

    plain = handler.render_message(record, "").plain

    assert "Failed to write /music/song.mp3" in plain
    assert "(Could not move rewritten file into /music/song.mp3)" in plain
    assert plain.endswith("recovery: /tmp/trackform-x/abc.mp3")


def test_windows_paths_keep_backslashes() -> None:
    handler = _make_handler()
    record = _build_record(
        metadata_event="metadata.read.error",
        source_path="C:\\Users\\me\\Music\\Artist\\Album\\song.flac",
        error_message="File not found",
    )

    plain = handler.render_message(record, "").plain

    assert "C:\\…\\Music\\Artist\\Album\\song.flac" in plain


def test_plain_records_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()
    record = _build_record(msg="Configuration saved")

    rendered = handler.render_message(record, "Configuration saved")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Configuration saved"
