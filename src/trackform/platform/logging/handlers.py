"""Rich console handler rendering metadata events.

Where: platform/logging/handlers.py
What: Colour structured read/write events and keep long paths compact.
Why: Keep console output readable without changing how callers log.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class MetadataEventRichHandler(RichHandler):
    """Rich handler that renders metadata events with icons and white paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "metadata.read.start": ("🔎", "cyan"),
        "metadata.read.success": ("📖", "green"),
        "metadata.read.error": ("❌", "red"),
        "metadata.write.start": ("🎧", "blue"),
        "metadata.write.success": ("💾", "green"),
        "metadata.write.error": ("⛔", "red"),
        "metadata.replace.backup_restored": ("↩️", "yellow"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "metadata.read.start": "Reading ",
        "metadata.read.success": "Read ",
        "metadata.read.error": "Failed to read ",
        "metadata.write.start": "Writing ",
        "metadata.write.success": "Wrote ",
        "metadata.write.error": "Failed to write ",
        "metadata.replace.backup_restored": "Restored original ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and ellipsis truncation."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            if isinstance(pure_path, PureWindowsPath):
                display_string = anchor.rstrip("\\/") + separator
            else:
                display_string = separator
        if truncated:
            display_string += "…"
            if body_parts:
                display_string += separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_metadata_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured metadata events with dedicated styling."""

        event = getattr(record, "metadata_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))

        details: list[str] = []
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.2f} ms")
        if event.endswith(".success"):
            artist = getattr(record, "artist", None)
            title = getattr(record, "title", None)
            label = " - ".join(part for part in [artist, title] if part)
            if label:
                details.append(label)
        if event.endswith(".error"):
            error_message = getattr(record, "error_message", None)
            if error_message:
                details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        recovery_path = getattr(record, "recovery_path", None)
        if recovery_path:
            _ = body.append(" recovery: ")
            _ = body.append_text(self._format_path(str(recovery_path)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for metadata events."""

        metadata_text = self._render_metadata_message(record)
        if metadata_text is not None:
            return metadata_text

        return super().render_message(record, message)


__all__ = ["MetadataEventRichHandler"]
