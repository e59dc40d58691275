"""src/trackform/ui/cli/display/metadata.py
Where: CLI adapter layer for metadata rendering.
What: Render tag tables, before/after diffs and the overwrite confirmation.
Why: Give users a visual check of what will be written before files change.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

from trackform.features.metadata import MetadataRecord
from trackform.shared.track_metadata import FIELD_NAMES

CONFIRM_PROMPT = "This will overwrite the metadata in the selected file. Do you want to continue?"


@final
class MetadataDisplay:
    """Handles metadata display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize metadata display."""
        self.console = console or Console()

    def show_record(self, path: Path, record: MetadataRecord, *, quiet: bool = False) -> None:
        """Render the four tags of ``path`` as a table."""

        if quiet:
            return

        table = Table(title=f"🎵 {escape(path.name)}", title_justify="left")
        table.add_column("Field", style="bold cyan")
        table.add_column("Value")
        for name, value in record.as_dict().items():
            table.add_row(name.capitalize(), _render_value(value))
        self.console.print(table)
        if record.is_empty:
            self.console.print("[yellow]No title, artist, year or genre tags found.[/yellow]")

    def show_changes(
        self,
        path: Path,
        before: MetadataRecord,
        after: MetadataRecord,
        *,
        quiet: bool = False,
    ) -> None:
        """Render a before/after comparison highlighting changed fields."""

        if quiet:
            return

        table = Table(title=f"✏️  {escape(path.name)}", title_justify="left")
        table.add_column("Field", style="bold cyan")
        table.add_column("Current")
        table.add_column("New")
        for name in FIELD_NAMES:
            old_value: str = getattr(before, name)
            new_value: str = getattr(after, name)
            new_cell = _render_value(new_value)
            if old_value != new_value:
                new_cell = f"[bold green]{new_cell}[/bold green]"
            table.add_row(name.capitalize(), _render_value(old_value), new_cell)
        self.console.print(table)

    def confirm_overwrite(self) -> bool:
        """Ask whether the file may be overwritten."""

        return Confirm.ask(CONFIRM_PROMPT, console=self.console, default=False)

    def show_saved(
        self,
        path: Path,
        requested: MetadataRecord,
        stored: MetadataRecord,
        *,
        quiet: bool = False,
    ) -> None:
        """Report a completed save and flag fields ffmpeg stored differently."""

        if quiet:
            return

        self.console.print(f"[green]✅ Metadata saved to {escape(str(path))}[/green]")
        for name in FIELD_NAMES:
            wanted: str = getattr(requested, name)
            got: str = getattr(stored, name)
            if wanted and wanted != got:
                self.console.print(
                    f"[yellow]  • {name} reads back as {_render_value(got)} "
                    f"instead of {_render_value(wanted)}[/yellow]"
                )

    def show_cancelled(self) -> None:
        self.console.print("[yellow]Cancelled; the file was not changed.[/yellow]")


def _render_value(value: str) -> str:
    return escape(value) if value else "[dim]—[/dim]"


__all__ = ["CONFIRM_PROMPT", "MetadataDisplay"]
