"""src/trackform/ui/cli/commands/edit.py
What: Apply field changes to a file after an optional confirmation.
Why: Mirror the load, edit, confirm, save and reload flow of the desktop editor.
"""

from typing import override

from trackform.application.services import TagEditorRequest
from trackform.config import settings
from trackform.features.metadata import MetadataRecord
from trackform.ui.cli.args.options import EditArgs
from trackform.ui.cli.commands.executor import CommandExecutor


class EditCommand(CommandExecutor):
    """Command for editing a file's metadata."""

    args: EditArgs

    @override
    def build_request(self) -> TagEditorRequest:
        return TagEditorRequest(
            ffmpeg_path=self.args.ffmpeg_path,
            replace_strategy=self.args.replace_strategy,
        )

    @override
    def execute(self) -> MetadataRecord:
        """Read, merge the requested changes, confirm and save.

        Returns:
            The metadata read back after saving, or the unchanged current
            metadata when nothing changed or the user declined.
        """
        path = self.args.file_path
        current = self.facade.read_metadata(path)
        updated = current.with_changes(**self.args.changes)

        if updated == current:
            if not self.args.quiet:
                self.display.console.print("Nothing to change; the file already has these values.")
            return current

        self.display.show_changes(path, current, updated, quiet=self.args.quiet)

        if not (self.args.assume_yes or settings.ALWAYS_ALLOW):
            if not self.display.confirm_overwrite():
                self.display.show_cancelled()
                return current

        outcome = self.app.save(self.facade, updated, path)
        self.display.show_saved(outcome.path, outcome.requested, outcome.stored, quiet=self.args.quiet)
        return outcome.stored
