"""src/trackform/ui/cli/commands/show.py
What: Read and print the tags of a single file via the CLI.
Why: Let users inspect a file without risking a write.
"""

from typing import override

from trackform.features.metadata import MetadataRecord
from trackform.ui.cli.commands.executor import CommandExecutor


class ShowCommand(CommandExecutor):
    """Command for displaying a file's metadata."""

    @override
    def execute(self) -> MetadataRecord:
        record = self.facade.read_metadata(self.args.file_path)
        self.display.show_record(self.args.file_path, record, quiet=self.args.quiet)
        return record
