"""src/trackform/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse façade construction and presentation helpers across commands.
"""

from abc import ABC, abstractmethod

from trackform.application.services import TagEditorRequest, TagEditorService
from trackform.features.metadata import FFmpegMetadataService, MetadataRecord
from trackform.ui.cli.args.options import CLIArgs
from trackform.ui.cli.display import MetadataDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    app: TagEditorService
    facade: FFmpegMetadataService
    display: MetadataDisplay

    def __init__(self, args: CLIArgs) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.app = TagEditorService()
        self.facade = self.app.build_facade(self.build_request())
        self.display = MetadataDisplay()

    def build_request(self) -> TagEditorRequest:
        """Translate CLI arguments into façade overrides."""

        return TagEditorRequest(ffmpeg_path=self.args.ffmpeg_path)

    @abstractmethod
    def execute(self) -> MetadataRecord:
        """Execute the command.

        Returns:
            The metadata stored in the file once the command finishes.
        """
        pass
