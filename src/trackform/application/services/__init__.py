"""Application services orchestrating metadata use cases."""

from .tag_editor_service import SaveOutcome, TagEditorRequest, TagEditorService

__all__ = ["SaveOutcome", "TagEditorRequest", "TagEditorService"]
