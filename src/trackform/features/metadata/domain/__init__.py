"""
Summary: Domain types for the metadata feature.
Why: Keep enums importable without pulling in adapters or subprocess code.
"""

from .models import FIELD_TAG_KEYS, MetadataEvent, ReplaceStrategy

__all__ = ["FIELD_TAG_KEYS", "MetadataEvent", "ReplaceStrategy"]
