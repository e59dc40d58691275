"""
Summary: Package marker for metadata adapters.
Why: Keep adapter exports together for easy discovery.
"""

from .filesystem_adapter import LocalFilesystemAdapter

__all__ = ["LocalFilesystemAdapter"]
