"""ffmpeg process integration.

Where: platform/ffmpeg/__init__.py
What: Re-export tool resolution and subprocess runner helpers.
Why: Give adapters one import path for external tool access.
"""

from __future__ import annotations

from .resolver import ENV_FFMPEG, is_executable, resolve_tool_path
from .runner import ProcessOutput, SubprocessRunner

__all__ = [
    "ENV_FFMPEG",
    "ProcessOutput",
    "SubprocessRunner",
    "is_executable",
    "resolve_tool_path",
]
