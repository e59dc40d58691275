"""Locate the ffmpeg executable.

Resolution order: explicit override, ``TRACKFORM_FFMPEG``, a copy bundled
alongside the package, the configured search paths, then ``PATH``.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Final

from trackform.config.paths import bundled_tool_path
from trackform.platform.logging import logger
from trackform.shared.errors import ToolNotFoundError

ENV_FFMPEG: Final[str] = "TRACKFORM_FFMPEG"
TOOL_NAME: Final[str] = "ffmpeg"


def is_executable(path: Path) -> bool:
    """Return whether ``path`` is a regular file the process may execute."""

    return path.is_file() and os.access(path, os.X_OK)


def resolve_tool_path(
    *,
    explicit_path: Path | str | None = None,
    search_paths: Iterable[Path | str] = (),
    env: Mapping[str, str] | None = None,
    bundled_path: Path | None = None,
) -> Path:
    """Return the first usable ffmpeg executable.

    Args:
        explicit_path: User override; must be executable when given.
        search_paths: Well-known install locations probed in order.
        env: Environment mapping, defaults to ``os.environ``.
        bundled_path: Location of a copy shipped with the app.

    Raises:
        ToolNotFoundError: No candidate is an executable file.
    """
    if explicit_path is not None:
        candidate = Path(explicit_path).expanduser()
        if not is_executable(candidate):
            raise ToolNotFoundError(f"Configured ffmpeg is not an executable file: {candidate}")
        return candidate

    mapping = env if env is not None else os.environ
    env_value = (mapping.get(ENV_FFMPEG) or "").strip()
    if env_value:
        candidate = Path(env_value).expanduser()
        if not is_executable(candidate):
            raise ToolNotFoundError(f"{ENV_FFMPEG} is not an executable file: {candidate}")
        return candidate

    candidates: list[Path] = [bundled_path or bundled_tool_path(TOOL_NAME)]
    candidates.extend(Path(entry).expanduser() for entry in search_paths)
    for candidate in candidates:
        if is_executable(candidate):
            logger.debug("Using ffmpeg at %s", candidate)
            return candidate

    on_path = shutil.which(TOOL_NAME)
    if on_path:
        logger.debug("Using ffmpeg from PATH at %s", on_path)
        return Path(on_path)

    searched = ", ".join(str(candidate) for candidate in candidates)
    raise ToolNotFoundError(f"ffmpeg not found (searched {searched} and PATH)")


__all__ = ["ENV_FFMPEG", "TOOL_NAME", "is_executable", "resolve_tool_path"]
