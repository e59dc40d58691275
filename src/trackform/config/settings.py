"""Where: src/trackform/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks for speed.
"""

from __future__ import annotations

from pathlib import Path

from trackform.config.config import (
    DEFAULT_SEARCH_PATHS,
    DEFAULT_TIMEOUT_SECONDS,
    config as app_config,
)
from trackform.platform.logging import logger


def coerce_timeout_seconds(raw: object) -> float | None:
    """Turn a configured ``timeout_seconds`` into a runner timeout.

    Zero or negative values disable the timeout. Anything that is not a
    number falls back to the default with a warning.
    """
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        logger.warning(
            "Ignoring timeout_seconds=%r; expected a number, using %s seconds",
            raw,
            DEFAULT_TIMEOUT_SECONDS,
        )
        return float(DEFAULT_TIMEOUT_SECONDS)
    if raw <= 0:
        return None
    return float(raw)


# External tool ---------------------------------------------------------------

FFMPEG_PATH: Path | None = app_config.ffmpeg_path

_search_paths = getattr(app_config, "search_paths", None)
FFMPEG_SEARCH_PATHS: tuple[str, ...] = (
    tuple(str(entry) for entry in _search_paths if str(entry).strip())
    if isinstance(_search_paths, list)
    else DEFAULT_SEARCH_PATHS
)

FFMPEG_TIMEOUT_SECONDS: float | None = coerce_timeout_seconds(
    getattr(app_config, "timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
)


# Write path ------------------------------------------------------------------

SCRATCH_DIR: Path | None = app_config.scratch_dir

REPLACE_STRATEGY: str = (app_config.replace_strategy or "remove").strip().lower()

STRICT_EXIT_CODE: bool = bool(getattr(app_config, "strict_exit_code", True))


# User interaction ------------------------------------------------------------

ALWAYS_ALLOW: bool = bool(getattr(app_config, "always_allow", False))


__all__ = [
    "ALWAYS_ALLOW",
    "FFMPEG_PATH",
    "FFMPEG_SEARCH_PATHS",
    "FFMPEG_TIMEOUT_SECONDS",
    "REPLACE_STRATEGY",
    "SCRATCH_DIR",
    "STRICT_EXIT_CODE",
    "coerce_timeout_seconds",
]
