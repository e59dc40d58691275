"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    monkeypatch.delenv("TRACKFORM_CONFIG", raising=False)

    import trackform.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return tmp_path


@pytest.fixture
def fresh_config() -> Iterator[None]:
    """Reset the configuration singleton around a test run."""

    from trackform.config.config import Config

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
