"""Tests for locating the ffmpeg executable."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from trackform.platform.ffmpeg import ENV_FFMPEG, is_executable, resolve_tool_path
from trackform.platform.ffmpeg import resolver
from trackform.shared.errors import ToolNotFoundError


def _make_tool(path: Path, *, executable: bool = True) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755 if executable else 0o644)
    return path


@pytest.fixture(autouse=True)
def no_path_lookup(mocker: MockerFixture):
    """Keep the host PATH out of resolution unless a test opts in."""

    return mocker.patch.object(resolver.shutil, "which", return_value=None)


def test_is_executable(tmp_path: Path) -> None:
    assert is_executable(_make_tool(tmp_path / "a"))
    assert not is_executable(_make_tool(tmp_path / "b", executable=False))
    assert not is_executable(tmp_path / "missing")
    assert not is_executable(tmp_path)


def test_explicit_path_wins(tmp_path: Path) -> None:
    explicit = _make_tool(tmp_path / "explicit" / "ffmpeg")
    env_tool = _make_tool(tmp_path / "env" / "ffmpeg")

    resolved = resolve_tool_path(
        explicit_path=str(explicit),
        env={ENV_FFMPEG: str(env_tool)},
        bundled_path=_make_tool(tmp_path / "bundled" / "ffmpeg"),
    )

    assert resolved == explicit


def test_explicit_path_must_be_executable(tmp_path: Path) -> None:
    explicit = _make_tool(tmp_path / "ffmpeg", executable=False)

    with pytest.raises(ToolNotFoundError, match="not an executable file"):
        _ = resolve_tool_path(explicit_path=explicit, env={})


def test_environment_override(tmp_path: Path) -> None:
    env_tool = _make_tool(tmp_path / "env" / "ffmpeg")

    resolved = resolve_tool_path(
        env={ENV_FFMPEG: f"  {env_tool}  "},
        bundled_path=_make_tool(tmp_path / "bundled" / "ffmpeg"),
    )

    assert resolved == env_tool


def test_environment_override_must_be_executable(tmp_path: Path) -> None:
    with pytest.raises(ToolNotFoundError, match=ENV_FFMPEG):
        _ = resolve_tool_path(env={ENV_FFMPEG: str(tmp_path / "missing")})


def test_bundled_copy_before_search_paths(tmp_path: Path) -> None:
    bundled = _make_tool(tmp_path / "bundled" / "ffmpeg")
    installed = _make_tool(tmp_path / "usr" / "bin" / "ffmpeg")

    resolved = resolve_tool_path(search_paths=[installed], env={}, bundled_path=bundled)

    assert resolved == bundled


def test_search_paths_probed_in_order(tmp_path: Path) -> None:
    first = tmp_path / "opt" / "ffmpeg"
    second = _make_tool(tmp_path / "usr" / "local" / "ffmpeg")
    third = _make_tool(tmp_path / "usr" / "ffmpeg")

    resolved = resolve_tool_path(
        search_paths=[str(first), str(second), str(third)],
        env={},
        bundled_path=tmp_path / "bin" / "ffmpeg",
    )

    assert resolved == second


def test_path_lookup_is_last_resort(tmp_path: Path, no_path_lookup) -> None:
    no_path_lookup.return_value = "/usr/bin/ffmpeg"

    resolved = resolve_tool_path(env={}, bundled_path=tmp_path / "bin" / "ffmpeg")

    assert resolved == Path("/usr/bin/ffmpeg")
    no_path_lookup.assert_called_once_with("ffmpeg")


def test_nothing_found_lists_candidates(tmp_path: Path) -> None:
    bundled = tmp_path / "bin" / "ffmpeg"

    with pytest.raises(ToolNotFoundError) as exc_info:
        _ = resolve_tool_path(search_paths=["/nowhere/ffmpeg"], env={}, bundled_path=bundled)

    message = str(exc_info.value)
    assert str(bundled) in message
    assert "/nowhere/ffmpeg" in message
    assert "PATH" in message
