"""
Summary: Fake ffmpeg runner and track fixtures for metadata façade tests.
Why: Exercise read/write flows byte-for-byte without a real ffmpeg install.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import pytest

from trackform.features.metadata import FFmpegMetadataService, ReplaceStrategy
from trackform.features.metadata.adapters import LocalFilesystemAdapter
from trackform.platform.ffmpeg import ProcessOutput

TOOL_PATH = Path("/opt/homebrew/bin/ffmpeg")
AUDIO_PAYLOAD = b"\xff\xfb\x90\x64" + bytes(range(64))
BANNER = "ffmpeg version 6.1 Copyright (c) 2000-2023 the FFmpeg developers\n"


def make_track(path: Path, tags: dict[str, str] | None = None, payload: bytes = AUDIO_PAYLOAD) -> Path:
    """Write a fake track: a JSON tag header line followed by the audio payload."""

    header = json.dumps(tags or {}, sort_keys=True).encode("utf-8")
    _ = path.write_bytes(b"TAGS:" + header + b"\n" + payload)
    return path


def read_track(path: Path) -> tuple[dict[str, str], bytes]:
    """Split a fake track into its tags and audio payload."""

    header, _, payload = path.read_bytes().partition(b"\n")
    return json.loads(header.removeprefix(b"TAGS:")), payload


class FakeFFmpeg:
    """Runner double emulating ``-f ffmetadata`` export and ``-codec copy`` remux.

    Like ffmpeg, a remux keeps the input's existing tags and overrides only the
    ones passed with ``-metadata``.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.returncode: int = 0
        self.stderr: str = BANNER
        self.extra_stdout: str = ""
        self.create_output: bool = True

    def run(self, tool: Path, args: Sequence[str]) -> ProcessOutput:
        assert tool == TOOL_PATH
        self.calls.append(list(args))
        input_path = Path(args[1])

        if args[-1] == "-":
            if self.returncode != 0:
                return ProcessOutput(self.returncode, "", self.stderr + f"{input_path}: Invalid data found when processing input\n")
            tags, _ = read_track(input_path)
            body = ";FFMETADATA1\n" + "".join(f"{key}={value}\n" for key, value in tags.items())
            body += "encoder=Lavf60.16.100\n" + self.extra_stdout
            return ProcessOutput(0, body, self.stderr)

        output_path = Path(args[-1])
        tags, payload = read_track(input_path)
        for flag, pair in zip(args, args[1:]):
            if flag == "-metadata":
                key, _, value = pair.partition("=")
                tags[key] = value
        if self.create_output:
            _ = make_track(output_path, tags, payload)
        return ProcessOutput(self.returncode, "", self.stderr)


@pytest.fixture
def fake_ffmpeg() -> FakeFFmpeg:
    return FakeFFmpeg()


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "scratch"
    directory.mkdir()
    return directory


@pytest.fixture
def track(tmp_path: Path) -> Path:
    return make_track(
        tmp_path / "song.mp3",
        {"title": "Old Title", "artist": "Old Artist", "date": "1999", "genre": "Jazz"},
    )


@pytest.fixture
def make_service(fake_ffmpeg: FakeFFmpeg, scratch_dir: Path):
    """Build a façade over the fake runner and the real filesystem adapter."""

    def _make(
        *,
        replace_strategy: ReplaceStrategy = ReplaceStrategy.REMOVE,
        strict_exit_code: bool = True,
        filesystem: LocalFilesystemAdapter | None = None,
    ) -> FFmpegMetadataService:
        return FFmpegMetadataService(
            tool_path=TOOL_PATH,
            runner=fake_ffmpeg,
            filesystem=filesystem or LocalFilesystemAdapter(),
            scratch_dir=scratch_dir,
            replace_strategy=replace_strategy,
            strict_exit_code=strict_exit_code,
        )

    return _make


@pytest.fixture
def tool_path() -> Path:
    return TOOL_PATH


@pytest.fixture
def audio_payload() -> bytes:
    return AUDIO_PAYLOAD


@pytest.fixture
def track_factory():
    """Return the fake track writer so tests can build extra files."""

    return make_track


@pytest.fixture
def track_reader():
    """Return the fake track reader yielding ``(tags, payload)``."""

    return read_track
