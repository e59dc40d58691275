"""Tests for the timeout coercion behind ``FFMPEG_TIMEOUT_SECONDS``."""

from __future__ import annotations

import logging

import pytest

from trackform.config.config import DEFAULT_TIMEOUT_SECONDS
from trackform.config.settings import coerce_timeout_seconds


@pytest.mark.parametrize(("raw", "expected"), [(30, 30.0), (2.5, 2.5), (0, None), (-1, None)])
def test_numeric_timeouts(raw: float, expected: float | None) -> None:
    assert coerce_timeout_seconds(raw) == expected


@pytest.mark.parametrize("raw", ["30", True, None, [30]])
def test_non_numeric_timeout_falls_back_with_warning(
    raw: object, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger="trackform")

    assert coerce_timeout_seconds(raw) == DEFAULT_TIMEOUT_SECONDS

    assert any("timeout_seconds" in message for message in caplog.messages)
