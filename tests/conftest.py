"""
Summary: Session-wide fixtures isolating configuration and log files from the repository.
Why: Importing settings loads (and may create) the config file, so point it at a scratch location first.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

_SESSION_ROOT = Path(tempfile.mkdtemp(prefix="trackform-tests-"))
_CONFIG_FILE = _SESSION_ROOT / "config.toml"
_ = _CONFIG_FILE.write_text(
    f'log_file = "{(_SESSION_ROOT / "trackform.log").as_posix()}"\n'
    'replace_strategy = "remove"\n'
    "strict_exit_code = true\n"
    "always_allow = false\n",
    encoding="utf-8",
)
os.environ["TRACKFORM_CONFIG"] = str(_CONFIG_FILE)
os.environ.pop("TRACKFORM_FFMPEG", None)
