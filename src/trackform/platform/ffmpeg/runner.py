"""
Summary: Run the external tool as a subprocess and capture its output.
Why: Map spawn failures and timeouts onto the shared error taxonomy in one place.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from trackform.platform.logging import logger
from trackform.shared.errors import ExecutionError, ToolNotFoundError


@dataclass(slots=True, frozen=True)
class ProcessOutput:
    """Exit status and decoded output streams of a finished process."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def _decode(raw: bytes | str | None) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    return raw.decode("utf-8", errors="replace")


class SubprocessRunner:
    """Invoke a command with captured output and an optional bounded wait."""

    _timeout: float | None

    def __init__(self, *, timeout: float | None = None) -> None:
        self._timeout = timeout if timeout and timeout > 0 else None

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def run(self, tool: Path, args: Sequence[str]) -> ProcessOutput:
        """Run ``tool`` with ``args`` and block until it exits.

        The child never inherits stdin, so ffmpeg cannot stall waiting for
        interactive input.

        Raises:
            ToolNotFoundError: ``tool`` does not exist or is not executable.
            ExecutionError: The process could not be started or timed out.
        """
        command = [str(tool), *args]
        logger.debug("Running %s", shlex.join(command))

        try:
            completed = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ToolNotFoundError(f"ffmpeg not found at {tool}") from exc
        except PermissionError as exc:
            raise ToolNotFoundError(f"ffmpeg at {tool} is not executable") from exc
        except subprocess.TimeoutExpired as exc:
            raise ExecutionError(
                f"ffmpeg did not finish within {self._timeout:g} seconds",
                diagnostics=_decode(exc.stderr),
            ) from exc
        except OSError as exc:
            raise ExecutionError("Failed to start ffmpeg", diagnostics=str(exc)) from exc

        return ProcessOutput(
            returncode=completed.returncode,
            stdout=_decode(completed.stdout),
            stderr=_decode(completed.stderr),
        )


__all__ = ["ProcessOutput", "SubprocessRunner"]
