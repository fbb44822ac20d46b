"""Thin wrapper over ``subprocess.run`` used to drive Ghostscript.

The runner never raises for a failing child: it reports what happened in
a ``ProcessResult`` and lets the caller decide.  Timeouts kill the child
(``subprocess.run`` does that for us) and are flagged with ``timed_out``.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..errors import InvalidArgument

# Shell convention for "command not found / not executable".
EXIT_NOT_FOUND = 127


@dataclass(slots=True)
class ProcessResult:
    returncode: Optional[int]
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return not self.timed_out and self.returncode == 0


Runner = Callable[[Sequence[str], Optional[float]], ProcessResult]


def _text(data) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def effective_timeout(timeout: Optional[float]) -> Optional[float]:
    """
    ``None`` and ``0`` both mean "no timeout"; negative values are rejected
    before anything is spawned.
    """
    if timeout is None:
        return None
    timeout = float(timeout)
    if timeout < 0:
        raise InvalidArgument("The timeout value must be a valid positive integer or float number.")
    return timeout or None


def run_command(cmd: Sequence[str], timeout: Optional[float] = None) -> ProcessResult:
    """Run ``cmd`` (no shell), capturing stdout/stderr as text."""
    timeout = effective_timeout(timeout)
    try:
        proc = subprocess.run(
            list(cmd),
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        return ProcessResult(
            returncode=None,
            stdout=_text(exc.stdout),
            stderr=_text(exc.stderr) or f"Process exceeded the timeout of {timeout} seconds.",
            timed_out=True,
        )
    except OSError as exc:
        # Missing binary, permission denied, bad format...
        return ProcessResult(returncode=EXIT_NOT_FOUND, stderr=str(exc))

    return ProcessResult(returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
