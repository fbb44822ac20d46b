from __future__ import annotations


class GsMergeError(Exception):
    """Base class for everything this package raises on purpose."""
    pass


class InvalidArgument(GsMergeError, ValueError):
    """Raised when a job is configured with an out-of-domain value."""
    pass


class PreconditionFailed(GsMergeError, RuntimeError):
    """Raised when merge() is called with fewer than two inputs."""
    pass


class ProcessFailure(GsMergeError, RuntimeError):
    """Raised when Ghostscript exits non-zero, times out or cannot start."""

    def __init__(
        self,
        command: list[str],
        exit_code: int | None,
        stdout: str = "",
        stderr: str = "",
        timed_out: bool = False,
    ):
        self.command = list(command)
        self.exit_code = exit_code
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        self.timed_out = timed_out
        super().__init__(self._describe())

    @property
    def output(self) -> str:
        """Combined diagnostics, stderr first."""
        parts = [s.strip() for s in (self.stderr, self.stdout) if s and s.strip()]
        return "\n".join(parts)

    def _describe(self) -> str:
        cmd = " ".join(self.command)
        if self.timed_out:
            head = f'The command "{cmd}" timed out.'
        else:
            head = f'The command "{cmd}" failed.\n\nExit Code: {self.exit_code}'
        diag = self.output
        return f"{head}\n\n{diag}" if diag else head


class ArtifactMissing(GsMergeError, RuntimeError):
    """Raised when the tool reported success but left no output file."""

    def __init__(self, path):
        self.path = path
        super().__init__("Merging failed: Output file not created.")
