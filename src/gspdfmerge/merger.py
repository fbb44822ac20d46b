"""Ghostscript-backed PDF merging.

``MergeJob`` collects the inputs and output options through chainable
setters, turns them into a ``gs`` argument vector and runs it::

    out = (MergeJob()
           .set_compression_level(CompressionPreset.EBOOK)
           .add_files(["a.pdf", "b.pdf"])
           .set_output_folder("/tmp/out")
           .merge())
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .compression import CompressionPreset
from .errors import ArtifactMissing, InvalidArgument, PreconditionFailed, ProcessFailure
from .logging_setup import get_logger
from .services.file_names import default_output_filename, strip_trailing_separators
from .services.process_runner import Runner, run_command
from .types_job_types import JobSettings

DEFAULT_GS_PATH = "gs"
DEFAULT_PRESET = CompressionPreset.DEFAULT
DEFAULT_TIMEOUT = 60

BASE_OPTIONS = ("-dBATCH", "-dNOPAUSE", "-q", "-sDEVICE=pdfwrite")


class MergeJob:
    def __init__(
        self,
        clock: Callable[[], datetime] | None = None,
        runner: Runner | None = None,
    ):
        # Injected for tests: local-time source and process runner.
        self._clock = clock or datetime.now
        self._runner = runner or run_command
        self._logger = get_logger()

        self._tool_path = DEFAULT_GS_PATH
        self.reset()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_tool_path(self, path) -> "MergeJob":
        """Override the Ghostscript binary. Not checked until merge()."""
        self._tool_path = os.fspath(path)
        return self

    def set_timeout(self, timeout: Optional[float]) -> "MergeJob":
        """Max runtime in seconds. ``None`` disables the timeout."""
        self._timeout = timeout
        return self

    def set_compression_level(self, level) -> "MergeJob":
        self._preset = CompressionPreset.parse(level)
        self._logger.debug("Compression preset: %s", self._preset.name.lower())
        return self

    def add_file(self, path) -> "MergeJob":
        p = Path(path)
        if not p.exists():
            raise InvalidArgument(f"File not found: {path}")

        self._input_files.append(p)
        self._logger.debug("Added input: %s", p)
        return self

    def add_files(self, paths) -> "MergeJob":
        """
        Add several files in order. The first missing path aborts the batch;
        files added before it stay in the job.
        """
        if isinstance(paths, (str, bytes, os.PathLike)) or not isinstance(paths, Sequence):
            raise InvalidArgument("add_files expects a sequence of file paths.")

        for path in paths:
            self.add_file(path)
        return self

    def set_output_file(self, path) -> "MergeJob":
        """Full output path; takes precedence over folder + filename."""
        self._output_file = Path(path) if path else None
        return self

    def set_output_folder(self, folder) -> "MergeJob":
        folder = os.fspath(folder)
        if not os.path.isdir(folder):
            raise InvalidArgument(f"Folder does not exist: {folder}")

        self._output_folder = Path(strip_trailing_separators(folder))
        return self

    def set_output_filename(self, filename: str) -> "MergeJob":
        self._output_filename = filename
        return self

    def reset(self) -> "MergeJob":
        """Restore every option except the tool path to its default."""
        self._preset = DEFAULT_PRESET
        self._input_files: list[Path] = []
        self._output_file: Optional[Path] = None
        self._output_folder = Path(tempfile.gettempdir())
        self._output_filename: Optional[str] = None
        self._timeout: Optional[float] = DEFAULT_TIMEOUT
        return self

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def input_files(self) -> list[Path]:
        return list(self._input_files)

    @property
    def settings(self) -> JobSettings:
        return JobSettings(
            tool_path=self._tool_path,
            preset=self._preset,
            input_files=tuple(self._input_files),
            output_file=self._output_file,
            output_folder=self._output_folder,
            output_filename=self._output_filename,
            timeout=self._timeout,
        )

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------
    def resolve_output_path(self) -> Path:
        """Explicit output file, else folder / (filename or timestamped name)."""
        if self._output_file:
            return self._output_file

        filename = self._output_filename or default_output_filename(self._clock())
        # Leading separators are dropped so an absolute name stays under the folder.
        return self._output_folder / filename.lstrip("/\\")

    def build_command(self, output_file) -> list[str]:
        cmd = [self._tool_path, *BASE_OPTIONS]

        if self._preset is not CompressionPreset.NONE:
            cmd.append(f"-dPDFSETTINGS={self._preset.token}")

        cmd.append(f"-sOutputFile={os.fspath(output_file)}")
        cmd.extend(os.fspath(p) for p in self._input_files)
        return cmd

    def merge(self) -> Path:
        """
        Merge the configured inputs and return the path of the new PDF.

        Raises PreconditionFailed (< 2 inputs), ProcessFailure (non-zero
        exit, timeout, unstartable binary) or ArtifactMissing (exit 0 but
        no file on disk). A negative timeout raises InvalidArgument
        before the tool is started.
        """
        if len(self._input_files) < 2:
            raise PreconditionFailed("At least two PDF files are required for merging.")

        out_pdf = self.resolve_output_path()
        cmd = self.build_command(out_pdf)

        self._logger.info("Merging %d file(s) into %s", len(self._input_files), out_pdf)
        self._logger.debug("Running: %s", " ".join(cmd))

        result = self._runner(cmd, self._timeout)

        if not result.ok:
            err = ProcessFailure(
                cmd,
                result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
                timed_out=result.timed_out,
            )
            if result.timed_out:
                self._logger.error("Ghostscript timed out after %s s", self._timeout)
            else:
                self._logger.error("Ghostscript failed with exit code %s", result.returncode)
            raise err

        if not out_pdf.exists():
            raise ArtifactMissing(out_pdf)

        self._logger.info("Merged PDF written: %s", out_pdf)
        return out_pdf
