from __future__ import annotations
import yaml
from datetime import datetime
from pathlib import Path
from typing import Callable

from .errors import InvalidArgument
from .merger import MergeJob
from .services.process_runner import Runner


DEFAULTS = {
    "gs_path": "gs",
    "compression": "default",
    "timeout": 60,
    "output_folder": None,
    "output_filename": None,
    "include_subfolders": False,
    "sort_by": "name",
    "sort_desc": False,
    }

class Settings:
    def __init__(self, data: dict | None = None):
        self._data = {**DEFAULTS, **(data or {})}

    @classmethod
    def from_file(cls, path: Path) -> "Settings":
        if not path.exists():
            return cls()
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise InvalidArgument(f"{path}: expected a mapping of settings")
        return cls(data)

    def override(self, **values) -> "Settings":
        """Return a copy with every non-None value replacing the current one."""
        return self.replace(**{k: v for k, v in values.items() if v is not None})

    def replace(self, **values) -> "Settings":
        return Settings({**self._data, **values})

    def as_job(
        self,
        clock: Callable[[], datetime] | None = None,
        runner: Runner | None = None,
    ) -> MergeJob:
        job = MergeJob(clock=clock, runner=runner)
        job.set_tool_path(self._data["gs_path"] or "gs")
        job.set_compression_level(self._data["compression"])

        timeout = self._data["timeout"]
        try:
            job.set_timeout(None if timeout is None else float(timeout))
        except (TypeError, ValueError):
            raise InvalidArgument(f"Invalid timeout: {timeout!r}") from None

        if self._data["output_folder"]:
            job.set_output_folder(Path(self._data["output_folder"]).expanduser())
        if self._data["output_filename"]:
            job.set_output_filename(str(self._data["output_filename"]))
        return job

    def get(self, key: str, default=None):
        return self._data.get(key, default)
