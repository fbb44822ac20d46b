from __future__ import annotations
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable

from .config import Settings
from .logging_setup import get_logger
from .services.file_discovery import discover_pdfs, sort_files
from .services.process_runner import Runner


def collect_inputs(input_dir: Path, settings: Settings) -> list[Path]:
    """PDFs found in input_dir, ordered according to the settings."""
    files = discover_pdfs(input_dir, bool(settings.get("include_subfolders")))
    return sort_files(files, str(settings.get("sort_by")), bool(settings.get("sort_desc")))


def run_merge(
    files: Iterable[Path],
    settings: Settings,
    output_file: Path | None = None,
    clock: Callable[[], datetime] | None = None,
    runner: Runner | None = None,
    log_file: Path | None = None,
) -> dict:
    """Merge an explicit, already ordered list of files and report on it."""
    logger = get_logger(logfile=log_file)

    job = settings.as_job(clock=clock, runner=runner)
    job.add_files([Path(f) for f in files])
    if output_file:
        job.set_output_file(output_file)

    started = time.monotonic()
    out_pdf = job.merge()
    elapsed = time.monotonic() - started

    report = {
        "output": str(out_pdf),
        "merged_count": len(job.input_files),
        "inputs": [str(p) for p in job.input_files],
        "compression": job.settings.preset.name.lower(),
        "elapsed_seconds": round(elapsed, 3),
    }

    logger.info("Merge complete: %s", report)
    return report
