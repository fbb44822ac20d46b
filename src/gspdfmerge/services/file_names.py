from __future__ import annotations
from datetime import datetime

DEFAULT_NAME_FORMAT = "merged_%Y%m%d_%H%M%S.pdf"


def default_output_filename(now: datetime) -> str:
    # e.g. merged_20240131_174502.pdf
    return now.strftime(DEFAULT_NAME_FORMAT)


def strip_trailing_separators(folder: str) -> str:
    """Drop trailing '/' and '\\' but never reduce a root path to ''."""
    stripped = folder.rstrip("/\\")
    return stripped or folder[:1]
