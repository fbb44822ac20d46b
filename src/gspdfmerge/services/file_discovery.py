from __future__ import annotations
from pathlib import Path
from typing import Iterable
import os

PDF_EXTS = {".pdf"}


def discover_pdfs(root: Path, include_subfolders: bool = False) -> Iterable[Path]:
    """Yield the PDF files under root (optionally including subfolders)."""
    if include_subfolders:
        for dirpath, _, filenames in os.walk(root):
            for fn in filenames:
                p = Path(dirpath) / fn
                if p.suffix.lower() in PDF_EXTS:
                    yield p
    else:
        for p in root.iterdir():
            if p.is_file() and p.suffix.lower() in PDF_EXTS:
                yield p


def sort_files(files: Iterable[Path], sort_by: str = "name", desc: bool = False) -> list[Path]:
    """Sort by name/created/modified. Unknown keys fall back to name."""
    if sort_by == "created":
        key = lambda p: p.stat().st_ctime
    elif sort_by == "modified":
        key = lambda p: p.stat().st_mtime
    else:
        key = lambda p: p.name.lower()

    return sorted(files, key=key, reverse=desc)
