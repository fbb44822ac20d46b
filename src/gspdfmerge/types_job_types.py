from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .compression import CompressionPreset


@dataclass(frozen=True)
class JobSettings:
    """Point-in-time copy of a MergeJob's configuration."""
    tool_path: str
    preset: CompressionPreset
    input_files: tuple[Path, ...]
    output_file: Optional[Path]
    output_folder: Path
    output_filename: Optional[str]
    timeout: Optional[float]
