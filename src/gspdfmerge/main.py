from __future__ import annotations
from pathlib import Path
from typing import List, Optional

import typer
import yaml

from .compression import CompressionPreset
from .config import Settings
from .errors import GsMergeError, ProcessFailure
from .logging_setup import get_logger, set_verbose
from .pipeline import collect_inputs, run_merge

app = typer.Typer(help="Merge PDF files with Ghostscript.")


@app.command()
def merge(
    files: Optional[List[Path]] = typer.Argument(None, help="PDF files, in merge order."),
    input_dir: Optional[Path] = typer.Option(None, "--input-dir", exists=True, file_okay=False,
                                             help="Merge every PDF found in this folder."),
    include_subfolders: Optional[bool] = typer.Option(None, "--include-subfolders/--no-subfolders"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Full output path."),
    output_folder: Optional[Path] = typer.Option(None, "--output-folder"),
    output_filename: Optional[str] = typer.Option(None, "--output-filename"),
    compression: Optional[str] = typer.Option(None, "--compression", "-c",
                                              help="none|screen|ebook|printer|prepress|default"),
    gs_path: Optional[str] = typer.Option(None, "--gs-path"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Seconds."),
    no_timeout: bool = typer.Option(False, "--no-timeout"),
    config: Path = typer.Option(Path("config.yaml"), exists=False),
    log_file: Optional[Path] = typer.Option(None, "--log-file"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Merge the given PDFs into a single file and print its path."""
    logger = get_logger(logfile=log_file)
    set_verbose(verbose)

    try:
        settings = Settings.from_file(config).override(
            gs_path=gs_path,
            compression=compression,
            timeout=timeout,
            output_folder=str(output_folder) if output_folder else None,
            output_filename=output_filename,
            include_subfolders=include_subfolders,
        )
    except yaml.YAMLError as exc:
        logger.error("Cannot read %s: %s", config, exc)
        typer.echo(f"Error: invalid config file {config}: {exc}", err=True)
        raise typer.Exit(code=1)
    except GsMergeError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if no_timeout:
        settings = settings.replace(timeout=None)

    inputs = list(files or [])
    if input_dir:
        inputs.extend(collect_inputs(input_dir, settings))

    try:
        report = run_merge(inputs, settings, output_file=output)
    except ProcessFailure as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    except GsMergeError as exc:
        logger.error("%s", exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(report["output"])


@app.command()
def presets():
    """List the supported compression presets."""
    for p in CompressionPreset.all():
        typer.echo(f"{p.name.lower():<10}{p.token or '(no -dPDFSETTINGS)'}")


if __name__ == "__main__":
    app()
