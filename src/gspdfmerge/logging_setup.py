import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

_def_logger = None

def get_logger(name: str = "gspdfmerge", logfile: Path | None = None) -> logging.Logger:
    global _def_logger
    if _def_logger:
        if logfile and not _has_file_handler(_def_logger, logfile):
            _add_file_handler(_def_logger, logfile)
        return _def_logger

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(ch)

    if logfile:
        _add_file_handler(logger, logfile)

    _def_logger = logger
    return logger

def set_verbose(verbose: bool) -> None:
    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)

def _add_file_handler(logger: logging.Logger, logfile: Path) -> None:
    fh = logging.FileHandler(logfile, encoding="utf-8")
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(fh)

def _has_file_handler(logger: logging.Logger, logfile: Path) -> bool:
    target = str(Path(logfile).resolve())
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )
