"""Logging helpers for page-utils."""

import os
import sys
from pathlib import Path

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:^7} | {file.name}:{line} | {message}"


def _is_known_level(name: str) -> bool:
    try:
        logger.level(name)
    except ValueError:
        return False
    return True


def console_level(quiet: bool = False, verbose: int = 0) -> str:
    """Map CLI flags (or PAGE_UTILS_LOG_LEVEL) to a loguru level name.

    An override that is not a known loguru level is ignored.
    """
    override = os.getenv("PAGE_UTILS_LOG_LEVEL", "").strip().upper()
    if override and _is_known_level(override):
        return override

    if quiet:
        return "ERROR"
    if verbose == 1:
        return "INFO"
    if verbose >= 2:
        return "DEBUG"
    return "WARNING"


def configure_logger(source: str, quiet: bool = False, verbose: int = 0) -> None:
    """Configure Loguru logging."""
    # Clear any previously added handlers
    logger.remove()

    level = console_level(quiet=quiet, verbose=verbose)
    logger.add(sink=sys.stderr, level=level, format=LOG_FORMAT)

    log_dir = os.getenv("PAGE_UTILS_LOG_DIR")
    if not log_dir:
        logger.info(f"Logger configured for source '{source}' (stderr, {level}+).")
        return

    # File handler: DEBUG+, rotated daily, keep 7 days, zipped
    logs_dir = Path(log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"{source}_{'{time:YYYYMMDD}'}.log"

    logger.add(
        sink=str(log_path),
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="00:00",
        retention="7 days",
        compression="zip",
    )

    logger.info(
        f"Logger configured for source '{source}'. "
        f"Sinks: stderr (level={level}+), file (level=DEBUG+) at '{log_path}'."
    )
