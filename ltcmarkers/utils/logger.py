"""Logging for marker imports.

Every module logs under the ``ltcmarkers`` namespace. The CLI calls
setup_logging() once per run; library callers that never do get plain
console output at INFO from the first get_logger() call.
"""

import contextlib
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Final

LOGGER_PREFIX: Final[str] = "ltcmarkers"

# File logs keep timestamps so several imports can share one log
FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT: Final[str] = "%(levelname)s: %(message)s"

BANNER_WIDTH: Final[int] = 60

_installed_handlers: list[logging.Handler] = []


def setup_logging(
    level: int | str = logging.INFO,
    log_file: Path | str | None = None,
    console: bool = True,
    verbose: bool = False,
) -> logging.Logger:
    """Route ltcmarkers logging to the console and, optionally, a log file.

    Handlers from an earlier call are closed and replaced, so running
    several imports in one process does not duplicate output.

    Args:
        level: Logging level name or number
        log_file: Append the import log to this file (parent dirs are created)
        console: Log to stdout
        verbose: Use the timestamped file format on the console too

    Returns:
        The package logger

    Example:
        >>> setup_logging(level="DEBUG", log_file="logs/day1_import.log")
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    package_logger = logging.getLogger(LOGGER_PREFIX)
    package_logger.setLevel(level)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        package_logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter(FILE_FORMAT if verbose else CONSOLE_FORMAT, DATE_FORMAT)
        )
        _installed_handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        handler.setLevel(level)
        package_logger.addHandler(handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, placed under the ltcmarkers namespace."""
    if not _installed_handlers:
        setup_logging()

    if name == LOGGER_PREFIX or name.startswith(f"{LOGGER_PREFIX}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")


def log_banner(logger: logging.Logger, *lines: str) -> None:
    """Log lines framed by rules, as used around each import."""
    logger.info("=" * BANNER_WIDTH)
    for line in lines:
        logger.info(line)
    logger.info("=" * BANNER_WIDTH)


@contextlib.contextmanager
def quiet_logging() -> Iterator[None]:
    """Silence ltcmarkers logging inside the block, then restore the level."""
    package_logger = logging.getLogger(LOGGER_PREFIX)
    previous = package_logger.level
    package_logger.setLevel(logging.CRITICAL + 1)
    try:
        yield
    finally:
        package_logger.setLevel(previous)
