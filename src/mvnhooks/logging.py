"""Logging setup for hook installation runs.

Everything is logged under the ``mvnhooks`` logger. A run logs either to
stderr or to a file, e.g. when hooks are installed from a build whose console
output is hidden.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from mvnhooks.errors import ConfigurationError

__all__ = ["LEVELS", "configure_logging", "get_logger"]

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# DEBUG records carry the source line
_DEBUG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _open_handler(log_file: Path | None) -> logging.Handler:
    if log_file is None:
        return logging.StreamHandler(sys.stderr)
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot open log file {log_file}: {exc}") from exc


def configure_logging(*, level: str = "INFO", log_file: Path | None = None) -> None:
    """
    Route ``mvnhooks`` log records to stderr or ``log_file``.

    Calling it again replaces the previous handler.

    Args:
        level: One of LEVELS, case-insensitive.
        log_file: File to append to; its directory is created if needed.

    Raises:
        ConfigurationError: If the level is unknown or the file cannot be opened.
    """
    level_name = level.upper()
    if level_name not in LEVELS:
        raise ConfigurationError(f"Unknown log level: {level!r}")
    log_level = logging.getLevelName(level_name)

    handler = _open_handler(log_file)
    handler.setFormatter(
        logging.Formatter(
            fmt=_DEBUG_FORMAT if log_level == logging.DEBUG else _FORMAT,
            datefmt=_DATE_FORMAT,
        )
    )
    handler.setLevel(log_level)

    logger = logging.getLogger("mvnhooks")
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()
    logger.setLevel(log_level)
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return the ``mvnhooks.<name>`` logger."""
    return logging.getLogger(f"mvnhooks.{name}")
