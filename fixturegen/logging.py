"""Logging helpers shared by the fetch/extract/generate steps."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_ROOT_LOGGER = "fixturegen"
_CONSOLE_FORMAT = "[fixturegen] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``fixturegen.<name>``, or the package logger when *name* is empty."""
    if not name:
        return logging.getLogger(_ROOT_LOGGER)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach console (stderr) and optional file handlers to the package logger.

    ``verbose`` lowers the threshold to DEBUG so every extracted entry is
    reported; ``quiet`` raises it to WARNING so only problems are shown.
    Calling this again replaces the handlers installed by a previous call.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(level)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = ["configure_logging", "get_logger"]
