"""Logging setup utilities."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path


def _is_console_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)


def configure_logging(*, level: str = "WARNING", log_path: Path | None = None) -> logging.Logger:
    """Configure the ``sha256tool`` logger.

    Diagnostics go to stderr so they never mix with digest or verification
    lines on stdout.
    """

    logger = logging.getLogger("sha256tool")
    logger.setLevel(level)

    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    # Rebind to the current stderr; it may have been swapped since the last call.
    for handler in [h for h in logger.handlers if _is_console_handler(h)]:
        logger.removeHandler(handler)
    stream_handler = logging.StreamHandler(stream=sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_path and os.path.abspath(log_path) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging"]
