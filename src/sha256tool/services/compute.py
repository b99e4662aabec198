"""Compute mode: print ``<hexdigest>  <path>`` lines."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from sha256tool.constants import DEFAULT_BUFFER_SIZE, STDIN_NAME, ExitCode
from sha256tool.io.source import open_input
from sha256tool.util.hashing import digest_stream, to_hex

logger = logging.getLogger("sha256tool.compute")


def normalize_path(name: str) -> str:
    return name.replace("\\", "/")


def format_digest_line(digest: bytes, name: str) -> str:
    """Format one manifest-compatible output line."""
    return f"{to_hex(digest)}  {normalize_path(name)}"


def run_compute(
    names: Sequence[str],
    *,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    emit: Callable[..., None],
) -> ExitCode:
    """Hash each input in order and emit its line.

    The first open or read failure propagates; lines already emitted stay.
    """

    for name in names or [STDIN_NAME]:
        with open_input(name) as handle:
            digest = digest_stream(handle, buffer_size=buffer_size)
        logger.debug("Hashed %s", name)
        emit(format_digest_line(digest, name))
    return ExitCode.OK


__all__ = ["format_digest_line", "normalize_path", "run_compute"]
