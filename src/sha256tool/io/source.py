"""Resolve input names to readable byte streams."""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO

from sha256tool.constants import STDIN_NAME
from sha256tool.errors import InputReadError, UnreadableInputError

logger = logging.getLogger("sha256tool.io")


class InputHandle:
    """Sequential read-only byte source, either a file or standard input.

    Standard input is never closed by the handle; files are closed on
    :meth:`close` or when leaving a ``with`` block.
    """

    def __init__(self, name: str, stream: BinaryIO, *, is_stdin: bool = False) -> None:
        self.name = name
        self.is_stdin = is_stdin
        self._stream: BinaryIO | None = stream

    @property
    def closed(self) -> bool:
        return self._stream is None

    def read_chunk(self, buffer: bytearray) -> int:
        """Fill ``buffer`` with up to ``len(buffer)`` bytes; 0 means end-of-stream."""

        if self._stream is None:
            raise ValueError(f"read from closed input {self.name!r}")
        try:
            count = self._stream.readinto(buffer)
        except OSError as exc:
            raise InputReadError(self.name, detail=exc.strerror or str(exc)) from exc
        return count or 0

    def close(self) -> None:
        stream, self._stream = self._stream, None
        if stream is not None and not self.is_stdin:
            stream.close()

    def __enter__(self) -> "InputHandle":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def is_stdin_name(name: str) -> bool:
    return name in (STDIN_NAME, "")


def open_input(name: str) -> InputHandle:
    """Open ``name`` for reading, treating ``-`` and the empty string as stdin."""

    if is_stdin_name(name):
        logger.debug("Reading from standard input")
        return InputHandle(name, sys.stdin.buffer, is_stdin=True)

    try:
        stream = open(name, "rb")
    except OSError as exc:
        logger.debug("Cannot open %s: %s", name, exc)
        raise UnreadableInputError(name, detail=exc.strerror or str(exc)) from exc
    return InputHandle(name, stream)


__all__ = ["InputHandle", "is_stdin_name", "open_input"]
