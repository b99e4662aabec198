"""Incremental SHA-256 digest engine."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Protocol

from sha256tool.constants import DEFAULT_BUFFER_SIZE
from sha256tool.io.source import open_input

DIGEST_SIZE = 32
BLOCK_SIZE = 64


class ChunkReader(Protocol):
    """Anything exposing ``read_chunk`` like :class:`~sha256tool.io.source.InputHandle`."""

    def read_chunk(self, buffer: bytearray) -> int:
        ...


class Sha256Digest:
    """Stateful SHA-256 computation fed with arbitrarily sized chunks.

    Usage::

        state = Sha256Digest()
        state.update(b"ab")
        state.update(b"c")
        digest = state.finalize()

    ``finalize`` may be called once; ``update`` is rejected afterwards.
    """

    algorithm = "sha256"
    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE

    def __init__(self) -> None:
        self._hasher = hashlib.sha256()
        self.bytes_consumed = 0
        self.finalized = False

    def update(self, data: bytes | bytearray | memoryview) -> None:
        if self.finalized:
            raise RuntimeError("update() called on a finalized SHA-256 state")
        self._hasher.update(data)
        self.bytes_consumed += len(data)

    def finalize(self) -> bytes:
        if self.finalized:
            raise RuntimeError("finalize() called twice on the same SHA-256 state")
        self.finalized = True
        return self._hasher.digest()


def to_hex(digest: bytes) -> str:
    """Render a digest as lowercase hexadecimal."""
    return digest.hex()


def digest_stream(reader: ChunkReader, *, buffer_size: int = DEFAULT_BUFFER_SIZE) -> bytes:
    """Hash everything ``reader`` yields until end-of-stream."""

    state = Sha256Digest()
    buffer = bytearray(buffer_size)
    view = memoryview(buffer)
    while True:
        count = reader.read_chunk(buffer)
        if count == 0:
            break
        state.update(view[:count])
    return state.finalize()


def sha256sum(path: Path | str, *, buffer_size: int = DEFAULT_BUFFER_SIZE) -> str:
    """Return the SHA-256 hex digest for `path`."""
    with open_input(str(path)) as handle:
        return to_hex(digest_stream(handle, buffer_size=buffer_size))


__all__ = ["BLOCK_SIZE", "DIGEST_SIZE", "Sha256Digest", "digest_stream", "sha256sum", "to_hex"]
