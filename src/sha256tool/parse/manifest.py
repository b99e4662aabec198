"""Checksum manifest parser for ``<hexdigest>  <path>`` lines."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from sha256tool.constants import DEFAULT_BUFFER_SIZE
from sha256tool.errors import MalformedManifestError
from sha256tool.io.source import InputHandle


@dataclass(frozen=True)
class ChecksumEntry:
    """One manifest line: the expected digest and the path it applies to."""

    expected_hex: str
    path: str
    line_number: int = 0


def parse_line(line: str, line_number: int, *, source: str = "-") -> ChecksumEntry | None:
    """Parse a single decoded manifest line.

    Returns ``None`` for blank lines and raises :class:`MalformedManifestError`
    unless it splits on whitespace into exactly two tokens, the digest and the
    path. Paths containing whitespace are therefore rejected.
    """

    parts = line.split()
    if not parts:
        return None
    if len(parts) != 2:
        raise MalformedManifestError(source, line_number)
    return ChecksumEntry(expected_hex=parts[0], path=parts[1], line_number=line_number)


def iter_lines(handle: InputHandle, *, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[bytes]:
    """Yield raw lines (without the trailing newline) from ``handle``."""

    buffer = bytearray(buffer_size)
    pending = bytearray()
    while True:
        count = handle.read_chunk(buffer)
        if count == 0:
            break
        # only the fresh chunk is searched for newlines
        *complete, tail = bytes(buffer[:count]).split(b"\n")
        if complete:
            pending += complete[0]
            yield bytes(pending)
            yield from complete[1:]
            pending = bytearray()
        pending += tail
    if pending:
        yield bytes(pending)


def iter_manifest(handle: InputHandle, *, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[ChecksumEntry]:
    """Lazily yield entries from a manifest stream.

    A malformed line aborts iteration with :class:`MalformedManifestError`;
    entries before it have already been handed to the caller.
    """

    for line_number, raw in enumerate(iter_lines(handle, buffer_size=buffer_size), start=1):
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        entry = parse_line(raw.decode("utf-8", errors="surrogateescape"), line_number, source=handle.name)
        if entry is not None:
            yield entry


__all__ = ["ChecksumEntry", "iter_lines", "iter_manifest", "parse_line"]
