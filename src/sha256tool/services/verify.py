"""Check mode: verify files against a checksum manifest."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from sha256tool.constants import DEFAULT_BUFFER_SIZE, PROGRAM_NAME, ExitCode
from sha256tool.errors import ErrorKind, InputReadError, UnreadableInputError
from sha256tool.io.source import is_stdin_name, open_input
from sha256tool.parse.manifest import ChecksumEntry, iter_manifest
from sha256tool.util.hashing import digest_stream, to_hex

logger = logging.getLogger("sha256tool.verify")

Emit = Callable[..., None]


class VerificationOutcome(Enum):
    """Result of checking a single manifest entry."""

    MATCHED = "matched"
    MISMATCHED = "mismatched"
    UNREADABLE = "unreadable"
    # Never produced per entry: malformed lines abort the run.
    MALFORMED = "malformed"


@dataclass(frozen=True)
class CheckOptions:
    """Reporting switches for check mode."""

    quiet: bool = False
    status: bool = False
    ignore_missing: bool = False


@dataclass
class AggregateTally:
    """Running failure counters for one manifest."""

    mismatched: int = 0
    unreadable: int = 0

    def record(self, outcome: VerificationOutcome) -> None:
        if outcome is VerificationOutcome.MISMATCHED:
            self.mismatched += 1
        elif outcome is VerificationOutcome.UNREADABLE:
            self.mismatched += 1
            self.unreadable += 1

    @property
    def exit_code(self) -> ExitCode:
        return ErrorKind.INTEGRITY.exit_code if self.mismatched else ExitCode.OK


def verify_entry(
    entry: ChecksumEntry,
    *,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    stdin_available: bool = True,
) -> VerificationOutcome:
    """Recompute the digest of ``entry.path`` and compare it with the expected value.

    With ``stdin_available`` false (the manifest itself is being read from
    standard input) a ``-`` entry is unreadable.
    """

    if not stdin_available and is_stdin_name(entry.path):
        logger.debug("Standard input is the manifest; cannot hash it as %r", entry.path)
        return VerificationOutcome.UNREADABLE

    try:
        handle = open_input(entry.path)
    except UnreadableInputError:
        return VerificationOutcome.UNREADABLE

    with handle:
        try:
            digest = digest_stream(handle, buffer_size=buffer_size)
        except InputReadError as exc:
            logger.debug("Read failure while hashing %s: %s", entry.path, exc)
            return VerificationOutcome.MISMATCHED

    if to_hex(digest) == entry.expected_hex:
        return VerificationOutcome.MATCHED
    return VerificationOutcome.MISMATCHED


def render_outcome(entry: ChecksumEntry, outcome: VerificationOutcome, options: CheckOptions) -> str | None:
    """Return the console line for ``outcome``, or ``None`` when it is suppressed."""

    if options.status:
        return None
    if outcome is VerificationOutcome.MATCHED:
        return None if options.quiet else f"{entry.path}: OK"
    if outcome is VerificationOutcome.UNREADABLE and options.ignore_missing:
        return None
    return f"{entry.path}: FAILED"


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def summary_lines(tally: AggregateTally, options: CheckOptions) -> list[str]:
    """Warnings printed to stderr once every entry has been processed."""

    if options.status or not tally.mismatched:
        return []

    lines = [
        f"{PROGRAM_NAME}: WARNING: {tally.mismatched} computed "
        f"{_plural(tally.mismatched, 'checksum', 'checksums')} did NOT match"
    ]
    if tally.unreadable and not options.ignore_missing:
        lines.append(
            f"{PROGRAM_NAME}: WARNING: {tally.unreadable} listed "
            f"{_plural(tally.unreadable, 'file', 'files')} could not be read"
        )
    return lines


def check_entries(
    entries: Iterable[ChecksumEntry],
    options: CheckOptions,
    *,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    stdin_available: bool = True,
    emit: Emit,
) -> AggregateTally:
    """Verify ``entries`` in order, emitting per-entry lines as they complete."""

    tally = AggregateTally()
    for entry in entries:
        outcome = verify_entry(entry, buffer_size=buffer_size, stdin_available=stdin_available)
        logger.debug("%s -> %s", entry.path, outcome.value)
        tally.record(outcome)
        line = render_outcome(entry, outcome, options)
        if line is not None:
            emit(line)
    return tally


def run_check(
    manifest_name: str,
    options: CheckOptions,
    *,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    emit: Emit,
) -> ExitCode:
    """Verify every entry of the manifest named ``manifest_name``.

    Raises :class:`UnreadableInputError` when the manifest cannot be opened and
    :class:`~sha256tool.errors.MalformedManifestError` on the first bad line.
    """

    with open_input(manifest_name) as manifest:
        entries = iter_manifest(manifest, buffer_size=buffer_size)
        tally = check_entries(
            entries,
            options,
            buffer_size=buffer_size,
            stdin_available=not manifest.is_stdin,
            emit=emit,
        )

    for line in summary_lines(tally, options):
        emit(line, err=True)
    logger.debug("Checked %s: mismatched=%d unreadable=%d", manifest_name, tally.mismatched, tally.unreadable)
    return tally.exit_code


__all__ = [
    "AggregateTally",
    "CheckOptions",
    "VerificationOutcome",
    "check_entries",
    "render_outcome",
    "run_check",
    "summary_lines",
    "verify_entry",
]
