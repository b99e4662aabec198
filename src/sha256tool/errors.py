"""Error taxonomy shared by the hashing, parsing and verification layers."""

from __future__ import annotations

from enum import Enum

from sha256tool.constants import ExitCode


class ErrorKind(str, Enum):
    """Closed set of failure categories surfaced to the CLI."""

    USAGE = "usage"
    RESOURCE = "resource"
    FORMAT = "format"
    INTEGRITY = "integrity"

    @property
    def exit_code(self) -> ExitCode:
        # integrity failures are tallied, never fatal
        if self is ErrorKind.INTEGRITY:
            return ExitCode.MISMATCH
        return ExitCode.ERROR


class Sha256ToolError(Exception):
    """Base error carrying an :class:`ErrorKind` and optional diagnostic detail."""

    kind: ErrorKind = ErrorKind.RESOURCE

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class UnreadableInputError(Sha256ToolError):
    """Raised when an input name cannot be opened for reading."""

    kind = ErrorKind.RESOURCE

    def __init__(self, name: str, *, detail: str | None = None) -> None:
        super().__init__(name, detail=detail)
        self.name = name


class InputReadError(Sha256ToolError):
    """Raised when reading an already opened input fails mid-stream."""

    kind = ErrorKind.RESOURCE

    def __init__(self, name: str, *, detail: str | None = None) -> None:
        super().__init__(name, detail=detail)
        self.name = name


class MalformedManifestError(Sha256ToolError):
    """Raised for a manifest line that is not ``<digest> <path>``."""

    kind = ErrorKind.FORMAT

    def __init__(self, source: str, line_number: int) -> None:
        super().__init__(f"{source}: {line_number}: improperly formatted SHA256 checksum line")
        self.source = source
        self.line_number = line_number


__all__ = [
    "ErrorKind",
    "InputReadError",
    "MalformedManifestError",
    "Sha256ToolError",
    "UnreadableInputError",
]
