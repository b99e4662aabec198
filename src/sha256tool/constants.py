"""Program-wide constants and exit codes."""

from __future__ import annotations

from enum import IntEnum

PROGRAM_NAME = "sha256sum"
__version__ = "1.0.0"

# Read size for file and stdin streams.
DEFAULT_BUFFER_SIZE = 16384

STDIN_NAME = "-"


class ExitCode(IntEnum):
    """Process exit statuses."""

    OK = 0
    MISMATCH = 1
    ERROR = 2


__all__ = ["DEFAULT_BUFFER_SIZE", "ExitCode", "PROGRAM_NAME", "STDIN_NAME", "__version__"]
