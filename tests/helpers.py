from __future__ import annotations

import hashlib
from collections.abc import Mapping, Sequence
from pathlib import Path

from typer.testing import CliRunner

from sha256tool import cli

MISSING_DIGEST = "deadbeef" * 8


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def seed_files(root: Path, files: Mapping[str, bytes]) -> dict[str, Path]:
    """Write ``files`` under ``root`` and return their paths by name."""

    paths: dict[str, Path] = {}
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        paths[name] = path
    return paths


def write_manifest(root: Path, lines: Sequence[str], *, name: str = "SHA256SUMS") -> Path:
    path = root / name
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def invoke(args: Sequence[str], *, input: bytes | None = None):
    """Run the CLI in-process and return the click ``Result``."""
    return CliRunner().invoke(cli.app, list(args), input=input)
