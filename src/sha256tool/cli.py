"""Command-line entry point: compute or check SHA-256 message digests."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from sha256tool.config import ConfigError, load_config
from sha256tool.constants import PROGRAM_NAME, STDIN_NAME, __version__
from sha256tool.errors import ErrorKind, Sha256ToolError
from sha256tool.services.compute import run_compute
from sha256tool.services.verify import CheckOptions, run_check
from sha256tool.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Print or check SHA256 (256-bit) checksums.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROGRAM_NAME} {__version__}")
        raise typer.Exit()


def _fail(message: str, kind: ErrorKind) -> typer.Exit:
    typer.echo(f"{PROGRAM_NAME}: {message}", err=True)
    return typer.Exit(code=int(kind.exit_code))


@app.command()
def sha256sum(
    files: Optional[List[str]] = typer.Argument(None, help="Files to process, or '-' for standard input"),
    check: bool = typer.Option(False, "--check", "-c", help="read checksums from the FILEs and check them"),
    ignore_missing: bool = typer.Option(
        False, "--ignore-missing", help="don't fail or report status for missing files"
    ),
    quiet: bool = typer.Option(False, "--quiet", help="don't print OK for each successfully verified file"),
    status: bool = typer.Option(False, "--status", help="don't output anything, status code shows success"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML/TOML/JSON settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log diagnostics to stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Print or check SHA256 (256-bit) checksums."""

    try:
        cfg = load_config(config_path, overrides={"logging.level": "DEBUG"} if verbose else None)
    except ConfigError as exc:
        raise _fail(str(exc), ErrorKind.USAGE)

    logger = configure_logging(level=cfg.logging.level, log_path=cfg.logging.log_path)
    names = list(files or [])
    buffer_size = cfg.runtime.buffer_size

    try:
        if check:
            manifest = names[0] if names else STDIN_NAME
            if len(names) > 1:
                logger.debug("Check mode reads only %s; ignoring %s", manifest, names[1:])
            options = CheckOptions(quiet=quiet, status=status, ignore_missing=ignore_missing)
            code = run_check(manifest, options, buffer_size=buffer_size, emit=typer.echo)
        else:
            code = run_compute(names, buffer_size=buffer_size, emit=typer.echo)
    except Sha256ToolError as exc:
        logger.debug("Aborting (%s error): %s", exc.kind.value, exc)
        raise _fail(str(exc), exc.kind)

    raise typer.Exit(code=int(code))


def main() -> None:
    app(prog_name=PROGRAM_NAME)


__all__ = ["main", "app"]
