"""Shared helpers for CLI commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler

from outdir_tempdir.exceptions import RootNotFoundError
from outdir_tempdir.root import resolve_root

if TYPE_CHECKING:
    from pathlib import Path

console = Console()


def exit_error(message: str, *, hint: str | None = None) -> NoReturn:
    """Print an error message and exit with status 1.

    Args:
        message: Error description, rendered in red.
        hint: Optional follow-up line, rendered dimmed.
    """
    console.print(f"[red]{message}[/]")
    if hint:
        console.print(f"[dim]{hint}[/]")
    raise typer.Exit(code=1)


def require_root() -> Path:
    """Return the sandbox root or exit with a readable error."""
    try:
        return resolve_root()
    except RootNotFoundError as e:
        exit_error(str(e), hint="Point OUTDIR_TEMPDIR_ROOT at an existing directory.")


def configure_logging(verbose: bool) -> None:
    """Route package DEBUG logs to the shared console when verbose.

    Without ``--verbose`` the package logger is left untouched.

    Args:
        verbose: Show DEBUG records on the console.
    """
    if not verbose:
        return
    handler = RichHandler(console=console, show_path=False, show_time=False)
    package_logger = logging.getLogger("outdir_tempdir")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG)


__all__ = [
    "configure_logging",
    "console",
    "exit_error",
    "require_root",
]
