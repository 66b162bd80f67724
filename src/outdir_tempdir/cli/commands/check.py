"""Check relative paths against the sandbox sanitization rules."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table

from outdir_tempdir.cli.common import console
from outdir_tempdir.exceptions import TempDirError
from outdir_tempdir.sanitize import sanitize_path


def check(
    paths: Annotated[
        list[str],
        typer.Argument(help="Relative paths to validate."),
    ],
) -> None:
    """Show how each path would be normalized, or why it is rejected.

    Nothing is created on disk. Exits with status 1 when any path is
    rejected.

    Examples:
        # Accepted, the "." segment is dropped
        outdir-tempdir check ./tmp/path

        # Rejected, escapes the sandbox
        outdir-tempdir check ../tmp /etc
    """
    table = Table(title="Path Check", show_lines=False)
    table.add_column("Input", style="cyan")
    table.add_column("Result")

    rejected = 0
    for raw in paths:
        try:
            target = sanitize_path(raw)
        except TempDirError as e:
            rejected += 1
            table.add_row(raw, f"[red]{e}[/]")
            continue
        if not target.parts:
            rejected += 1
            table.add_row(raw, "[red]empty target, resolves to the sandbox root[/]")
        else:
            table.add_row(raw, f"[green]{target}[/]")

    console.print(table)
    if rejected:
        console.print(f"\n[red]{rejected} of {len(paths)} path(s) rejected[/]")
        raise typer.Exit(code=1)


__all__ = ["check"]
