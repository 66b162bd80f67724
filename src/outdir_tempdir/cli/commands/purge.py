"""Remove directories left behind under the sandbox root."""

from __future__ import annotations

import shutil
from typing import Annotated

import typer

from outdir_tempdir.cli.common import console, exit_error, require_root
from outdir_tempdir.tempdir import RANDOM_PREFIX


def purge(
    all_dirs: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="Remove every top-level directory, not only random test-* ones.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Do not ask for confirmation."),
    ] = False,
) -> None:
    """Remove leftover directories from the sandbox root.

    Only directories are removed; files and symlinks at the top level are
    left alone.

    Examples:
        # Remove random test-<uuid> directories
        outdir-tempdir purge

        # Remove every directory without prompting
        outdir-tempdir purge --all --yes
    """
    root = require_root()
    victims = sorted(
        entry
        for entry in root.iterdir()
        if entry.is_dir() and not entry.is_symlink() and (all_dirs or entry.name.startswith(RANDOM_PREFIX))
    )

    if not victims:
        console.print("[green]Nothing to purge.[/]")
        raise typer.Exit(code=0)

    for entry in victims:
        console.print(f"  [dim]{entry.name}[/]")
    if not yes and not typer.confirm(f"Remove {len(victims)} directory(ies) from {root}?"):
        console.print("[yellow]Aborted.[/]")
        raise typer.Exit(code=1)

    failed = 0
    for entry in victims:
        try:
            shutil.rmtree(entry)
        except OSError as e:
            failed += 1
            console.print(f"[red]Failed to remove {entry.name}: {e}[/]")

    if failed:
        exit_error(f"{failed} of {len(victims)} directories could not be removed")
    console.print(f"[green]Removed {len(victims)} directory(ies).[/]")


__all__ = ["purge"]
