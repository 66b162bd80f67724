"""List top-level entries of the sandbox root."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer
from rich.table import Table

from outdir_tempdir.cli.common import console, require_root
from outdir_tempdir.tempdir import RANDOM_PREFIX

if TYPE_CHECKING:
    from pathlib import Path


def _describe(entry: Path) -> tuple[str, str]:
    """Return (kind, size) display columns for a sandbox entry."""
    if entry.is_symlink():
        return "link", "-"
    if entry.is_dir():
        kind = "random" if entry.name.startswith(RANDOM_PREFIX) else "dir"
        try:
            size = str(sum(1 for _ in entry.iterdir()))
        except OSError:
            size = "?"
        return kind, size
    return "file", f"{entry.stat().st_size} B"


def list_entries() -> None:
    """List the top-level entries of the sandbox root.

    Examples:
        outdir-tempdir list
    """
    root = require_root()
    entries = sorted(root.iterdir(), key=lambda p: p.name)

    if not entries:
        console.print(f"[yellow]Sandbox root is empty:[/] {root}")
        raise typer.Exit(code=0)

    table = Table(title=str(root), show_lines=False)
    table.add_column("Name", style="cyan")
    table.add_column("Kind", justify="center")
    table.add_column("Size", justify="right")

    for entry in entries:
        kind, size = _describe(entry)
        table.add_row(entry.name, kind, size)

    console.print(table)
    console.print(f"\n[dim]{len(entries)} entries[/]")


__all__ = ["list_entries"]
