"""Typer application for the ``outdir-tempdir`` command."""

from __future__ import annotations

from typing import Annotated

import typer

from outdir_tempdir import meta
from outdir_tempdir.cli.commands.check import check
from outdir_tempdir.cli.commands.create import create
from outdir_tempdir.cli.commands.listing import list_entries
from outdir_tempdir.cli.commands.purge import purge
from outdir_tempdir.cli.common import configure_logging, console, require_root

app = typer.Typer(
    name=meta.__app_name__,
    help="Inspect and manage the outdir-tempdir sandbox root.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{meta.__app_name__} {meta.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logs."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Sandboxed temporary directories for test harnesses."""
    configure_logging(verbose)


@app.command("root")
def show_root() -> None:
    """Print the sandbox root named by OUTDIR_TEMPDIR_ROOT."""
    console.print(str(require_root()), highlight=False, soft_wrap=True)


app.command("check")(check)
app.command("create")(create)
app.command("list")(list_entries)
app.command("purge")(purge)


__all__ = ["app"]
