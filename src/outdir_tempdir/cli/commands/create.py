"""Create a directory under the sandbox root."""

from __future__ import annotations

from typing import Annotated

import typer

from outdir_tempdir.cli.common import console, exit_error
from outdir_tempdir.exceptions import TempDirError
from outdir_tempdir.tempdir import TempDir


def create(
    path: Annotated[
        str | None,
        typer.Argument(help="Relative path to create (random test-<uuid> when omitted)."),
    ] = None,
) -> None:
    """Create a directory in the sandbox and print its full path.

    The directory is never auto-removed; use ``purge`` to clean up.

    Examples:
        # Random name
        outdir-tempdir create

        # Nested path
        outdir-tempdir create foo/bar/baz
    """
    try:
        tmp = TempDir.create_random() if path is None else TempDir.create(path)
    except TempDirError as e:
        exit_error(str(e))

    # Plain print keeps the path usable from shell substitution
    console.print(str(tmp.path), highlight=False, soft_wrap=True)


__all__ = ["create"]
