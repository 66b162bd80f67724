"""Command line interface for outdir_tempdir."""

from outdir_tempdir.cli.app import app

__all__ = ["app"]
