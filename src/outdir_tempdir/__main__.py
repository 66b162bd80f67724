"""Allow ``python -m outdir_tempdir``."""

from outdir_tempdir.cli.app import app

if __name__ == "__main__":
    app()
